"""
Service layer abstraction.

Each service encapsulates the query and mutation logic for one
resource.  Services receive the ``DataStore`` explicitly so handlers
never touch the collections directly.
"""
