"""
Pydantic schema definitions for entities and request bodies.

Every stored entity derives from ``Entity`` which declares the fields
the service layer relies on and carries any other payload fields
through untouched.
"""
