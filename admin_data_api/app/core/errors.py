"""
Domain exceptions raised by the store and the service layer.

Endpoints translate these into ``HTTPException`` instances and the
application level handlers in ``core.responses`` turn those into the
error envelope.  The store and services never build HTTP responses
themselves.
"""


class DuplicateIdError(ValueError):
    """An entity with the same id already exists in the collection."""


class NotFoundError(ValueError):
    """The referenced entity does not exist."""


class QueryValidationError(ValueError):
    """A recognized query parameter could not be parsed."""


class ActionValidationError(ValueError):
    """A mutation request named an action the resource does not support."""
