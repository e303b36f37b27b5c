"""Pydantic model for audit log rows."""

from typing import Optional

from pydantic import Field

from .entity import Entity


class AuditLog(Entity):
    """One immutable audit record.

    ``entityType``/``entityId`` reference the affected record by name
    only; no referential check is made against the other collections.
    """

    action: str = Field(..., examples=["block_device"])
    entity_type: str = Field(..., alias="entityType", examples=["Device"])
    entity_id: str = Field(..., alias="entityId", examples=["device-1"])
    actor_id: Optional[str] = Field(None, alias="actorId", examples=["admin-user"])
    description: Optional[str] = None
    reason: Optional[str] = None
