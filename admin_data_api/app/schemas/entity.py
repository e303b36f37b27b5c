"""
Base model shared by every stored entity.

An entity declares the handful of fields the store and the query layer
rely on (``id`` and ``createdAt``, plus per‑collection key fields in
subclasses).  Any other field supplied when the entity is created is
kept as opaque payload and serialized back unchanged.  Attribute names
are snake_case; the wire names are the camelCase aliases.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Set

from pydantic import BaseModel, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entity(BaseModel):
    id: str = Field(..., min_length=1, examples=["device-1"])
    created_at: datetime = Field(..., alias="createdAt", examples=["2025-09-01T10:00:00Z"])

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
        "validate_assignment": True,
    }

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are UTC so that date‑range filters can always
        # compare against timezone‑aware bounds.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def get_field(self, wire_name: str) -> Optional[Any]:
        """Return the value of a field by its wire (alias) name.

        Declared fields are looked up through their alias; anything else
        comes from the pass‑through payload.  Missing fields yield
        ``None``.
        """
        for name, info in type(self).model_fields.items():
            if (info.alias or name) == wire_name:
                return getattr(self, name)
        return (self.model_extra or {}).get(wire_name)

    @classmethod
    def declared_keys(cls) -> Set[str]:
        """Attribute names and wire aliases of every declared field."""
        keys: Set[str] = set()
        for name, info in cls.model_fields.items():
            keys.add(name)
            if info.alias:
                keys.add(info.alias)
        return keys

    def to_wire(self) -> dict:
        """Serialize to the JSON representation used on the wire."""
        return self.model_dump(mode="json", by_alias=True)
