"""
Pydantic models for platform users.

Users are the customers managed from the dashboard (not the admins
using it).  Only ``status`` and ``notes`` can be changed through the
API.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .entity import Entity

UserStatus = Literal["active", "inactive", "blocked"]


class User(Entity):
    name: str = Field(..., examples=["Ahmed Hassan"])
    email: str = Field(..., examples=["ahmed@sharoobi.local"])
    status: str = Field(..., examples=["active"])
    notes: List[str] = Field(default_factory=list)


class UserUpdateRequest(BaseModel):
    """Body of ``PATCH /users``.  At least one of ``status``/``notes`` is required."""

    user_id: str = Field(..., alias="userId", examples=["user-3"])
    status: Optional[UserStatus] = Field(None, examples=["blocked"])
    notes: Optional[List[str]] = None
    reason: Optional[str] = Field(None, examples=["Chargeback fraud"])

    model_config = {
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def _has_change(self) -> "UserUpdateRequest":
        if self.status is None and self.notes is None:
            raise ValueError("Provide status or notes")
        return self
