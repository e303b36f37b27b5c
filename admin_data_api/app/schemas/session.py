"""
Pydantic models for user sessions.

``UserSession`` is a stored entity that administrators may revoke.
``SessionDescriptor`` is the static description of the caller's own
admin session returned by ``GET /auth/me``; it is never stored.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from .entity import Entity


class UserSession(Entity):
    user_id: str = Field(..., alias="userId", examples=["user-1"])


class SessionRevokeRequest(BaseModel):
    """Body of ``DELETE /sessions``."""

    session_id: str = Field(..., alias="sessionId", examples=["session-1"])

    model_config = {
        "populate_by_name": True,
    }


class SessionDescriptor(BaseModel):
    id: str
    user_id: str = Field(..., alias="userId")
    email: str
    role: str
    permissions: List[str]
    created_at: datetime = Field(..., alias="createdAt")
    expires_at: datetime = Field(..., alias="expiresAt")

    model_config = {
        "populate_by_name": True,
    }
