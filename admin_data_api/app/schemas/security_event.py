"""
Pydantic models for security events.

Security events are append‑only.  ``SecurityEventCreate`` is the body
accepted by ``POST /security-events``; the id and creation time are
assigned by ``SecurityEventService.record``.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .entity import Entity

SecurityEventType = Literal[
    "login",
    "logout",
    "failed_login",
    "permission_denied",
    "data_access",
    "suspicious_activity",
]
Severity = Literal["info", "warning", "error", "critical"]


class SecurityEvent(Entity):
    type: str = Field(..., examples=["login"])
    severity: str = Field(..., examples=["info"])
    user_id: Optional[str] = Field(None, alias="userId", examples=["user-1"])


class SecurityEventCreate(BaseModel):
    """Schema for recording a security event.

    Fields other than the declared ones (``ipAddress``, ``userAgent``,
    ``details`` ...) are accepted and stored as they are.
    """

    type: SecurityEventType = Field(..., examples=["failed_login"])
    severity: Severity = Field(..., examples=["warning"])
    user_id: Optional[str] = Field(None, alias="userId", examples=["user-2"])

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
    }
