"""
Pydantic models for devices.

A device belongs to a user and carries two mutable fields: ``blocked``
and ``trustScore``.  The trust score is kept inside ``0..100`` by the
model itself, so a mutation that tried to push it out of range would
fail validation instead of corrupting the stored record.
"""

from pydantic import BaseModel, Field

from .entity import Entity

TRUST_SCORE_MIN = 0
TRUST_SCORE_MAX = 100


class Device(Entity):
    user_id: str = Field(..., alias="userId", examples=["user-1"])
    blocked: bool = Field(False, examples=[False])
    trust_score: int = Field(
        50,
        alias="trustScore",
        ge=TRUST_SCORE_MIN,
        le=TRUST_SCORE_MAX,
        examples=[95],
    )


class DeviceActionRequest(BaseModel):
    """Body of ``PATCH /devices``.

    ``action`` is one of ``block``, ``unblock`` or ``trust``.  Other
    values are rejected by ``DeviceService.apply_action``.
    """

    device_id: str = Field(..., alias="deviceId", examples=["device-1"])
    action: str = Field(..., examples=["block"])

    model_config = {
        "populate_by_name": True,
    }
