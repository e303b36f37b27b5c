"""Pydantic models for marketplace providers."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .entity import Entity

ProviderStatus = Literal["pending", "active", "suspended", "rejected"]
VerificationStatus = Literal["pending", "verified", "rejected"]


class Provider(Entity):
    name: str = Field(..., examples=["Best Electronics"])
    status: str = Field(..., examples=["active"])
    verification_status: str = Field(..., alias="verificationStatus", examples=["verified"])


class ProviderUpdateRequest(BaseModel):
    """Body of ``PATCH /providers``.

    ``status`` and ``verificationStatus`` are independent; each one
    present is applied and audited separately.
    """

    provider_id: str = Field(..., alias="providerId", examples=["provider-2"])
    status: Optional[ProviderStatus] = Field(None, examples=["active"])
    verification_status: Optional[VerificationStatus] = Field(
        None, alias="verificationStatus", examples=["verified"]
    )
    reason: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }

    @model_validator(mode="after")
    def _has_change(self) -> "ProviderUpdateRequest":
        if self.status is None and self.verification_status is None:
            raise ValueError("Provide status or verificationStatus")
        return self
