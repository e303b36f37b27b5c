"""
Pydantic models for feature flags.

A flag has a published ``version`` and, while it is being edited, a
``draftVersion``.  Publishing promotes the draft; rolling back drops
it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .entity import Entity


class FeatureFlag(Entity):
    key: str = Field(..., examples=["new_checkout"])
    name: str = Field(..., examples=["New Checkout Experience"])
    enabled: bool = Field(False, examples=[True])
    rollout_percentage: Optional[int] = Field(None, alias="rolloutPercentage", ge=0, le=100)
    version: int = Field(1, ge=1, examples=[2])
    draft_version: Optional[int] = Field(None, alias="draftVersion", examples=[3])
    status: str = Field(..., examples=["published"])
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    published_at: Optional[datetime] = Field(None, alias="publishedAt")
    published_by: Optional[str] = Field(None, alias="publishedBy")


class FeatureFlagAction(BaseModel):
    """Body of ``POST /app-config/flags``.

    ``action`` is one of ``publish``, ``draft``, ``update_draft`` or
    ``rollback``.  ``enabled``/``rolloutPercentage`` are only read by
    ``update_draft``; ``reason`` is required by ``publish``.
    """

    flag_id: str = Field(..., alias="flagId", examples=["flag-2"])
    action: str = Field(..., examples=["publish"])
    enabled: Optional[bool] = None
    rollout_percentage: Optional[int] = Field(None, alias="rolloutPercentage", ge=0, le=100)
    reason: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }
