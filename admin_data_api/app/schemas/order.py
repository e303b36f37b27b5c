"""
Pydantic models for orders.

An order moves through ``pending → confirmed → in_transit →
delivered``; administrators may also set any status directly or cancel
orders in bulk.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .entity import Entity

OrderStatus = Literal["pending", "confirmed", "in_transit", "delivered", "cancelled", "refunded"]


class Order(Entity):
    user_id: str = Field(..., alias="userId", examples=["user-1"])
    provider_id: Optional[str] = Field(None, alias="providerId", examples=["provider-1"])
    status: str = Field(..., examples=["pending"])
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class OrderStatusUpdate(BaseModel):
    """Body of ``PATCH /orders``."""

    order_id: str = Field(..., alias="orderId", examples=["order-3"])
    status: OrderStatus = Field(..., examples=["confirmed"])
    reason: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }


class OrderBulkAction(BaseModel):
    """Body of ``POST /orders``.  ``action`` is currently always ``bulk_cancel``."""

    action: str = Field(..., examples=["bulk_cancel"])
    entity_ids: List[str] = Field(..., alias="entityIds", min_length=1, examples=[["order-2", "order-3"]])
    reason: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }
