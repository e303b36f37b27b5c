"""Pydantic models for support tickets."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .entity import Entity

TicketStatus = Literal["open", "in_progress", "waiting", "resolved", "closed"]
TicketPriority = Literal["low", "medium", "high", "urgent"]


class Ticket(Entity):
    user_id: str = Field(..., alias="userId", examples=["user-1"])
    status: str = Field(..., examples=["open"])
    priority: str = Field(..., examples=["high"])
    assigned_to_id: Optional[str] = Field(None, alias="assignedToId", examples=["staff-1"])
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class TicketUpdateRequest(BaseModel):
    """Body of ``PATCH /tickets``.

    ``assignedToId`` may be sent as ``null`` to unassign the ticket,
    which is why presence is checked through ``model_fields_set``.
    """

    ticket_id: str = Field(..., alias="ticketId", examples=["ticket-2"])
    status: Optional[TicketStatus] = Field(None, examples=["in_progress"])
    assigned_to_id: Optional[str] = Field(None, alias="assignedToId", examples=["staff-2"])
    reason: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }

    @property
    def reassigns(self) -> bool:
        return "assigned_to_id" in self.model_fields_set

    @model_validator(mode="after")
    def _has_change(self) -> "TicketUpdateRequest":
        if self.status is None and not self.reassigns:
            raise ValueError("Provide status or assignedToId")
        return self
