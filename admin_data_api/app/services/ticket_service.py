"""Business logic for support tickets."""

import logging
from typing import Mapping, Optional

from ..core.errors import NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import TICKETS, DataStore
from ..schemas.entity import utcnow
from ..schemas.ticket import Ticket, TicketUpdateRequest
from .audit_service import AuditService

logger = logging.getLogger(__name__)

TICKET_FILTERS = ("status", "priority")


class TicketService:
    """Service for listing and updating support tickets."""

    @classmethod
    async def list_tickets(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[Ticket]:
        return run_query(store.all(TICKETS), params, paging, TICKET_FILTERS)

    @classmethod
    async def update_ticket(
        cls,
        store: DataStore,
        data: TicketUpdateRequest,
        correlation_id: Optional[str] = None,
    ) -> Ticket:
        """Change the status and/or assignee of a ticket.

        The audit row records the status before and after under
        ``changes`` (both equal when only the assignee changed).
        """
        before = store.find_by_id(TICKETS, data.ticket_id)
        if before is None:
            raise NotFoundError("Ticket not found")

        def apply(ticket: Ticket) -> None:
            if data.status is not None:
                ticket.status = data.status
            if data.reassigns:
                ticket.assigned_to_id = data.assigned_to_id
            ticket.updated_at = utcnow()

        ticket = store.mutate(TICKETS, data.ticket_id, apply)
        if ticket is None:
            raise NotFoundError("Ticket not found")
        logger.info(
            "Ticket %s updated (status=%s, assignedToId=%s)",
            ticket.id,
            ticket.status,
            ticket.assigned_to_id,
        )
        await AuditService.record(
            store,
            action="update_ticket",
            entity_type="Ticket",
            entity_id=ticket.id,
            actor_id=ADMIN_USER_ID,
            description="Updated ticket",
            reason=data.reason,
            changes={
                "before": {"status": before.status, "assignedToId": before.assigned_to_id},
                "after": {"status": ticket.status, "assignedToId": ticket.assigned_to_id},
            },
            correlationId=correlation_id,
        )
        return ticket
