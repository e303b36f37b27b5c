"""
Support ticket endpoints for API v1.

``GET /tickets`` filters by ``status`` and ``priority``; ``PATCH
/tickets`` changes the status or the assignee.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import NotFoundError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import envelope, get_correlation_id, page_envelope
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.ticket import TicketUpdateRequest
from admin_data_api.app.services.ticket_service import TicketService

router = APIRouter()


@router.get("")
async def list_tickets(
    request: Request,
    ticket_status: Optional[str] = Query(None, alias="status"),
    priority: Optional[str] = Query(None, description="low, medium, high or urgent"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    result = await TicketService.list_tickets(store, {"status": ticket_status, "priority": priority}, paging)
    return page_envelope(result, paging, request_id)


@router.patch("")
async def update_ticket(
    request: Request,
    body: TicketUpdateRequest,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    try:
        ticket = await TicketService.update_ticket(store, body, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return envelope(ticket, request_id)
