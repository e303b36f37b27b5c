"""
Security event endpoints for API v1.

``GET /security-events`` lists events newest first.  With
``stream=true`` it returns the latest events in one response without
pagination, which the live security monitor polls.  ``POST`` records a
new event.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import QueryValidationError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import envelope, get_correlation_id, page_envelope
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.security_event import SecurityEventCreate
from admin_data_api.app.services.security_event_service import SecurityEventService

router = APIRouter()


@router.get("")
async def list_security_events(
    request: Request,
    type: Optional[str] = Query(None, description="Filter by event type (login, failed_login, ...)"),
    severity: Optional[str] = Query(None, description="Filter by severity (info, warning, error, critical)"),
    user_id: Optional[str] = Query(None, alias="userId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    stream: Optional[str] = Query(None, description="'true' returns the latest events without pagination"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    params = {
        "type": type,
        "severity": severity,
        "userId": user_id,
        "startDate": start_date,
        "endDate": end_date,
    }
    try:
        if stream == "true":
            events = await SecurityEventService.recent_events(store, params)
            return envelope(events, request_id)
        paging = get_pagination_params(request.query_params)
        result = await SecurityEventService.list_events(store, params, paging)
    except QueryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return page_envelope(result, paging, request_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_security_event(
    request: Request,
    event: SecurityEventCreate,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    """Record a security event and return it with its assigned id."""
    request_id = get_correlation_id(request.headers)
    created = await SecurityEventService.record(store, event)
    return envelope(created, request_id, status_code=status.HTTP_201_CREATED)
