"""
Session endpoints for API v1.

``GET /sessions`` lists user sessions and ``DELETE /sessions`` revokes
one.  The DELETE body carries the session id, e.g.
``{"sessionId": "session-1"}``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import NotFoundError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import envelope, get_correlation_id, page_envelope
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.session import SessionRevokeRequest
from admin_data_api.app.services.session_service import SessionService

router = APIRouter()


@router.get("")
async def list_sessions(
    request: Request,
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by user ID"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    """List active sessions in insertion order."""
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    result = await SessionService.list_sessions(store, {"userId": user_id}, paging)
    return page_envelope(result, paging, request_id)


@router.delete("")
async def revoke_session(
    request: Request,
    body: SessionRevokeRequest,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    """Revoke a session.

    The session is removed permanently.  Returns an acknowledgement
    rather than the session itself; 404 if the id is unknown.
    """
    request_id = get_correlation_id(request.headers)
    try:
        ack = await SessionService.revoke(store, body.session_id, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return envelope(ack, request_id)
