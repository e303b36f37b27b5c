"""
User endpoints for API v1.

``GET /users`` lists platform users (``status`` filter and free text
``search`` over name and email).  ``PATCH /users`` changes a user's
status or notes and is written to the audit log.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import NotFoundError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import envelope, get_correlation_id, page_envelope
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.user import UserUpdateRequest
from admin_data_api.app.services.user_service import UserService

router = APIRouter()


@router.get("")
async def list_users(
    request: Request,
    search: Optional[str] = Query(None, description="Case-insensitive match on name or email"),
    user_status: Optional[str] = Query(None, alias="status", description="active, inactive or blocked"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    result = await UserService.list_users(store, {"search": search, "status": user_status}, paging)
    return page_envelope(result, paging, request_id)


@router.patch("")
async def update_user(
    request: Request,
    body: UserUpdateRequest,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    """Change a user's status and/or notes; 404 if the user is unknown."""
    request_id = get_correlation_id(request.headers)
    try:
        user = await UserService.update_user(store, body, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return envelope(user, request_id)
