"""
Provider endpoints for API v1.

``GET /providers`` filters by ``status`` and ``verificationStatus``.
``PATCH /providers`` changes either or both; each change gets its own
audit row.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import NotFoundError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import envelope, get_correlation_id, page_envelope
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.provider import ProviderUpdateRequest
from admin_data_api.app.services.provider_service import ProviderService

router = APIRouter()


@router.get("")
async def list_providers(
    request: Request,
    provider_status: Optional[str] = Query(None, alias="status"),
    verification_status: Optional[str] = Query(None, alias="verificationStatus"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    params = {"status": provider_status, "verificationStatus": verification_status}
    result = await ProviderService.list_providers(store, params, paging)
    return page_envelope(result, paging, request_id)


@router.patch("")
async def update_provider(
    request: Request,
    body: ProviderUpdateRequest,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    try:
        provider = await ProviderService.update_provider(store, body, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return envelope(provider, request_id)
