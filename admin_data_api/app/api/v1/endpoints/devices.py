"""
Device endpoints for API v1.

``GET /devices`` lists devices (filterable by ``userId``) and
``PATCH /devices`` applies ``block``, ``unblock`` or ``trust`` to one
device.  Mutations require a session and are written to the audit log.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import ActionValidationError, NotFoundError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import envelope, get_correlation_id, page_envelope
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.device import DeviceActionRequest
from admin_data_api.app.services.device_service import DeviceService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_devices(
    request: Request,
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by owning user ID"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Page size, 1 to 100"),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    """List devices in insertion order with pagination metadata."""
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    result = await DeviceService.list_devices(store, {"userId": user_id}, paging)
    return page_envelope(result, paging, request_id)


@router.patch("")
async def update_device(
    request: Request,
    body: DeviceActionRequest,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    """Block, unblock or trust a device.

    Returns the updated device.  Unknown devices yield 404 and
    unsupported actions 400; in both cases nothing is changed.
    """
    request_id = get_correlation_id(request.headers)
    try:
        device = await DeviceService.apply_action(store, body.device_id, body.action, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ActionValidationError as e:
        logger.warning("Rejected device action %r for %s", body.action, body.device_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return envelope(device, request_id)
