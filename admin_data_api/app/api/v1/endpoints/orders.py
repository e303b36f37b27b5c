"""
Order endpoints for API v1.

``GET /orders`` filters by ``status`` and ``userId``.  ``PATCH
/orders`` sets the status of one order and ``POST /orders`` runs a
bulk action (``bulk_cancel``) over several orders.
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
from admin_data_api.app.schemas.order import OrderBulkAction, OrderStatusUpdate
from admin_data_api.app.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_orders(
    request: Request,
    order_status: Optional[str] = Query(None, alias="status", description="Filter by order status"),
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by customer ID"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    result = await OrderService.list_orders(store, {"status": order_status, "userId": user_id}, paging)
    return page_envelope(result, paging, request_id)


@router.patch("")
async def update_order_status(
    request: Request,
    body: OrderStatusUpdate,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    try:
        order = await OrderService.update_status(store, body, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return envelope(order, request_id)


@router.post("")
async def bulk_order_action(
    request: Request,
    body: OrderBulkAction,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    """Cancel several orders.

    Returns how many orders were cancelled and which ids were skipped
    (unknown, or already delivered, cancelled or refunded).
    """
    request_id = get_correlation_id(request.headers)
    try:
        summary = await OrderService.bulk_action(store, body, request_id)
    except ActionValidationError as e:
        logger.warning("Rejected order bulk action %r", body.action)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return envelope(summary, request_id)
