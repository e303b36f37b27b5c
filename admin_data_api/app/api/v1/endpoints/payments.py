"""
Payment endpoints for API v1.

``GET /payments`` filters by ``status`` and ``userId``.  ``POST
/payments`` runs a payment action; ``refund`` is the only one.
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
from admin_data_api.app.schemas.payment import PaymentActionRequest
from admin_data_api.app.services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_payments(
    request: Request,
    payment_status: Optional[str] = Query(None, alias="status"),
    user_id: Optional[str] = Query(None, alias="userId"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    result = await PaymentService.list_payments(store, {"status": payment_status, "userId": user_id}, paging)
    return page_envelope(result, paging, request_id)


@router.post("")
async def payment_action(
    request: Request,
    body: PaymentActionRequest,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    """Refund a payment.  A reason is mandatory."""
    request_id = get_correlation_id(request.headers)
    try:
        payment = await PaymentService.apply_action(store, body, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ActionValidationError as e:
        logger.warning("Rejected payment action %r for %s: %s", body.action, body.payment_id, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return envelope(payment, request_id)
