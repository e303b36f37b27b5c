"""
Wallet endpoints for API v1.

Exposes the wallet ledger read‑only.  Entries are filterable by user
and entry type (``credit``/``debit``) and come back newest first.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import QueryValidationError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import get_correlation_id, page_envelope
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.services.wallet_service import WalletService

router = APIRouter()


@router.get("/ledger")
async def list_ledger(
    request: Request,
    user_id: Optional[str] = Query(None, alias="userId"),
    type: Optional[str] = Query(None, description="credit or debit"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    params = {"userId": user_id, "type": type, "startDate": start_date, "endDate": end_date}
    try:
        result = await WalletService.list_entries(store, params, paging)
    except QueryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return page_envelope(result, paging, request_id)
