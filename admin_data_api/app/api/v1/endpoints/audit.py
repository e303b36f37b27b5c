"""
Audit log endpoints for API v1.

Provides read access to the audit trail.  Logs capture the changes
made through the dashboard and support filtering by action, entity
type, entity id and date range.  Results are newest first.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import QueryValidationError
from admin_data_api.app.core.query import get_pagination_params
from admin_data_api.app.core.responses import get_correlation_id, page_envelope
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.services.audit_service import AuditService

router = APIRouter()


@router.get("")
async def list_audit_logs(
    request: Request,
    action: Optional[str] = Query(None, description="Filter by action (e.g. block_device)"),
    entity_type: Optional[str] = Query(None, alias="entityType", description="Filter by entity type (Device, Session, ...)"),
    entity_id: Optional[str] = Query(None, alias="entityId", description="Filter by entity ID"),
    start_date: Optional[str] = Query(None, alias="startDate", description="Earliest createdAt (ISO format), inclusive"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Latest createdAt (ISO format), inclusive"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DataStore = Depends(get_store),
) -> JSONResponse:
    """Retrieve audit logs with optional filters.

    A ``startDate`` or ``endDate`` that is not an ISO date is rejected
    with 400.
    """
    request_id = get_correlation_id(request.headers)
    paging = get_pagination_params(request.query_params)
    params = {
        "action": action,
        "entityType": entity_type,
        "entityId": entity_id,
        "startDate": start_date,
        "endDate": end_date,
    }
    try:
        result = await AuditService.list_logs(store, params, paging)
    except QueryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return page_envelope(result, paging, request_id)
