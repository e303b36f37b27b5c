"""
Feature flag endpoints for API v1 (``/app-config/flags``).

``GET`` returns every flag without pagination.  ``POST`` runs one of
the draft/publish actions described in
``services.feature_flag_service``.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from admin_data_api.app.core.errors import ActionValidationError, NotFoundError
from admin_data_api.app.core.responses import envelope, get_correlation_id
from admin_data_api.app.core.security import require_session
from admin_data_api.app.core.store import DataStore, get_store
from admin_data_api.app.schemas.feature_flag import FeatureFlagAction
from admin_data_api.app.services.feature_flag_service import FeatureFlagService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/flags")
async def list_flags(request: Request, store: DataStore = Depends(get_store)) -> JSONResponse:
    flags = await FeatureFlagService.list_flags(store)
    return envelope(flags, get_correlation_id(request.headers))


@router.post("/flags")
async def flag_action(
    request: Request,
    body: FeatureFlagAction,
    store: DataStore = Depends(get_store),
    session_token: str = Depends(require_session),
) -> JSONResponse:
    request_id = get_correlation_id(request.headers)
    try:
        flag = await FeatureFlagService.apply_action(store, body, request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ActionValidationError as e:
        logger.warning("Rejected feature flag action %r for %s: %s", body.action, body.flag_id, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return envelope(flag, request_id)
