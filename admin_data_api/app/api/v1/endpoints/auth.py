"""
Authentication endpoints for API v1.

Only ``GET /auth/me`` lives here: it describes the caller's admin
session.  Login and token issuance are handled by a separate service
which sets the session cookie.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from admin_data_api.app.core.responses import envelope, get_correlation_id
from admin_data_api.app.core.security import current_session_descriptor, require_session

router = APIRouter()


@router.get("/me")
async def get_me(request: Request, session_token: str = Depends(require_session)) -> JSONResponse:
    """Return the session descriptor, or 401 if the session cookie is missing."""
    return envelope(current_session_descriptor(), get_correlation_id(request.headers))
