"""
Session presence checks.

Sessions are issued by the login service, not by this API.  The only
thing checked here is that the request carries the session cookie;
its value is not interpreted.  Mutating routes depend on
``require_session`` and ``GET /auth/me`` returns the static admin
session descriptor for any request that has the cookie.
"""

from datetime import timedelta

from fastapi import HTTPException, Request, status

from ..schemas.entity import utcnow
from ..schemas.session import SessionDescriptor
from .config import settings

ADMIN_USER_ID = "admin-user"


def require_session(request: Request) -> str:
    """Dependency that returns the session token or fails with 401."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No session found",
        )
    return token


def current_session_descriptor() -> SessionDescriptor:
    now = utcnow()
    return SessionDescriptor(
        id="session-admin",
        userId=ADMIN_USER_ID,
        email="admin@dashboard.local",
        role="admin",
        permissions=["*"],
        createdAt=now - timedelta(hours=2),
        expiresAt=now + timedelta(days=7),
    )
