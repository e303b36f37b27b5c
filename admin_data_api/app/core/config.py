"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can run without any configuration at all, which is the normal
case for the in‑memory dashboard backend.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Admin Data API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Inbound header carrying the caller's correlation id.  When present
    # its value is echoed as ``meta.requestId`` in every response.
    correlation_header: str = os.getenv("CORRELATION_HEADER", "x-correlation-id")

    # Cookie whose mere presence marks a request as authenticated.  Token
    # issuance lives elsewhere; this service only checks the cookie.
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "admin-session")

    # Pagination defaults.  ``limit`` values above ``max_page_limit`` are
    # truncated silently.
    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "20"))
    max_page_limit: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    # Increment applied to a device trust score by the ``trust`` action.
    trust_step: int = int(os.getenv("TRUST_STEP", "10"))

    # Number of events returned by ``GET /security-events?stream=true``.
    stream_limit: int = int(os.getenv("STREAM_LIMIT", "50"))

    admin_host: str = os.getenv("ADMIN_HOST", "0.0.0.0")
    admin_port: int = int(os.getenv("ADMIN_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
