"""
Application package initializer.

This package contains the entrypoint of the dashboard data API and all
of its submodules.  Each resource (devices, sessions, audit logs,
security events, wallet ledger) has its own service in ``services``
and exposes a router defined in ``api/v1/endpoints``.  All resources
share the in‑memory ``DataStore`` from ``core.store`` and the response
envelope from ``core.responses``.
"""

from .main import app  # noqa: F401
