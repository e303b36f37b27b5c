"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    audit,
    auth,
    devices,
    feature_flags,
    orders,
    payments,
    providers,
    security_events,
    sessions,
    tickets,
    users,
    wallet,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(providers.router, prefix="/providers", tags=["providers"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
router.include_router(devices.router, prefix="/devices", tags=["devices"])
router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
router.include_router(audit.router, prefix="/audit", tags=["audit"])
router.include_router(security_events.router, prefix="/security-events", tags=["security-events"])
# The wallet and app-config routers define their own sub-paths
# (``/ledger``, ``/flags``) so the prefixes can host other views later.
router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
router.include_router(feature_flags.router, prefix="/app-config", tags=["app-config"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
