"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from admin_data_api.app.core.config import settings
from admin_data_api.app.core.store import (
    AUDIT_LOGS,
    DEVICES,
    FEATURE_FLAGS,
    ORDERS,
    PAYMENTS,
    PROVIDERS,
    SECURITY_EVENTS,
    SESSIONS,
    TICKETS,
    USERS,
    WALLET_LEDGER,
    DataStore,
)
from admin_data_api.app.main import create_app
from admin_data_api.app.schemas.audit import AuditLog
from admin_data_api.app.schemas.device import Device
from admin_data_api.app.schemas.feature_flag import FeatureFlag
from admin_data_api.app.schemas.order import Order
from admin_data_api.app.schemas.payment import Payment
from admin_data_api.app.schemas.provider import Provider
from admin_data_api.app.schemas.security_event import SecurityEvent
from admin_data_api.app.schemas.session import UserSession
from admin_data_api.app.schemas.ticket import Ticket
from admin_data_api.app.schemas.user import User
from admin_data_api.app.schemas.wallet import WalletLedgerEntry

BASE_TIME = datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)


def at(days: int = 0, hours: int = 0) -> datetime:
    """A fixed instant ``days``/``hours`` before ``BASE_TIME``."""
    return BASE_TIME - timedelta(days=days, hours=hours)


def fixture_data():
    """Three devices for user-1, two for user-2, plus a little of everything else."""
    return {
        DEVICES: [
            Device(id="dev-1", userId="user-1", trustScore=95, name="Laptop", createdAt=at(days=9)),
            Device(id="dev-2", userId="user-2", trustScore=40, blocked=True, createdAt=at(days=8)),
            Device(id="dev-3", userId="user-1", trustScore=10, createdAt=at(days=7)),
            Device(id="dev-4", userId="user-2", trustScore=60, createdAt=at(days=6)),
            Device(id="dev-5", userId="user-1", trustScore=100, createdAt=at(days=5)),
        ],
        SESSIONS: [
            UserSession(id="sess-1", userId="user-1", deviceId="dev-1", createdAt=at(hours=5)),
            UserSession(id="sess-2", userId="user-2", deviceId="dev-2", createdAt=at(hours=4)),
            UserSession(id="sess-3", userId="user-1", deviceId="dev-3", createdAt=at(hours=3)),
        ],
        AUDIT_LOGS: [
            AuditLog(id="log-1", action="update_order_status", entityType="Order", entityId="order-1", createdAt=at(days=3)),
            AuditLog(id="log-2", action="publish_feature_flag", entityType="FeatureFlag", entityId="flag-1", createdAt=at(days=1)),
            AuditLog(id="log-3", action="update_order_status", entityType="Order", entityId="order-2", createdAt=at(days=2)),
            AuditLog(id="log-4", action="cancel_order", entityType="Order", entityId="order-1", createdAt=at(days=1)),
        ],
        SECURITY_EVENTS: [
            SecurityEvent(id="evt-1", type="login", severity="info", userId="user-1", createdAt=at(hours=10)),
            SecurityEvent(id="evt-2", type="failed_login", severity="warning", userId="user-2", createdAt=at(hours=2)),
            SecurityEvent(id="evt-3", type="failed_login", severity="critical", userId="user-2", createdAt=at(hours=6)),
        ],
        WALLET_LEDGER: [
            WalletLedgerEntry(id="led-1", userId="user-1", type="credit", amount=100, createdAt=at(days=4)),
            WalletLedgerEntry(id="led-2", userId="user-2", type="debit", amount=20, createdAt=at(days=2)),
            WalletLedgerEntry(id="led-3", userId="user-1", type="debit", amount=35, createdAt=at(days=1)),
        ],
        USERS: [
            User(id="user-1", name="Ahmed Hassan", email="ahmed@example.test", status="active", createdAt=at(days=90)),
            User(id="user-2", name="Fatima Ali", email="fatima@example.test", status="active", createdAt=at(days=45)),
            User(id="user-3", name="Mohammed Saeed", email="mo@example.test", status="blocked", notes=["fraud"], createdAt=at(days=30)),
        ],
        PROVIDERS: [
            Provider(id="prov-1", name="Best Electronics", status="active", verificationStatus="verified", createdAt=at(days=60)),
            Provider(id="prov-2", name="Fashion Hub", status="pending", verificationStatus="pending", createdAt=at(days=7)),
        ],
        ORDERS: [
            Order(id="order-1", userId="user-1", status="delivered", totalAmount=599.99, createdAt=at(days=10)),
            Order(id="order-2", userId="user-2", status="in_transit", totalAmount=249.99, createdAt=at(days=3)),
            Order(id="order-3", userId="user-1", status="pending", totalAmount=1899.99, createdAt=at(hours=2)),
        ],
        TICKETS: [
            Ticket(id="tick-1", userId="user-1", status="in_progress", priority="high", assignedToId="staff-1", createdAt=at(days=2)),
            Ticket(id="tick-2", userId="user-2", status="open", priority="medium", createdAt=at(days=1)),
        ],
        PAYMENTS: [
            Payment(id="pay-1", orderId="order-1", userId="user-1", amount=599.99, currency="SAR", status="completed", createdAt=at(days=10)),
            Payment(id="pay-2", orderId="order-2", userId="user-2", amount=249.99, currency="EGP", status="pending", createdAt=at(days=3)),
        ],
        FEATURE_FLAGS: [
            FeatureFlag(id="flag-1", key="new_checkout", name="New Checkout", enabled=True, version=2, status="published", createdAt=at(days=60)),
            FeatureFlag(id="flag-2", key="express_shipping", name="Express Shipping", version=2, draftVersion=3, status="draft", createdAt=at(days=30)),
        ],
    }


@pytest.fixture
def store():
    """A store seeded with ``fixture_data``."""
    data_store = DataStore(seed=fixture_data)
    data_store.ensure_seeded()
    return data_store


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def authed_client(client):
    """Client carrying the session cookie required by mutating routes."""
    client.cookies.set(settings.session_cookie_name, "session-token")
    return client
