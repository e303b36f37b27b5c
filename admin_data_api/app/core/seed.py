"""
Baseline data for the dashboard.

``build_seed_data`` returns the entities every collection starts with.
Ids are fixed so that the dashboard and API clients can link to them;
timestamps are relative to the moment of seeding so the data always
looks recent.
"""

from datetime import timedelta
from typing import Dict, List

from ..schemas.audit import AuditLog
from ..schemas.device import Device
from ..schemas.entity import Entity, utcnow
from ..schemas.feature_flag import FeatureFlag
from ..schemas.order import Order
from ..schemas.payment import Payment
from ..schemas.provider import Provider
from ..schemas.security_event import SecurityEvent
from ..schemas.session import UserSession
from ..schemas.ticket import Ticket
from ..schemas.user import User
from ..schemas.wallet import WalletLedgerEntry
from .store import (
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
)


def build_seed_data() -> Dict[str, List[Entity]]:
    now = utcnow()

    def ago(**delta):
        return now - timedelta(**delta)

    users = [
        User(
            id="user-1",
            name="Ahmed Hassan",
            email="ahmed@sharoobi.local",
            phone="+966501234567",
            status="active",
            tier="premium",
            lastLoginAt=ago(hours=2).isoformat(),
            notes=["VIP customer", "High value"],
            createdAt=ago(days=90),
        ),
        User(
            id="user-2",
            name="Fatima Ali",
            email="fatima@sharoobi.local",
            phone="+201001234567",
            status="active",
            tier="basic",
            lastLoginAt=ago(minutes=5).isoformat(),
            createdAt=ago(days=45),
        ),
        User(
            id="user-3",
            name="Mohammed Saeed",
            email="mohammed@sharoobi.local",
            status="blocked",
            tier="basic",
            notes=["Blocked due to fraud"],
            createdAt=ago(days=30),
        ),
    ]

    providers = [
        Provider(
            id="provider-1",
            name="Best Electronics",
            email="contact@bestelectronics.local",
            region="Saudi Arabia",
            status="active",
            verificationStatus="verified",
            commissionRate=5,
            documents={"commercialRegistration": True, "taxCertificate": True, "bankAccount": True},
            createdAt=ago(days=180),
        ),
        Provider(
            id="provider-2",
            name="Fashion Hub",
            email="info@fashionhub.local",
            region="Egypt",
            status="pending",
            verificationStatus="pending",
            commissionRate=8,
            documents={"commercialRegistration": True, "taxCertificate": False, "bankAccount": True},
            createdAt=ago(days=7),
        ),
        Provider(
            id="provider-3",
            name="Home & Living",
            email="support@homeandliving.local",
            region="UAE",
            status="active",
            verificationStatus="verified",
            commissionRate=6,
            documents={"commercialRegistration": True, "taxCertificate": True, "bankAccount": True},
            createdAt=ago(days=120),
        ),
    ]

    orders = [
        Order(
            id="order-1",
            userId="user-1",
            providerId="provider-1",
            status="delivered",
            totalAmount=599.99,
            currency="SAR",
            items=[{"id": "1", "name": "iPhone 15", "quantity": 1, "price": 599.99}],
            shippingAddress={"city": "Riyadh", "country": "Saudi Arabia"},
            createdAt=ago(days=10),
            updatedAt=ago(days=5),
        ),
        Order(
            id="order-2",
            userId="user-2",
            providerId="provider-2",
            status="in_transit",
            totalAmount=249.99,
            currency="EGP",
            items=[{"id": "1", "name": "Designer Dress", "quantity": 1, "price": 249.99}],
            shippingAddress={"city": "Cairo", "country": "Egypt"},
            createdAt=ago(days=3),
            updatedAt=ago(days=1),
        ),
        Order(
            id="order-3",
            userId="user-1",
            providerId="provider-3",
            status="pending",
            totalAmount=1899.99,
            currency="AED",
            items=[{"id": "1", "name": "Sofa Set", "quantity": 1, "price": 1899.99}],
            shippingAddress={"city": "Dubai", "country": "UAE"},
            createdAt=ago(hours=2),
            updatedAt=ago(hours=1),
        ),
    ]

    tickets = [
        Ticket(
            id="ticket-1",
            userId="user-1",
            subject="Product Quality Issue",
            description="Received item is damaged",
            status="in_progress",
            priority="high",
            category="Product Quality",
            assignedToId="staff-1",
            messages=[
                {
                    "id": "message-1",
                    "authorId": "user-1",
                    "content": "Item not as described in the listing",
                    "attachments": [],
                    "createdAt": ago(hours=5).isoformat(),
                }
            ],
            createdAt=ago(days=2),
            updatedAt=ago(minutes=30),
        ),
        Ticket(
            id="ticket-2",
            userId="user-2",
            subject="Delivery Delay",
            description="Order not arrived on time",
            status="open",
            priority="medium",
            category="Delivery",
            messages=[],
            createdAt=ago(days=1),
            updatedAt=ago(days=1),
        ),
    ]

    payments = [
        Payment(
            id="payment-1",
            orderId="order-1",
            userId="user-1",
            amount=599.99,
            currency="SAR",
            method="card",
            status="completed",
            transactionId="txn-abc123",
            createdAt=ago(days=10),
        ),
        Payment(
            id="payment-2",
            orderId="order-2",
            userId="user-2",
            amount=249.99,
            currency="EGP",
            method="wallet",
            status="pending",
            createdAt=ago(days=3),
        ),
    ]

    feature_flags = [
        FeatureFlag(
            id="flag-1",
            key="new_checkout",
            name="New Checkout Experience",
            description="Enable new streamlined checkout flow",
            enabled=True,
            rolloutPercentage=100,
            version=2,
            status="published",
            createdAt=ago(days=60),
            updatedAt=ago(days=10),
            publishedAt=ago(days=10),
            publishedBy="admin@dashboard.local",
        ),
        FeatureFlag(
            id="flag-2",
            key="express_shipping",
            name="Express Shipping",
            description="Enable express shipping option",
            enabled=False,
            rolloutPercentage=0,
            version=2,
            draftVersion=3,
            status="draft",
            createdAt=ago(days=30),
            updatedAt=ago(hours=2),
        ),
    ]

    devices = [
        Device(
            id="device-1",
            userId="user-1",
            fingerprint="abc123def456",
            name="MacBook Pro",
            osType="macos",
            deviceType="desktop",
            trustScore=95,
            blocked=False,
            lastSeenAt=ago(minutes=5).isoformat(),
            createdAt=ago(days=90),
        ),
        Device(
            id="device-2",
            userId="user-1",
            fingerprint="f0e1d2c3b4a5",
            name="iPhone 15",
            osType="ios",
            deviceType="mobile",
            trustScore=80,
            blocked=False,
            lastSeenAt=ago(hours=3).isoformat(),
            createdAt=ago(days=40),
        ),
        Device(
            id="device-3",
            userId="user-2",
            fingerprint="99aa88bb77cc",
            name="Galaxy Tab",
            osType="android",
            deviceType="tablet",
            trustScore=35,
            blocked=True,
            lastSeenAt=ago(days=2).isoformat(),
            createdAt=ago(days=20),
        ),
    ]

    sessions = [
        UserSession(
            id="session-1",
            userId="user-1",
            deviceId="device-1",
            deviceName="MacBook Pro",
            ipAddress="192.168.1.100",
            userAgent="Chrome on macOS",
            lastActivityAt=ago(minutes=5).isoformat(),
            expiresAt=(now + timedelta(days=7)).isoformat(),
            createdAt=ago(hours=5),
        ),
        UserSession(
            id="session-2",
            userId="user-1",
            deviceId="device-2",
            deviceName="iPhone 15",
            ipAddress="10.0.0.12",
            userAgent="Safari on iOS",
            lastActivityAt=ago(hours=3).isoformat(),
            expiresAt=(now + timedelta(days=6)).isoformat(),
            createdAt=ago(days=1),
        ),
    ]

    security_events = [
        SecurityEvent(
            id="secevt-1",
            type="login",
            severity="info",
            userId="user-1",
            ipAddress="192.168.1.100",
            userAgent="Chrome on macOS",
            details={"location": "Riyadh, SA"},
            createdAt=ago(hours=2),
        ),
        SecurityEvent(
            id="secevt-2",
            type="failed_login",
            severity="warning",
            userId="user-2",
            ipAddress="203.0.113.7",
            userAgent="Firefox on Windows",
            details={"attempts": 3},
            createdAt=ago(hours=30),
        ),
        SecurityEvent(
            id="secevt-3",
            type="suspicious_activity",
            severity="critical",
            userId="user-2",
            ipAddress="198.51.100.23",
            userAgent="curl/8.0",
            details={"reason": "Impossible travel"},
            createdAt=ago(days=3),
        ),
    ]

    audit_logs = [
        AuditLog(
            id="audit-1",
            actorId="admin@dashboard.local",
            action="publish_feature_flag",
            entityType="FeatureFlag",
            entityId="flag-1",
            description="Published new checkout feature flag",
            reason="Ready for production",
            createdAt=ago(days=10),
        ),
    ]

    wallet_ledger = [
        WalletLedgerEntry(
            id="ledger-1",
            userId="user-1",
            type="credit",
            amount=100,
            currency="SAR",
            reason="Cashback reward",
            balance=500,
            createdAt=ago(days=5),
        ),
        WalletLedgerEntry(
            id="ledger-2",
            userId="user-2",
            type="debit",
            amount=249.99,
            currency="EGP",
            reason="Payment for order",
            relatedEntityId="order-2",
            balance=250.01,
            createdAt=ago(days=3),
        ),
        WalletLedgerEntry(
            id="ledger-3",
            userId="user-1",
            type="debit",
            amount=59.5,
            currency="SAR",
            reason="Payment for order",
            relatedEntityId="order-3",
            balance=440.5,
            createdAt=ago(hours=2),
        ),
    ]

    return {
        USERS: users,
        PROVIDERS: providers,
        ORDERS: orders,
        TICKETS: tickets,
        PAYMENTS: payments,
        WALLET_LEDGER: wallet_ledger,
        AUDIT_LOGS: audit_logs,
        SECURITY_EVENTS: security_events,
        SESSIONS: sessions,
        DEVICES: devices,
        FEATURE_FLAGS: feature_flags,
    }
