"""Tests for the mutation and recording services."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from admin_data_api.app.core.errors import ActionValidationError, NotFoundError
from admin_data_api.app.core.query import PageParams
from admin_data_api.app.core.store import AUDIT_LOGS, DEVICES, SECURITY_EVENTS, SESSIONS
from admin_data_api.app.schemas.security_event import SecurityEventCreate
from admin_data_api.app.services.audit_service import AuditService
from admin_data_api.app.services.device_service import DeviceService
from admin_data_api.app.services.security_event_service import SecurityEventService
from admin_data_api.app.services.session_service import SessionService


def run(coro):
    return asyncio.run(coro)


def test_block_is_idempotent(store):
    first = run(DeviceService.apply_action(store, "dev-1", "block"))
    second = run(DeviceService.apply_action(store, "dev-1", "block"))
    assert first.blocked is True
    assert second.blocked is True
    assert store.find_by_id(DEVICES, "dev-1").blocked is True


def test_unblock_after_block(store):
    run(DeviceService.apply_action(store, "dev-1", "block"))
    device = run(DeviceService.apply_action(store, "dev-1", "unblock"))
    assert device.blocked is False


def test_trust_is_clamped_at_100(store):
    device = run(DeviceService.apply_action(store, "dev-1", "trust"))
    assert device.trust_score == 100
    for _ in range(3):
        device = run(DeviceService.apply_action(store, "dev-1", "trust"))
    assert device.trust_score == 100


def test_trust_adds_ten(store):
    device = run(DeviceService.apply_action(store, "dev-3", "trust"))
    assert device.trust_score == 20
    assert store.find_by_id(DEVICES, "dev-3").trust_score == 20


def test_unknown_action_is_rejected_without_changes(store):
    before = store.find_by_id(DEVICES, "dev-2")
    with pytest.raises(ActionValidationError):
        run(DeviceService.apply_action(store, "dev-2", "launch"))
    assert store.find_by_id(DEVICES, "dev-2") == before


def test_unknown_device(store):
    with pytest.raises(NotFoundError):
        run(DeviceService.apply_action(store, "ghost", "block"))


def test_unknown_device_wins_over_unknown_action(store):
    with pytest.raises(NotFoundError):
        run(DeviceService.apply_action(store, "ghost", "launch"))


def test_revoke_removes_exactly_one(store):
    ack = run(SessionService.revoke(store, "sess-2"))
    assert ack == {"revoked": True, "sessionId": "sess-2"}
    assert store.count(SESSIONS) == 2
    assert store.find_by_id(SESSIONS, "sess-2") is None


def test_revoke_missing_session(store):
    with pytest.raises(NotFoundError):
        run(SessionService.revoke(store, "sess-404"))
    assert store.count(SESSIONS) == 3


def test_revoke_twice(store):
    run(SessionService.revoke(store, "sess-1"))
    with pytest.raises(NotFoundError):
        run(SessionService.revoke(store, "sess-1"))


def test_list_sessions_by_user(store):
    page = run(SessionService.list_sessions(store, {"userId": "user-1"}, PageParams(page=1, limit=20)))
    assert [s.id for s in page.items] == ["sess-1", "sess-3"]
    assert page.total == 2


def test_audit_log_appends_record(store):
    entry = run(
        AuditService.log(
            store,
            action="block_device",
            entity_type="Device",
            entity_id="dev-1",
            actor_id="admin-user",
            correlationId="abc-123",
        )
    )
    assert store.count(AUDIT_LOGS) == 5
    stored = store.find_by_id(AUDIT_LOGS, entry.id)
    assert stored.entity_id == "dev-1"
    assert stored.to_wire()["correlationId"] == "abc-123"

    newest = run(AuditService.list_logs(store, {}, PageParams(page=1, limit=1)))
    assert newest.items[0].id == entry.id


def test_record_security_event_assigns_id_and_time(store):
    payload = SecurityEventCreate(
        type="permission_denied",
        severity="error",
        userId="user-3",
        ipAddress="10.1.1.1",
        id="client-chosen",
    )
    event = run(SecurityEventService.record(store, payload))
    assert event.id != "client-chosen"
    assert store.count(SECURITY_EVENTS) == 4
    assert event.to_wire()["ipAddress"] == "10.1.1.1"


def test_recent_events_are_newest_first(store):
    events = run(SecurityEventService.recent_events(store, {"type": "failed_login"}))
    assert [e.id for e in events] == ["evt-2", "evt-3"]


def test_record_security_event_drops_snake_case_duplicates(store):
    payload = SecurityEventCreate(
        type="login",
        severity="info",
        userId="user-1",
        created_at="garbage",
        country="SA",
    )
    event = run(SecurityEventService.record(store, payload))
    wire = event.to_wire()
    assert "created_at" not in wire
    assert wire["userId"] == "user-1"
    assert wire["country"] == "SA"
    assert wire["createdAt"] != "garbage"


def _trust(store, device_id):
    return run(DeviceService.apply_action(store, device_id, "trust"))


def test_concurrent_trust_is_clamped(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: _trust(store, "dev-3"), range(20)))

    assert len(results) == 20
    assert store.find_by_id(DEVICES, "dev-3").trust_score == 100
    rows = [row for row in store.all(AUDIT_LOGS) if row.entity_id == "dev-3"]
    assert len(rows) == 20


def test_concurrent_trust_loses_no_update(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: _trust(store, "dev-3"), range(8)))

    assert store.find_by_id(DEVICES, "dev-3").trust_score == 90


def test_concurrent_revoke_succeeds_once(store):
    def revoke(_):
        try:
            run(SessionService.revoke(store, "sess-1"))
        except NotFoundError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(revoke, range(16)))

    assert outcomes.count(True) == 1
    assert store.count(SESSIONS) == 2
    assert len([row for row in store.all(AUDIT_LOGS) if row.entity_id == "sess-1"]) == 1
