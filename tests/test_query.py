"""Tests for filter composition, ordering and pagination."""

import pytest

from admin_data_api.app.core.errors import QueryValidationError
from admin_data_api.app.core.query import (
    PageParams,
    compose_filter,
    get_pagination_params,
    paginate,
    parse_date,
    run_query,
    sort_newest_first,
)
from admin_data_api.app.core.store import AUDIT_LOGS, DEVICES
from admin_data_api.app.schemas.audit import AuditLog
from conftest import BASE_TIME, at


def _ids(items):
    return [item.id for item in items]


def _matching(store, name, params, fields, date_range=False):
    predicate = compose_filter(params, fields, date_range=date_range)
    return _ids(e for e in store.all(name) if predicate(e))


def test_no_filters_match_everything(store):
    assert _matching(store, DEVICES, {}, ["userId"]) == _ids(store.all(DEVICES))


def test_equality_filter(store):
    assert _matching(store, DEVICES, {"userId": "user-1"}, ["userId"]) == ["dev-1", "dev-3", "dev-5"]


def test_equality_filter_is_case_sensitive(store):
    assert _matching(store, DEVICES, {"userId": "USER-1"}, ["userId"]) == []


def test_unknown_foreign_key_yields_empty(store):
    assert _matching(store, DEVICES, {"userId": "ghost"}, ["userId"]) == []


def test_empty_and_unrecognized_params_are_ignored(store):
    params = {"userId": "", "color": "red"}
    assert _matching(store, DEVICES, params, ["userId"]) == _ids(store.all(DEVICES))


def test_two_filters_give_intersection(store):
    fields = ["action", "entityId"]
    by_action = set(_matching(store, AUDIT_LOGS, {"action": "update_order_status"}, fields))
    by_entity = set(_matching(store, AUDIT_LOGS, {"entityId": "order-1"}, fields))
    both = set(
        _matching(store, AUDIT_LOGS, {"action": "update_order_status", "entityId": "order-1"}, fields)
    )
    assert both == by_action & by_entity == {"log-1"}


def test_date_range_bounds_are_inclusive(store):
    params = {"startDate": at(days=2).isoformat(), "endDate": at(days=1).isoformat()}
    assert sorted(_matching(store, AUDIT_LOGS, params, [], date_range=True)) == ["log-2", "log-3", "log-4"]


def test_plain_date_is_midnight_utc():
    parsed = parse_date("2025-01-10")
    assert parsed.isoformat() == "2025-01-10T00:00:00+00:00"


def test_zulu_suffix_is_accepted():
    assert parse_date("2025-01-10T12:00:00Z") == BASE_TIME


def test_malformed_date_is_rejected():
    with pytest.raises(QueryValidationError):
        compose_filter({"startDate": "last tuesday"}, [], date_range=True)


def test_dates_ignored_where_not_recognized(store):
    # Devices are not a time series; their date params are not consulted.
    assert _matching(store, DEVICES, {"startDate": "garbage"}, ["userId"]) == _ids(store.all(DEVICES))


def test_sort_newest_first_is_stable():
    logs = [
        AuditLog(id="a", action="x", entityType="T", entityId="1", createdAt=at(days=1)),
        AuditLog(id="b", action="x", entityType="T", entityId="2", createdAt=at(days=0)),
        AuditLog(id="c", action="x", entityType="T", entityId="3", createdAt=at(days=1)),
        AuditLog(id="d", action="x", entityType="T", entityId="4", createdAt=at(days=2)),
    ]
    assert _ids(sort_newest_first(logs)) == ["b", "a", "c", "d"]
    assert _ids(logs) == ["a", "b", "c", "d"]


@pytest.mark.parametrize(
    "params, expected",
    [
        ({}, PageParams(page=1, limit=20)),
        ({"page": "3", "limit": "5"}, PageParams(page=3, limit=5)),
        ({"page": "0"}, PageParams(page=1, limit=20)),
        ({"page": "-4"}, PageParams(page=1, limit=20)),
        ({"limit": "500"}, PageParams(page=1, limit=100)),
        ({"limit": "0"}, PageParams(page=1, limit=1)),
        ({"page": "abc", "limit": "many"}, PageParams(page=1, limit=20)),
    ],
)
def test_pagination_params(params, expected):
    assert get_pagination_params(params) == expected


def test_offset():
    assert PageParams(page=3, limit=20).offset == 40


@pytest.mark.parametrize(
    "total, page, limit",
    [(0, 1, 20), (5, 1, 2), (5, 3, 2), (5, 4, 2), (100, 1, 100), (101, 2, 100), (7, 9, 3)],
)
def test_pagination_arithmetic(total, page, limit):
    items = list(range(total))
    result = paginate(items, page, limit)
    assert len(result.items) == min(limit, max(0, total - (page - 1) * limit))
    assert result.total == total


def test_page_past_the_end_keeps_total():
    result = paginate(list(range(5)), page=10, limit=2)
    assert result.items == []
    assert result.total == 5


def test_run_query_time_series_sorts_and_paginates(store):
    result = run_query(
        store.all(AUDIT_LOGS), {"entityType": "Order"}, PageParams(page=1, limit=2),
        ["entityType"], time_series=True,
    )
    assert result.total == 3
    assert _ids(result.items) == ["log-4", "log-3"]


def test_run_query_keeps_insertion_order(store):
    result = run_query(store.all(DEVICES), {"userId": "user-2"}, PageParams(page=1, limit=20), ["userId"])
    assert _ids(result.items) == ["dev-2", "dev-4"]
