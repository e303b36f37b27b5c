"""Tests for the response envelope helpers."""

import uuid
from datetime import datetime

import pytest

from admin_data_api.app.core.responses import (
    error_code_for_status,
    error_response,
    get_correlation_id,
    pagination_meta,
    success_response,
)
from admin_data_api.app.schemas.device import Device
from conftest import BASE_TIME


def test_success_response_shape():
    body = success_response({"ok": 1}, "req-1")
    assert body["success"] is True
    assert body["data"] == {"ok": 1}
    assert body["meta"]["requestId"] == "req-1"
    assert "pagination" not in body["meta"]
    datetime.fromisoformat(body["meta"]["timestamp"])


def test_success_response_serializes_entities_by_alias():
    device = Device(id="d", userId="u", trustScore=70, osType="linux", createdAt=BASE_TIME)
    body = success_response([device], "req-1")
    assert body["data"] == [
        {
            "id": "d",
            "createdAt": "2025-01-10T12:00:00Z",
            "userId": "u",
            "blocked": False,
            "trustScore": 70,
            "osType": "linux",
        }
    ]


def test_success_response_with_pagination():
    body = success_response([], "req-1", pagination=pagination_meta(total=3, page=1, limit=2))
    assert body["meta"]["pagination"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}


@pytest.mark.parametrize("total, limit, pages", [(0, 20, 0), (20, 20, 1), (21, 20, 2), (1, 100, 1)])
def test_pages_is_ceiling(total, limit, pages):
    assert pagination_meta(total, 1, limit)["pages"] == pages


def test_error_response_shape():
    body = error_response("NOT_FOUND", "Device not found", "req-2")
    assert body == {
        "success": False,
        "error": {"code": "NOT_FOUND", "message": "Device not found"},
        "meta": {"requestId": "req-2", "timestamp": body["meta"]["timestamp"]},
    }


def test_missing_request_id_is_generated():
    body = error_response("INTERNAL_ERROR", "boom")
    uuid.UUID(body["meta"]["requestId"])


def test_correlation_id_echoed():
    assert get_correlation_id({"x-correlation-id": "abc-123"}) == "abc-123"


def test_correlation_id_generated_when_absent():
    first = get_correlation_id({})
    second = get_correlation_id({})
    uuid.UUID(first)
    assert first != second


@pytest.mark.parametrize(
    "status_code, code",
    [(400, "VALIDATION"), (401, "UNAUTHORIZED"), (404, "NOT_FOUND"), (422, "VALIDATION"), (500, "INTERNAL_ERROR")],
)
def test_error_code_for_status(status_code, code):
    assert error_code_for_status(status_code) == code
