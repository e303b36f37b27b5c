"""
Business logic for security events.

Security events are append‑only: they are listed newest first and new
ones are recorded with a server‑assigned id and timestamp.  The stream
view returns the most recent matching events in one response, without
pagination.
"""

import logging
import uuid
from typing import List, Mapping

from ..core.config import settings
from ..core.query import Page, PageParams, compose_filter, run_query, sort_newest_first
from ..core.store import SECURITY_EVENTS, DataStore
from ..schemas.entity import utcnow
from ..schemas.security_event import SecurityEvent, SecurityEventCreate

logger = logging.getLogger(__name__)

SECURITY_EVENT_FILTERS = ("type", "severity", "userId")


class SecurityEventService:
    """Service for querying and recording security events."""

    @classmethod
    async def list_events(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[SecurityEvent]:
        return run_query(
            store.all(SECURITY_EVENTS), params, paging, SECURITY_EVENT_FILTERS, time_series=True
        )

    @classmethod
    async def recent_events(cls, store: DataStore, params: Mapping[str, str]) -> List[SecurityEvent]:
        """Return the newest ``settings.stream_limit`` matching events."""
        predicate = compose_filter(params, SECURITY_EVENT_FILTERS, date_range=True)
        matched = sort_newest_first(e for e in store.all(SECURITY_EVENTS) if predicate(e))
        return matched[: settings.stream_limit]

    @classmethod
    async def record(cls, store: DataStore, data: SecurityEventCreate) -> SecurityEvent:
        """Append a new event.

        ``id`` and ``createdAt`` are assigned here.  Pass-through keys
        that name a declared field in either spelling (``created_at``,
        ``user_id`` ...) are dropped so they cannot shadow it.
        """
        reserved = SecurityEvent.declared_keys()
        payload = {
            key: value
            for key, value in (data.model_extra or {}).items()
            if key not in reserved
        }
        payload.update(
            id=str(uuid.uuid4()),
            createdAt=utcnow(),
            type=data.type,
            severity=data.severity,
            userId=data.user_id,
        )
        event = SecurityEvent.model_validate(payload)
        stored = store.append(SECURITY_EVENTS, event)
        log = logger.warning if data.severity in {"error", "critical"} else logger.info
        log("Security event %s (%s) for user %s", data.type, data.severity, data.user_id)
        return stored
