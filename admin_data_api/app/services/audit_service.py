"""
Audit service for recording and querying administrative actions.

This module provides a central API for appending audit records to the
``audit_logs`` collection and retrieving them with filters and
pagination.  Services that change state call ``AuditService.record``
after the change has been applied.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Optional

from ..core.query import Page, PageParams, run_query
from ..core.store import AUDIT_LOGS, DataStore
from ..schemas.audit import AuditLog
from ..schemas.entity import utcnow

logger = logging.getLogger(__name__)

AUDIT_FILTERS = ("action", "entityType", "entityId")


class AuditService:
    """Service class for writing and retrieving audit logs."""

    @classmethod
    async def log(
        cls,
        store: DataStore,
        action: str,
        entity_type: str,
        entity_id: str,
        actor_id: Optional[str] = None,
        description: Optional[str] = None,
        reason: Optional[str] = None,
        **extra: object,
    ) -> AuditLog:
        """Append a new audit record and return it.

        Parameters
        ----------
        store : DataStore
            Store holding the ``audit_logs`` collection.
        action : str
            Short machine name of the action (e.g. ``"block_device"``).
        entity_type : str
            Type of the affected record (e.g. ``"Device"``, ``"Session"``).
        entity_id : str
            Id of the affected record.  Not checked against any collection.
        actor_id : Optional[str]
            Who performed the action, if known.
        description, reason : Optional[str]
            Free text for the audit screen.
        **extra
            Additional payload stored with the record (e.g.
            ``correlationId``).
        """
        entry = AuditLog(
            id=str(uuid.uuid4()),
            createdAt=utcnow(),
            action=action,
            entityType=entity_type,
            entityId=entity_id,
            actorId=actor_id,
            description=description,
            reason=reason,
            **extra,
        )
        stored = store.append(AUDIT_LOGS, entry)
        logger.info("Audit: %s %s %s", action, entity_type, entity_id)
        return stored

    @classmethod
    async def record(cls, store: DataStore, **kwargs: Any) -> Optional[AuditLog]:
        """Like ``log`` but never raises.

        Services call this after a mutation has been applied: a failed
        audit write is logged with its traceback and the mutation
        stands.  Returns ``None`` when the write failed.
        """
        try:
            return await cls.log(store, **kwargs)
        except Exception:
            logger.exception(
                "Failed to write audit log %s for %s %s",
                kwargs.get("action"),
                kwargs.get("entity_type"),
                kwargs.get("entity_id"),
            )
            return None

    @classmethod
    async def list_logs(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[AuditLog]:
        """Retrieve audit records with optional filters and pagination.

        ``action``, ``entityType`` and ``entityId`` match exactly.
        ``startDate``/``endDate`` accept ISO dates or timestamps and
        bound ``createdAt`` inclusively.  Sorting is always by
        ``createdAt`` descending.
        """
        return run_query(store.all(AUDIT_LOGS), params, paging, AUDIT_FILTERS, time_series=True)
