"""
Business logic for user sessions.

Sessions are listed per user and can be revoked.  Revocation removes
the session from the store for good; there is no tombstone.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..core.errors import NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import SESSIONS, DataStore
from ..schemas.session import UserSession
from .audit_service import AuditService

SESSION_FILTERS = ("userId",)


class SessionService:
    """Сервис для просмотра и отзыва пользовательских сессий."""

    @classmethod
    async def list_sessions(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[UserSession]:
        return run_query(store.all(SESSIONS), params, paging, SESSION_FILTERS)

    @classmethod
    async def revoke(
        cls,
        store: DataStore,
        session_id: str,
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Отозвать сессию.

        Удаляет сессию из хранилища и возвращает подтверждение (сама
        сессия больше не существует).  Если сессия не найдена,
        возбуждает ``NotFoundError``, хранилище при этом не меняется.
        Успешный отзыв записывается в журнал аудита.
        """
        logger = logging.getLogger(__name__)
        if not store.remove_by_id(SESSIONS, session_id):
            raise NotFoundError("Session not found")
        logger.info("Session %s revoked", session_id)
        await AuditService.record(
            store,
            action="revoke_session",
            entity_type="Session",
            entity_id=session_id,
            actor_id=ADMIN_USER_ID,
            description=f"Revoked session {session_id}",
            correlationId=correlation_id,
        )
        return {"revoked": True, "sessionId": session_id}
