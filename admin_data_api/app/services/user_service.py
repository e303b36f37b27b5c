"""
Business logic for platform users.

Users are listed in insertion order, filtered by ``status`` and by a
free text ``search`` over name and email.  Administrators can change a
user's status and replace the notes kept on the account.
"""

import logging
from typing import Mapping, Optional

from ..core.errors import NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import USERS, DataStore
from ..schemas.user import User, UserUpdateRequest
from .audit_service import AuditService

logger = logging.getLogger(__name__)

USER_FILTERS = ("status",)


def _matches_search(user: User, needle: str) -> bool:
    return needle in user.name.lower() or needle in user.email.lower()


class UserService:
    """Service for listing and updating users."""

    @classmethod
    async def list_users(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[User]:
        """Return one page of users.

        ``search`` is a case-insensitive substring match on name or
        email; ``status`` matches exactly.
        """
        users = store.all(USERS)
        needle = (params.get("search") or "").strip().lower()
        if needle:
            users = [user for user in users if _matches_search(user, needle)]
        return run_query(users, params, paging, USER_FILTERS)

    @classmethod
    async def update_user(
        cls,
        store: DataStore,
        data: UserUpdateRequest,
        correlation_id: Optional[str] = None,
    ) -> User:
        before = store.find_by_id(USERS, data.user_id)
        if before is None:
            raise NotFoundError("User not found")

        def apply(user: User) -> None:
            if data.status is not None:
                user.status = data.status
            if data.notes is not None:
                user.notes = list(data.notes)

        user = store.mutate(USERS, data.user_id, apply)
        if user is None:
            raise NotFoundError("User not found")
        logger.info("User %s updated (status %s -> %s)", user.id, before.status, user.status)
        await AuditService.record(
            store,
            action="update_user_status",
            entity_type="User",
            entity_id=user.id,
            actor_id=ADMIN_USER_ID,
            description=f"Changed user status from {before.status} to {user.status}",
            reason=data.reason,
            correlationId=correlation_id,
        )
        return user
