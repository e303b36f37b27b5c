"""
Business logic for feature flags.

Flags follow a draft/publish cycle:

``draft``
    Opens a new draft version (``draftVersion = (draftVersion or
    version) + 1``) and marks the flag ``draft``.
``update_draft``
    Changes ``enabled``/``rolloutPercentage``, opening a draft first if
    there is none.
``publish``
    Promotes the draft to ``version`` and marks the flag ``published``.
    Requires a reason.
``rollback``
    Drops the draft and goes back to the published version.

``publish`` and ``rollback`` are audited; draft edits are not.
"""

import logging
from functools import partial
from typing import Callable, Dict, List, Optional

from ..core.errors import ActionValidationError, NotFoundError
from ..core.security import ADMIN_USER_ID
from ..core.store import FEATURE_FLAGS, DataStore
from ..schemas.entity import utcnow
from ..schemas.feature_flag import FeatureFlag, FeatureFlagAction
from .audit_service import AuditService

logger = logging.getLogger(__name__)

DRAFT = "draft"
PUBLISHED = "published"


def _draft(data: FeatureFlagAction, flag: FeatureFlag) -> None:
    flag.status = DRAFT
    flag.draft_version = (flag.draft_version or flag.version) + 1
    flag.updated_at = utcnow()


def _update_draft(data: FeatureFlagAction, flag: FeatureFlag) -> None:
    if flag.draft_version is None:
        flag.draft_version = flag.version + 1
    if data.enabled is not None:
        flag.enabled = data.enabled
    if data.rollout_percentage is not None:
        flag.rollout_percentage = data.rollout_percentage
    flag.updated_at = utcnow()


def _publish(data: FeatureFlagAction, flag: FeatureFlag) -> None:
    now = utcnow()
    flag.status = PUBLISHED
    flag.version = flag.draft_version or flag.version
    flag.draft_version = None
    flag.published_at = now
    flag.published_by = ADMIN_USER_ID
    flag.updated_at = now


def _rollback(data: FeatureFlagAction, flag: FeatureFlag) -> None:
    now = utcnow()
    flag.status = PUBLISHED
    flag.draft_version = None
    flag.published_at = now
    flag.updated_at = now


ACTIONS: Dict[str, Callable[[FeatureFlagAction, FeatureFlag], None]] = {
    "publish": _publish,
    "draft": _draft,
    "update_draft": _update_draft,
    "rollback": _rollback,
}

# action -> (audit action, description verb)
AUDITED = {
    "publish": ("publish_feature_flag", "Published"),
    "rollback": ("rollback_feature_flag", "Rolled back"),
}


class FeatureFlagService:
    """Service for reading and editing feature flags."""

    @classmethod
    async def list_flags(cls, store: DataStore) -> List[FeatureFlag]:
        """Return every flag in insertion order (the list is small and unpaginated)."""
        return store.all(FEATURE_FLAGS)

    @classmethod
    async def apply_action(
        cls,
        store: DataStore,
        data: FeatureFlagAction,
        correlation_id: Optional[str] = None,
    ) -> FeatureFlag:
        """Run one draft/publish action against a flag and return it.

        Raises ``NotFoundError`` for an unknown flag (checked first) and
        ``ActionValidationError`` for an unknown action or a publish
        without a reason.
        """
        if store.find_by_id(FEATURE_FLAGS, data.flag_id) is None:
            raise NotFoundError("Feature flag not found")
        handler = ACTIONS.get(data.action)
        if handler is None:
            raise ActionValidationError(
                f"Unsupported feature flag action {data.action!r}; expected one of: {', '.join(ACTIONS)}"
            )
        if data.action == "publish" and not (data.reason or "").strip():
            raise ActionValidationError("Reason required for publish")

        flag = store.mutate(FEATURE_FLAGS, data.flag_id, partial(handler, data))
        if flag is None:
            raise NotFoundError("Feature flag not found")
        logger.info(
            "Feature flag %s: %s (status=%s, version=%s, draftVersion=%s)",
            flag.key,
            data.action,
            flag.status,
            flag.version,
            flag.draft_version,
        )
        if data.action in AUDITED:
            audit_action, verb = AUDITED[data.action]
            await AuditService.record(
                store,
                action=audit_action,
                entity_type="FeatureFlag",
                entity_id=flag.id,
                actor_id=ADMIN_USER_ID,
                description=f"{verb} feature flag: {flag.name}",
                reason=data.reason,
                correlationId=correlation_id,
            )
        return flag
