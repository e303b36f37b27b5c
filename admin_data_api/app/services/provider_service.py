"""
Business logic for providers.

A provider carries two independent states: its account ``status`` and
its document ``verificationStatus``.  Each state change is audited on
its own, so a request that changes both yields two audit rows.
"""

import logging
from typing import List, Mapping, Optional, Tuple

from ..core.errors import NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import PROVIDERS, DataStore
from ..schemas.provider import Provider, ProviderUpdateRequest
from .audit_service import AuditService

logger = logging.getLogger(__name__)

PROVIDER_FILTERS = ("status", "verificationStatus")


class ProviderService:
    """Service for listing providers and changing their status."""

    @classmethod
    async def list_providers(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[Provider]:
        return run_query(store.all(PROVIDERS), params, paging, PROVIDER_FILTERS)

    @classmethod
    async def update_provider(
        cls,
        store: DataStore,
        data: ProviderUpdateRequest,
        correlation_id: Optional[str] = None,
    ) -> Provider:
        """Apply the status changes in ``data`` and return the provider.

        Raises ``NotFoundError`` for an unknown provider.
        """
        before = store.find_by_id(PROVIDERS, data.provider_id)
        if before is None:
            raise NotFoundError("Provider not found")

        def apply(provider: Provider) -> None:
            if data.verification_status is not None:
                provider.verification_status = data.verification_status
            if data.status is not None:
                provider.status = data.status

        provider = store.mutate(PROVIDERS, data.provider_id, apply)
        if provider is None:
            raise NotFoundError("Provider not found")

        changes: List[Tuple[str, str, str, str]] = []
        if data.verification_status is not None:
            changes.append(
                (
                    "update_provider_verification",
                    "verification status",
                    before.verification_status,
                    data.verification_status,
                )
            )
        if data.status is not None:
            changes.append(("update_provider_status", "provider status", before.status, data.status))

        for action, label, old, new in changes:
            logger.info("Provider %s: %s %s -> %s", provider.id, label, old, new)
            await AuditService.record(
                store,
                action=action,
                entity_type="Provider",
                entity_id=provider.id,
                actor_id=ADMIN_USER_ID,
                description=f"Changed {label} from {old} to {new}",
                reason=data.reason,
                correlationId=correlation_id,
            )
        return provider
