"""
Business logic for devices.

Devices can be listed (optionally per user) and changed through three
actions: ``block``, ``unblock`` and ``trust``.  Every action is applied
through ``DataStore.mutate`` so the change is complete and visible to
the next read by the time the call returns.
"""

import logging
from typing import Callable, Dict, Mapping, Optional

from ..core.config import settings
from ..core.errors import ActionValidationError, NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import DEVICES, DataStore
from ..schemas.device import TRUST_SCORE_MAX, Device
from .audit_service import AuditService

logger = logging.getLogger(__name__)

DEVICE_FILTERS = ("userId",)


def _block(device: Device) -> None:
    device.blocked = True


def _unblock(device: Device) -> None:
    device.blocked = False


def _trust(device: Device) -> None:
    device.trust_score = min(TRUST_SCORE_MAX, device.trust_score + settings.trust_step)


ACTIONS: Dict[str, Callable[[Device], None]] = {
    "block": _block,
    "unblock": _unblock,
    "trust": _trust,
}


class DeviceService:
    """Service for listing and updating devices."""

    @classmethod
    async def list_devices(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[Device]:
        """Return one page of devices in insertion order, filtered by ``userId``."""
        return run_query(store.all(DEVICES), params, paging, DEVICE_FILTERS)

    @classmethod
    async def apply_action(
        cls,
        store: DataStore,
        device_id: str,
        action: str,
        correlation_id: Optional[str] = None,
    ) -> Device:
        """Apply ``action`` to a device and return the updated device.

        Raises ``NotFoundError`` if the device does not exist and
        ``ActionValidationError`` if the action is not one of
        ``block``, ``unblock`` or ``trust``.  The existence check comes
        first, so an unknown device is reported as missing whatever the
        action.  ``block``/``unblock`` are idempotent and ``trust`` never
        raises the score above 100.  A successful action is written to
        the audit log as ``<action>_device``.
        """
        if store.find_by_id(DEVICES, device_id) is None:
            raise NotFoundError("Device not found")
        mutator = ACTIONS.get(action)
        if mutator is None:
            raise ActionValidationError(
                f"Unsupported device action {action!r}; expected one of: {', '.join(ACTIONS)}"
            )
        device = store.mutate(DEVICES, device_id, mutator)
        if device is None:
            # Removed between the lookup and the mutation.
            raise NotFoundError("Device not found")
        logger.info(
            "Device %s: %s (blocked=%s, trustScore=%s)",
            device_id,
            action,
            device.blocked,
            device.trust_score,
        )
        await AuditService.record(
            store,
            action=f"{action}_device",
            entity_type="Device",
            entity_id=device_id,
            actor_id=ADMIN_USER_ID,
            description=f"Applied '{action}' to device {device_id}",
            correlationId=correlation_id,
        )
        return device
