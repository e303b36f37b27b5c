"""
Business logic for orders.

Orders are listed in insertion order and filtered by ``status`` and
``userId``.  Two mutations exist: setting the status of one order and
cancelling several orders at once.  Both stamp ``updatedAt`` and write
one audit row per changed order.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.errors import ActionValidationError, NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import ORDERS, DataStore
from ..schemas.entity import utcnow
from ..schemas.order import Order, OrderBulkAction, OrderStatusUpdate
from .audit_service import AuditService

logger = logging.getLogger(__name__)

ORDER_FILTERS = ("status", "userId")

BULK_CANCEL = "bulk_cancel"

# Orders in these states are left alone by a bulk cancel.
NOT_CANCELLABLE = frozenset({"delivered", "cancelled", "refunded"})


class _NotCancellable(Exception):
    pass


def _cancel(order: Order) -> None:
    if order.status in NOT_CANCELLABLE:
        raise _NotCancellable(order.status)
    order.status = "cancelled"
    order.updated_at = utcnow()


class OrderService:
    """Service for listing orders and changing their status."""

    @classmethod
    async def list_orders(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[Order]:
        return run_query(store.all(ORDERS), params, paging, ORDER_FILTERS)

    @classmethod
    async def update_status(
        cls,
        store: DataStore,
        data: OrderStatusUpdate,
        correlation_id: Optional[str] = None,
    ) -> Order:
        """Set the status of one order; any transition is allowed."""
        before = store.find_by_id(ORDERS, data.order_id)
        if before is None:
            raise NotFoundError("Order not found")

        def apply(order: Order) -> None:
            order.status = data.status
            order.updated_at = utcnow()

        order = store.mutate(ORDERS, data.order_id, apply)
        if order is None:
            raise NotFoundError("Order not found")
        logger.info("Order %s: %s -> %s", order.id, before.status, order.status)
        await AuditService.record(
            store,
            action="update_order_status",
            entity_type="Order",
            entity_id=order.id,
            actor_id=ADMIN_USER_ID,
            description=f"Changed order status from {before.status} to {order.status}",
            reason=data.reason,
            correlationId=correlation_id,
        )
        return order

    @classmethod
    async def bulk_action(
        cls,
        store: DataStore,
        data: OrderBulkAction,
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Cancel every listed order that can still be cancelled.

        Unknown ids and orders that are already delivered, cancelled or
        refunded are skipped rather than failing the whole request.
        Returns ``{"affectedCount": n, "cancelled": [...], "skipped": [...]}``.
        Raises ``ActionValidationError`` for any action other than
        ``bulk_cancel``.
        """
        if data.action != BULK_CANCEL:
            raise ActionValidationError(
                f"Unsupported order action {data.action!r}; expected {BULK_CANCEL!r}"
            )

        cancelled: List[str] = []
        skipped: List[str] = []
        for order_id in dict.fromkeys(data.entity_ids):
            before = store.find_by_id(ORDERS, order_id)
            try:
                order = store.mutate(ORDERS, order_id, _cancel)
            except _NotCancellable:
                order = None
            if order is None or before is None:
                skipped.append(order_id)
                continue
            cancelled.append(order_id)
            await AuditService.record(
                store,
                action="cancel_order",
                entity_type="Order",
                entity_id=order_id,
                actor_id=ADMIN_USER_ID,
                description=f"Cancelled order (was {before.status})",
                reason=data.reason,
                correlationId=correlation_id,
            )

        logger.info("Bulk cancel: %d cancelled, %d skipped", len(cancelled), len(skipped))
        return {"affectedCount": len(cancelled), "cancelled": cancelled, "skipped": skipped}
