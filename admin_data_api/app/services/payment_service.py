"""
Business logic for payments.

Payments are read-only except for one action, ``refund``.  A refund
requires a reason, marks the payment ``refunded``, stamps
``refundedAt`` and is written to the audit log.
"""

import logging
from typing import Mapping, Optional

from ..core.errors import ActionValidationError, NotFoundError
from ..core.query import Page, PageParams, run_query
from ..core.security import ADMIN_USER_ID
from ..core.store import PAYMENTS, DataStore
from ..schemas.entity import utcnow
from ..schemas.payment import Payment, PaymentActionRequest
from .audit_service import AuditService

logger = logging.getLogger(__name__)

PAYMENT_FILTERS = ("status", "userId")

REFUND = "refund"
REFUNDED = "refunded"


class PaymentService:
    """Service for listing payments and processing refunds."""

    @classmethod
    async def list_payments(
        cls,
        store: DataStore,
        params: Mapping[str, str],
        paging: PageParams,
    ) -> Page[Payment]:
        return run_query(store.all(PAYMENTS), params, paging, PAYMENT_FILTERS)

    @classmethod
    async def apply_action(
        cls,
        store: DataStore,
        data: PaymentActionRequest,
        correlation_id: Optional[str] = None,
    ) -> Payment:
        """Refund a payment.

        Raises ``NotFoundError`` for an unknown payment (checked first)
        and ``ActionValidationError`` for an unknown action, a missing
        reason or a payment that is already refunded.
        """
        if store.find_by_id(PAYMENTS, data.payment_id) is None:
            raise NotFoundError("Payment not found")
        if data.action != REFUND:
            raise ActionValidationError(
                f"Unsupported payment action {data.action!r}; expected {REFUND!r}"
            )
        reason = (data.reason or "").strip()
        if not reason:
            raise ActionValidationError("A reason is required to refund a payment")

        def refund(payment: Payment) -> None:
            if payment.status == REFUNDED:
                raise ActionValidationError("Payment is already refunded")
            payment.status = REFUNDED
            payment.refunded_at = utcnow()
            payment.refund_reason = reason

        payment = store.mutate(PAYMENTS, data.payment_id, refund)
        if payment is None:
            raise NotFoundError("Payment not found")
        logger.info("Payment %s refunded (%s %s)", payment.id, payment.amount, payment.currency)
        await AuditService.record(
            store,
            action="refund_payment",
            entity_type="Payment",
            entity_id=payment.id,
            actor_id=ADMIN_USER_ID,
            description=f"Refunded payment of {payment.amount} {payment.currency}",
            reason=reason,
            correlationId=correlation_id,
        )
        return payment
