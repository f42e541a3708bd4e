"""
Order access service

Entry points for viewing orders and submitting refunds. Each one resolves
the caller's scope through AccessScopeResolver before touching order data,
and refund submission always re-fetches the order so validation runs
against current authoritative data.
"""

from typing import List, Optional

from vendor_refunds.core.exceptions import (
    EmptyRefundError,
    InvalidQuantityError,
    NotFoundError,
    UpstreamRejectedError,
)
from vendor_refunds.core.logging import get_logger

from ..interfaces import IOrderSource, IRefundCommitSink
from ..models import (
    EffectiveScope,
    Order,
    OrderSummary,
    Principal,
    RefundDraft,
    RefundLifecycle,
    RefundOutcome,
    RefundStatus,
    ScopedOrder,
)
from .access_scope import AccessScopeResolver
from .order_scope_filter import OrderScopeFilter
from .refund_reconciler import RefundReconciler
from .refund_validator import RefundValidator
from .vendor_directory import VendorDirectory

logger = get_logger(__name__)


class OrderAccessService:
    """Vendor-scoped order views and refund submission"""

    def __init__(
        self,
        directory: VendorDirectory,
        order_source: IOrderSource,
        refund_sink: IRefundCommitSink,
        resolver: Optional[AccessScopeResolver] = None,
        scope_filter: Optional[OrderScopeFilter] = None,
        validator: Optional[RefundValidator] = None,
        reconciler: Optional[RefundReconciler] = None,
    ):
        self.directory = directory
        self.order_source = order_source
        self.refund_sink = refund_sink
        self.resolver = resolver or AccessScopeResolver()
        self.scope_filter = scope_filter or OrderScopeFilter()
        self.validator = validator or RefundValidator()
        self.reconciler = reconciler or RefundReconciler()

    def resolve_scope(
        self, principal: Principal, requested_vendor: Optional[str] = None
    ) -> EffectiveScope:
        assigned_vendor = self.directory.resolve(principal.email)
        return self.resolver.resolve(assigned_vendor, requested_vendor)

    async def _fetch_order(self, order_id: str) -> Order:
        order = await self.order_source.get_order(order_id)
        if order is None:
            logger.info("Order not found", order_id=order_id)
            raise NotFoundError(
                "Order not found", resource="order", resource_id=order_id
            )
        return order

    async def get_scoped_order(
        self,
        order_id: str,
        principal: Principal,
        requested_vendor: Optional[str] = None,
    ) -> ScopedOrder:
        """
        Order detail as the principal may see it.

        Raises:
            NotFoundError: unknown order
            AuthorizationError: vendor-assigned staff with no items on the order
        """
        scope = self.resolve_scope(principal, requested_vendor)
        order = await self._fetch_order(order_id)
        return self.scope_filter.apply(order, scope)

    async def list_scoped_orders(
        self,
        principal: Principal,
        requested_vendor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[OrderSummary]:
        """Recent orders with item counts inside the principal's scope"""
        scope = self.resolve_scope(principal, requested_vendor)
        orders = await self.order_source.list_orders(limit)
        return self.scope_filter.summarize(orders, scope)

    async def submit_refund(
        self,
        order_id: str,
        principal: Principal,
        draft: RefundDraft,
        note: Optional[str] = None,
    ) -> RefundOutcome:
        """
        Validate, reconcile and commit a refund draft.

        Returns Succeeded, Rejected (the order system refused; reasons passed
        through verbatim, never retried) or Invalid (quantities or an empty
        draft).

        Raises:
            NotFoundError: unknown order or line item
            AuthorizationError: the draft or the order is outside the scope
            MalformedDataError: authoritative data failed a sanity check
        """
        lifecycle = RefundLifecycle(order_id)
        scope = self.resolve_scope(principal)

        # Re-fetch: never validate against what the client last displayed
        order = await self._fetch_order(order_id)
        scoped = self.scope_filter.apply(order, scope)

        lifecycle.advance(RefundStatus.VALIDATING)
        try:
            validated = self.validator.validate(draft, scoped, scope)
        except (InvalidQuantityError, EmptyRefundError) as e:
            lifecycle.advance(RefundStatus.INVALID)
            return self._finish(
                lifecycle, order_id=order.id, reasons=e.reasons, error_code=e.error_code
            )
        except Exception:
            lifecycle.advance(RefundStatus.INVALID)
            raise
        lifecycle.advance(RefundStatus.VALIDATED)

        try:
            commit = self.reconciler.build(validated, order, note)
        except Exception:
            lifecycle.advance(RefundStatus.INVALID)
            raise
        lifecycle.advance(RefundStatus.RECONCILED)

        lifecycle.advance(RefundStatus.SUBMITTED)
        try:
            reference = await self.refund_sink.commit(commit)
        except UpstreamRejectedError as e:
            lifecycle.advance(RefundStatus.REJECTED)
            logger.warning(
                "Refund rejected by order system",
                order_id=order.id,
                reasons=e.reasons,
            )
            return self._finish(lifecycle, order_id=order.id, reasons=e.reasons)

        lifecycle.advance(RefundStatus.SUCCEEDED)
        logger.info(
            "Refund committed",
            order_id=order.id,
            reference=reference,
            total_amount=str(commit.total_amount),
            scope=str(scope),
        )
        return self._finish(lifecycle, order_id=order.id, reference=reference, commit=commit)

    def _finish(self, lifecycle: RefundLifecycle, **fields) -> RefundOutcome:
        outcome = RefundOutcome.from_lifecycle(lifecycle, **fields)
        logger.info(
            "Refund attempt finished",
            order_id=lifecycle.order_id,
            status=outcome.status.value,
            history=[status.value for status in outcome.history],
        )
        return outcome
