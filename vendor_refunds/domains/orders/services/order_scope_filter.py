"""
Order scope filter

Reduces a multi-vendor order to the line items one effective scope may see
and recomputes the order aggregates over that subset only.
"""

from decimal import Decimal
from typing import Iterable, List

from vendor_refunds.core.exceptions import AuthorizationError
from vendor_refunds.core.logging import get_logger

from ..models import EffectiveScope, LineItem, Order, OrderSummary, ScopedOrder

logger = get_logger(__name__)


class OrderScopeFilter:
    """Builds scoped views of orders"""

    def apply(self, order: Order, scope: EffectiveScope) -> ScopedOrder:
        """
        Filter an order down to a scope.

        Raises:
            AuthorizationError: the scope comes from a staff assignment and
                none of the order's line items belong to that vendor. An
                administrator's filter that matches nothing is a normal
                empty result instead.
        """
        if scope.is_restricted:
            visible = [item for item in order.line_items if item.belongs_to(scope.vendor)]
        else:
            visible = list(order.line_items)

        if not visible and scope.is_assigned:
            logger.warning(
                "Forbidden order access for vendor-assigned staff",
                order_id=order.id,
                vendor=scope.vendor,
            )
            raise AuthorizationError(
                "You do not have permission to view this order.",
                vendor=scope.vendor,
                details={"order_id": order.id},
            )

        subtotal = self._subtotal(visible)
        logger.debug(
            "Applied order scope",
            order_id=order.id,
            scope=str(scope),
            visible_items=len(visible),
        )
        return ScopedOrder.from_order(order, scope, visible, subtotal)

    def summarize(
        self, orders: Iterable[Order], scope: EffectiveScope
    ) -> List[OrderSummary]:
        """
        Order list rows for a scope.

        Orders with nothing visible are left out of the list rather than
        treated as forbidden: a listing never opens an individual order.
        """
        summaries = []
        for order in orders:
            if scope.is_restricted and not any(
                item.belongs_to(scope.vendor) for item in order.line_items
            ):
                continue
            summaries.append(OrderSummary.from_scoped(self.apply(order, scope)))
        return summaries

    def _subtotal(self, items: List[LineItem]) -> Decimal:
        return sum((item.line_total for item in items), Decimal("0"))
