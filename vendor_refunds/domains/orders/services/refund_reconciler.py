"""
Refund reconciliation

Turns a validated refund request into the commit payload for the order
system. Pure transform; no I/O.
"""

from decimal import Decimal, localcontext, Overflow, InvalidOperation
from typing import Optional

from vendor_refunds.core.config import settings
from vendor_refunds.core.exceptions import MalformedDataError
from vendor_refunds.core.logging import get_logger
from vendor_refunds.shared.helpers import quantize_money

from ..models import (
    Order,
    RefundCommit,
    RefundCommitLine,
    RefundTransaction,
    ValidatedRefundRequest,
)

logger = get_logger(__name__)


class RefundReconciler:
    """Computes refund totals and builds refund commits"""

    def __init__(
        self,
        max_quantity: Optional[int] = None,
        max_unit_price: Optional[Decimal] = None,
        default_currency_exponent: Optional[int] = None,
    ):
        vendor_settings = settings.vendors
        self.max_quantity = (
            max_quantity if max_quantity is not None else vendor_settings.MAX_REFUND_QUANTITY
        )
        self.max_unit_price = (
            max_unit_price if max_unit_price is not None else vendor_settings.MAX_UNIT_PRICE
        )
        self.default_currency_exponent = (
            default_currency_exponent
            if default_currency_exponent is not None
            else vendor_settings.DEFAULT_CURRENCY_EXPONENT
        )

    def build(
        self, validated: ValidatedRefundRequest, order: Order, note: Optional[str] = None
    ) -> RefundCommit:
        """
        Build the refund commit for a validated request.

        The total is the exact sum of unit price x quantity, rounded once at
        the end to the currency's minor unit.

        Raises:
            MalformedDataError: the request does not match the order, or a
                price or quantity is outside sane bounds
        """
        if validated.order_id != order.id:
            raise MalformedDataError(
                "Validated refund does not belong to this order",
                field="order_id",
                value=validated.order_id,
            )

        lines = []
        exact_total = Decimal("0")
        with localcontext() as ctx:
            ctx.traps[Overflow] = True
            ctx.traps[InvalidOperation] = True
            for entry in validated.entries:
                item = order.get_line_item(entry.line_item_id)
                if item is None:
                    raise MalformedDataError(
                        f"Line item {entry.line_item_id} disappeared from order {order.id}",
                        field="line_item_id",
                        value=entry.line_item_id,
                    )
                self._check_bounds(entry.line_item_id, item.unit_price, entry.quantity)
                try:
                    exact_total += item.unit_price * entry.quantity
                except (Overflow, InvalidOperation) as e:
                    raise MalformedDataError(
                        "Refund amount is not representable",
                        field="total_amount",
                        cause=e,
                    ) from e
                lines.append(
                    RefundCommitLine(line_item_id=item.id, quantity=entry.quantity)
                )

        total = quantize_money(exact_total, order.currency, self.default_currency_exponent)
        commit = RefundCommit(
            order_id=order.id,
            currency=order.currency,
            line_items=lines,
            total_amount=total,
            transaction=RefundTransaction(amount=total, currency=order.currency),
            note=note.strip() if note and note.strip() else None,
        )
        logger.info(
            "Reconciled refund",
            order_id=order.id,
            lines=len(lines),
            total_amount=str(total),
            currency=order.currency,
        )
        return commit

    def _check_bounds(self, line_item_id: str, unit_price: Decimal, quantity: int) -> None:
        if not isinstance(unit_price, Decimal) or not unit_price.is_finite():
            raise MalformedDataError(
                f"Unit price of line item {line_item_id} is not a finite amount",
                field="unit_price",
                value=unit_price,
            )
        if unit_price < 0 or unit_price > self.max_unit_price:
            raise MalformedDataError(
                f"Unit price of line item {line_item_id} is out of bounds",
                field="unit_price",
                value=unit_price,
            )
        if isinstance(quantity, bool) or quantity <= 0 or quantity > self.max_quantity:
            raise MalformedDataError(
                f"Refund quantity of line item {line_item_id} is out of bounds",
                field="quantity",
                value=quantity,
            )
