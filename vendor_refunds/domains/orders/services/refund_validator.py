"""
Refund draft validation

A draft only ever contributes ``{line_item_id: quantity}``. Prices, vendors
and refundable quantities always come from the authoritative order the
ScopedOrder was built from, fetched at validation time.
"""

import re
from decimal import Decimal
from typing import Any, Dict, List, Optional

from vendor_refunds.core.exceptions import (
    AuthorizationError,
    EmptyRefundError,
    InvalidQuantityError,
    NotFoundError,
)
from vendor_refunds.core.logging import get_logger

from ..models import (
    EffectiveScope,
    RefundDraft,
    ScopedOrder,
    ValidatedRefundEntry,
    ValidatedRefundRequest,
)

logger = get_logger(__name__)

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_quantity(raw: Any) -> Optional[int]:
    """
    Parse a draft quantity the way a cleared or garbled form field reads.

    Returns the integer, or None when the value is not an integer at all.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, Decimal):
        if not raw.is_finite() or raw != raw.to_integral_value():
            return None
        return int(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not _INTEGER_PATTERN.match(text):
            return None
        return int(text)
    return None


class RefundValidator:
    """Checks a refund draft against scope ownership and refundable quantities"""

    def validate(
        self, draft: RefundDraft, scoped_order: ScopedOrder, scope: EffectiveScope
    ) -> ValidatedRefundRequest:
        """
        Validate every entry of a draft; all or nothing.

        Entries whose quantity is blank, unparsable or not positive are
        treated as not selected and dropped. Every remaining entry must
        reference a line item of the order, inside the scope, with a
        quantity no larger than what is still refundable.

        Raises:
            AuthorizationError: an entry references another vendor's item
            NotFoundError: an entry references an unknown line item
            InvalidQuantityError: an entry exceeds the refundable quantity
            EmptyRefundError: nothing is left after dropping unselected entries
        """
        selected: Dict[str, int] = {}
        for raw_id, raw_quantity in draft.items():
            quantity = parse_quantity(raw_quantity)
            if quantity is None or quantity <= 0:
                continue
            selected[str(raw_id).strip()] = quantity

        if not selected:
            logger.info("Refund draft is empty", order_id=scoped_order.order_id)
            raise EmptyRefundError()

        entries: List[ValidatedRefundEntry] = []
        forbidden: List[Dict[str, Any]] = []
        missing: List[str] = []
        over_limit: List[Dict[str, Any]] = []

        for line_item_id, quantity in selected.items():
            item = scoped_order.authoritative_item(line_item_id)
            if item is None:
                missing.append(line_item_id)
                continue

            visible = scoped_order.visible_item(line_item_id) is not None
            if not visible or not scope.permits(item.vendor):
                forbidden.append({"line_item_id": line_item_id, "vendor": item.vendor})
                continue

            if quantity > item.refundable_quantity:
                over_limit.append(
                    {
                        "line_item_id": line_item_id,
                        "title": item.title,
                        "requested": quantity,
                        "refundable": item.refundable_quantity,
                    }
                )
                continue

            entries.append(
                ValidatedRefundEntry(
                    line_item_id=item.id,
                    quantity=quantity,
                    unit_price=item.unit_price,
                    title=item.title,
                    vendor=item.vendor,
                )
            )

        if forbidden:
            offending = [entry["vendor"] for entry in forbidden]
            logger.warning(
                "Refund draft references items outside scope",
                order_id=scoped_order.order_id,
                scope=str(scope),
                offending_vendors=offending,
            )
            raise AuthorizationError(
                "Refund includes line items you are not allowed to refund.",
                vendor=scope.vendor,
                offending_vendors=offending,
                details={
                    "order_id": scoped_order.order_id,
                    "line_item_ids": [entry["line_item_id"] for entry in forbidden],
                },
                reasons=[
                    f"Line item {entry['line_item_id']} belongs to vendor "
                    f"{entry['vendor'] or 'unknown'}"
                    for entry in forbidden
                ],
            )

        if missing:
            logger.info(
                "Refund draft references unknown line items",
                order_id=scoped_order.order_id,
                line_item_ids=missing,
            )
            raise NotFoundError(
                "Refund references line items that are not on this order.",
                resource="line_item",
                resource_id=missing[0],
                reasons=[f"Line item {line_item_id} not found" for line_item_id in missing],
            )

        if over_limit:
            logger.info(
                "Refund draft exceeds refundable quantities",
                order_id=scoped_order.order_id,
                violations=len(over_limit),
            )
            raise InvalidQuantityError(
                "Refund quantity exceeds the refundable quantity.",
                violations=over_limit,
                reasons=[
                    f"{v['title'] or v['line_item_id']}: requested {v['requested']}, "
                    f"only {v['refundable']} refundable"
                    for v in over_limit
                ],
            )

        return ValidatedRefundRequest(
            order_id=scoped_order.order_id,
            currency=scoped_order.currency,
            scope=scope,
            entries=entries,
        )
