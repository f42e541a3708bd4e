from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from vendor_refunds.core.exceptions import MalformedDataError
from vendor_refunds.core.logging import get_logger
from vendor_refunds.domains.orders.models import LineItem, Order
from vendor_refunds.shared.helpers import to_decimal


def _parse_iso(dt: Optional[str]) -> Optional[datetime]:
    if not dt or not isinstance(dt, str):
        return None
    try:
        if dt.endswith("Z"):
            dt = dt.replace("Z", "+00:00")
        return datetime.fromisoformat(dt)
    except ValueError:
        return None


def _money_from_set(money_set: Optional[Dict[str, Any]]) -> Optional[Decimal]:
    # Expect shape: { shopMoney: { amount: ".." } }
    if not money_set:
        return None
    amount = (money_set.get("shopMoney") or {}).get("amount")
    if amount is None:
        return None
    return to_decimal(amount)


def _edges(connection: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if not connection:
        return []
    return [edge.get("node") or {} for edge in connection.get("edges") or []]


class GraphQLOrderAdapter:
    """Maps an Admin GraphQL order node onto the Order model"""

    def __init__(self):
        self.logger = get_logger(__name__)

    def to_order(self, payload: Dict[str, Any]) -> Order:
        if not isinstance(payload, dict) or not payload.get("id"):
            raise MalformedDataError("Order payload has no id", field="id")

        try:
            line_items = [self._to_line_item(node) for node in _edges(payload.get("lineItems"))]
            return Order(
                id=payload["id"],
                name=payload.get("name"),
                financial_status=payload.get("displayFinancialStatus"),
                fulfillment_status=payload.get("displayFulfillmentStatus"),
                currency=payload.get("currencyCode") or "USD",
                created_at=_parse_iso(payload.get("createdAt")),
                line_items=line_items,
            )
        except (ValidationError, ValueError, TypeError) as e:
            self.logger.error(
                "Malformed order payload", order_id=payload.get("id"), error=str(e)
            )
            raise MalformedDataError(
                f"Order {payload.get('id')} failed validation",
                field="order",
                value=payload.get("id"),
                cause=e,
            ) from e

    def _to_line_item(self, node: Dict[str, Any]) -> LineItem:
        variant = node.get("variant") or {}
        product = variant.get("product") or {}
        image = variant.get("image") or {}

        # Price actually charged on the order; the variant price is today's
        # catalog price and only a fallback for old payloads.
        unit_price = _money_from_set(node.get("originalUnitPriceSet"))
        if unit_price is None and variant.get("price") is not None:
            unit_price = to_decimal(variant.get("price"))
        if unit_price is None:
            raise ValueError(f"line item {node.get('id')} has no unit price")

        quantity = node.get("quantity")
        if quantity is None:
            raise ValueError(f"line item {node.get('id')} has no quantity")
        refundable = node.get("refundableQuantity")
        if refundable is None:
            refundable = quantity

        variant_title = variant.get("title")
        if variant_title == "Default Title":
            variant_title = None

        return LineItem(
            id=node.get("id") or "",
            title=node.get("title") or "",
            sku=node.get("sku") or None,
            variant_title=variant_title,
            image_url=image.get("url"),
            purchased_quantity=quantity,
            refundable_quantity=refundable,
            unit_price=unit_price,
            original_total=_money_from_set(node.get("originalTotalSet")),
            vendor=product.get("vendor") or node.get("vendor") or None,
        )
