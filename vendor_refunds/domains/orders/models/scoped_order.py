"""
Scoped views of orders
"""

from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, PrivateAttr

from vendor_refunds.shared.helpers import format_money

from .order import LineItem, Order
from .scope import EffectiveScope


class ScopedOrder(BaseModel):
    """
    An order reduced to what one effective scope may see.

    Only the order header and the visible line items are exposed; totals are
    recomputed over the visible items. The full authoritative item set is kept
    privately so refund validation can tell an unknown line item apart from
    one that belongs to another vendor.
    """

    order_id: str = Field(..., description="Order ID")
    name: Optional[str] = Field(None, description="Order name/number")
    financial_status: Optional[str] = Field(None, description="Financial status")
    fulfillment_status: Optional[str] = Field(None, description="Fulfillment status")
    currency: str = Field(..., description="Order currency code")
    scope: EffectiveScope = Field(..., description="Scope this view was built for")

    line_items: List[LineItem] = Field(
        default_factory=list, description="Visible line items, in source order"
    )
    visible_item_count: int = Field(0, description="Number of visible line items")
    visible_quantity: int = Field(0, description="Purchased units across visible items")
    visible_subtotal: Decimal = Field(
        Decimal("0"), description="Sum of authoritative line totals of visible items"
    )

    _authoritative_items: Dict[str, LineItem] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_order(
        cls,
        order: Order,
        scope: EffectiveScope,
        visible: List[LineItem],
        subtotal: Decimal,
    ) -> "ScopedOrder":
        scoped = cls(
            order_id=order.id,
            name=order.name,
            financial_status=order.financial_status,
            fulfillment_status=order.fulfillment_status,
            currency=order.currency,
            scope=scope,
            line_items=list(visible),
            visible_item_count=len(visible),
            visible_quantity=sum(item.purchased_quantity for item in visible),
            visible_subtotal=subtotal,
        )
        scoped._authoritative_items = order.line_items_by_id()
        return scoped

    @property
    def is_empty(self) -> bool:
        return self.visible_item_count == 0

    @property
    def formatted_subtotal(self) -> str:
        return format_money(self.visible_subtotal, self.currency)

    def visible_item(self, line_item_id: str) -> Optional[LineItem]:
        for item in self.line_items:
            if item.id == line_item_id:
                return item
        return None

    def authoritative_item(self, line_item_id: str) -> Optional[LineItem]:
        """Look up any line item of the source order, visible or not"""
        return self._authoritative_items.get(line_item_id)


class OrderSummary(BaseModel):
    """Order list row, counted within the caller's scope"""

    order_id: str = Field(..., description="Order ID")
    name: Optional[str] = Field(None, description="Order name/number")
    financial_status: Optional[str] = Field(None, description="Financial status")
    item_count: int = Field(0, description="Visible line items")

    @classmethod
    def from_scoped(cls, scoped: ScopedOrder) -> "OrderSummary":
        return cls(
            order_id=scoped.order_id,
            name=scoped.name,
            financial_status=scoped.financial_status,
            item_count=scoped.visible_item_count,
        )
