"""
Shared fixtures for the vendor refunds test suite
"""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

import pytest

from vendor_refunds.core.exceptions import UpstreamRejectedError
from vendor_refunds.domains.orders.interfaces import IOrderSource, IRefundCommitSink
from vendor_refunds.domains.orders.models import LineItem, Order, RefundCommit
from vendor_refunds.domains.orders.services import (
    OrderAccessService,
    RefundReconciler,
    VendorDirectory,
)

NIKE_STAFF = "vendor1@example.com"
ACME_STAFF = "vendor2@example.com"
ADMIN = "owner@example.com"

VENDOR_STAFF_MAPPING = {
    NIKE_STAFF: "Nike",
    ACME_STAFF: "Acme",
    "test-vendor@example.com": "Test Vendor",
}


def make_line_item(
    item_id: str,
    vendor: Optional[str],
    quantity: int,
    unit_price: str,
    refundable: Optional[int] = None,
    original_total: Optional[str] = None,
    title: Optional[str] = None,
) -> LineItem:
    return LineItem(
        id=item_id,
        title=title or f"Product {item_id}",
        sku=f"SKU-{item_id}",
        purchased_quantity=quantity,
        refundable_quantity=quantity if refundable is None else refundable,
        unit_price=Decimal(unit_price),
        original_total=Decimal(original_total) if original_total is not None else None,
        vendor=vendor,
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back after a test installs handlers"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def multi_vendor_order() -> Order:
    """Two Nike lines and one Acme line: 2x10.00, 1x25.00, 5x5.00"""
    return Order(
        id="gid://shopify/Order/1001",
        name="#1001",
        financial_status="PAID",
        fulfillment_status="UNFULFILLED",
        currency="USD",
        line_items=[
            make_line_item("nike-1", "Nike", 2, "10.00"),
            make_line_item("nike-2", "Nike", 1, "25.00"),
            make_line_item("acme-1", "Acme", 5, "5.00"),
        ],
    )


@pytest.fixture
def acme_only_order() -> Order:
    return Order(
        id="gid://shopify/Order/1002",
        name="#1002",
        financial_status="PAID",
        currency="USD",
        line_items=[make_line_item("acme-9", "Acme", 1, "99.00")],
    )


@pytest.fixture
def directory() -> VendorDirectory:
    return VendorDirectory(VENDOR_STAFF_MAPPING)


class InMemoryOrderSource(IOrderSource):
    """Order source serving fixed orders; counts fetches"""

    def __init__(self, orders: List[Order]):
        self.orders: Dict[str, Order] = {order.id: order for order in orders}
        self.fetches: List[str] = []

    async def get_order(self, order_id: str) -> Optional[Order]:
        self.fetches.append(order_id)
        return self.orders.get(order_id)

    async def list_orders(self, limit: Optional[int] = None) -> List[Order]:
        orders = list(self.orders.values())
        return orders[:limit] if limit else orders


class RecordingRefundSink(IRefundCommitSink):
    """Refund sink that records commits and can be told to reject"""

    def __init__(self, reject_with: Optional[List[str]] = None):
        self.commits: List[RefundCommit] = []
        self.reject_with = reject_with

    async def commit(self, refund: RefundCommit) -> str:
        self.commits.append(refund)
        if self.reject_with:
            raise UpstreamRejectedError(
                "Shopify rejected the refund",
                reasons=self.reject_with,
                order_id=refund.order_id,
            )
        return f"gid://shopify/Refund/{len(self.commits)}"


@pytest.fixture
def order_source(multi_vendor_order, acme_only_order) -> InMemoryOrderSource:
    return InMemoryOrderSource([multi_vendor_order, acme_only_order])


@pytest.fixture
def refund_sink() -> RecordingRefundSink:
    return RecordingRefundSink()


@pytest.fixture
def service(directory, order_source, refund_sink) -> OrderAccessService:
    return OrderAccessService(
        directory=directory,
        order_source=order_source,
        refund_sink=refund_sink,
        reconciler=RefundReconciler(
            max_quantity=1000, max_unit_price=Decimal("100000")
        ),
    )
