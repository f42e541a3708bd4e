"""
Tests for scoped order views
"""

from decimal import Decimal

import pytest

from vendor_refunds.core.exceptions import AuthorizationError
from vendor_refunds.domains.orders.models import EffectiveScope, Order, ScopeSource
from vendor_refunds.domains.orders.services import OrderScopeFilter

from .conftest import make_line_item


@pytest.fixture
def scope_filter():
    return OrderScopeFilter()


class TestApply:
    def test_vendor_sees_only_own_items(self, scope_filter, multi_vendor_order):
        scoped = scope_filter.apply(multi_vendor_order, EffectiveScope.restricted_to("Nike"))

        assert [item.id for item in scoped.line_items] == ["nike-1", "nike-2"]
        assert scoped.visible_item_count == 2
        assert scoped.visible_quantity == 3
        assert scoped.visible_subtotal == Decimal("45.00")
        assert scoped.formatted_subtotal == "45.00 USD"

    def test_other_vendor_sees_only_theirs(self, scope_filter, multi_vendor_order):
        scoped = scope_filter.apply(multi_vendor_order, EffectiveScope.restricted_to("Acme"))

        assert [item.id for item in scoped.line_items] == ["acme-1"]
        assert scoped.visible_subtotal == Decimal("25.00")

    def test_unrestricted_sees_everything(self, scope_filter, multi_vendor_order):
        scoped = scope_filter.apply(multi_vendor_order, EffectiveScope.unrestricted())

        assert scoped.visible_item_count == 3
        assert scoped.visible_quantity == 8
        assert scoped.visible_subtotal == Decimal("70.00")

    def test_assigned_vendor_without_items_is_forbidden(self, scope_filter, acme_only_order):
        with pytest.raises(AuthorizationError) as exc_info:
            scope_filter.apply(acme_only_order, EffectiveScope.restricted_to("Nike"))

        assert exc_info.value.error_code == "FORBIDDEN"
        assert exc_info.value.vendor == "Nike"

    def test_admin_filter_without_match_is_empty(self, scope_filter, acme_only_order):
        scope = EffectiveScope.restricted_to("Nike", ScopeSource.ADMIN_FILTER)
        scoped = scope_filter.apply(acme_only_order, scope)

        assert scoped.is_empty
        assert scoped.visible_subtotal == Decimal("0")

    def test_vendor_match_is_case_sensitive(self, scope_filter, multi_vendor_order):
        with pytest.raises(AuthorizationError):
            scope_filter.apply(multi_vendor_order, EffectiveScope.restricted_to("nike"))

    def test_items_without_vendor_only_visible_unrestricted(self, scope_filter):
        order = Order(
            id="order-unknown",
            line_items=[
                make_line_item("known", "Nike", 1, "10.00"),
                make_line_item("unknown", None, 1, "3.00"),
            ],
        )

        scoped = scope_filter.apply(order, EffectiveScope.restricted_to("Nike"))
        assert [item.id for item in scoped.line_items] == ["known"]

        scoped = scope_filter.apply(order, EffectiveScope.unrestricted())
        assert scoped.visible_item_count == 2

    def test_subtotal_prefers_original_total(self, scope_filter):
        order = Order(
            id="order-totals",
            line_items=[make_line_item("discounted", "Nike", 2, "10.00", original_total="18.00")],
        )
        scoped = scope_filter.apply(order, EffectiveScope.restricted_to("Nike"))
        assert scoped.visible_subtotal == Decimal("18.00")

    def test_apply_is_idempotent(self, scope_filter, multi_vendor_order):
        scope = EffectiveScope.restricted_to("Nike")
        assert scope_filter.apply(multi_vendor_order, scope) == scope_filter.apply(
            multi_vendor_order, scope
        )

    def test_source_order_is_untouched(self, scope_filter, multi_vendor_order):
        scope_filter.apply(multi_vendor_order, EffectiveScope.restricted_to("Nike"))
        assert multi_vendor_order.item_count == 3

    def test_hidden_items_remain_authoritative(self, scope_filter, multi_vendor_order):
        scoped = scope_filter.apply(multi_vendor_order, EffectiveScope.restricted_to("Nike"))

        assert scoped.visible_item("acme-1") is None
        assert scoped.authoritative_item("acme-1").vendor == "Acme"
        assert "acme-1" not in scoped.model_dump_json()


class TestSummarize:
    def test_skips_orders_without_visible_items(
        self, scope_filter, multi_vendor_order, acme_only_order
    ):
        rows = scope_filter.summarize(
            [multi_vendor_order, acme_only_order], EffectiveScope.restricted_to("Nike")
        )

        assert [row.order_id for row in rows] == [multi_vendor_order.id]
        assert rows[0].item_count == 2

    def test_unrestricted_lists_everything(
        self, scope_filter, multi_vendor_order, acme_only_order
    ):
        rows = scope_filter.summarize(
            [multi_vendor_order, acme_only_order], EffectiveScope.unrestricted()
        )

        assert [row.item_count for row in rows] == [3, 1]
