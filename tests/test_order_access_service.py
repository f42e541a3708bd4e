"""
Tests for the order access service entry points
"""

from decimal import Decimal

import pytest

from vendor_refunds.core.exceptions import AuthorizationError, NotFoundError
from vendor_refunds.domains.orders.models import (
    Order,
    Principal,
    RefundLifecycle,
    RefundOutcome,
    RefundStatus,
)
from vendor_refunds.domains.orders.services import OrderAccessService

from .conftest import (
    ADMIN,
    NIKE_STAFF,
    InMemoryOrderSource,
    RecordingRefundSink,
    make_line_item,
)

ORDER_ID = "gid://shopify/Order/1001"
ACME_ORDER_ID = "gid://shopify/Order/1002"


class TestGetScopedOrder:
    @pytest.mark.asyncio
    async def test_vendor_view(self, service):
        scoped = await service.get_scoped_order(ORDER_ID, Principal(NIKE_STAFF))

        assert scoped.scope.vendor == "Nike"
        assert [item.id for item in scoped.line_items] == ["nike-1", "nike-2"]
        assert scoped.visible_subtotal == Decimal("45.00")

    @pytest.mark.asyncio
    async def test_vendor_filter_cannot_widen_scope(self, service):
        scoped = await service.get_scoped_order(ORDER_ID, Principal(NIKE_STAFF), "Acme")
        assert [item.vendor for item in scoped.line_items] == ["Nike", "Nike"]

    @pytest.mark.asyncio
    async def test_admin_filter(self, service):
        scoped = await service.get_scoped_order(ORDER_ID, Principal(ADMIN), "Acme")
        assert [item.id for item in scoped.line_items] == ["acme-1"]

    @pytest.mark.asyncio
    async def test_admin_sees_everything(self, service):
        scoped = await service.get_scoped_order(ORDER_ID, Principal(ADMIN))
        assert scoped.visible_item_count == 3

    @pytest.mark.asyncio
    async def test_forbidden_is_distinct_from_not_found(self, service):
        with pytest.raises(AuthorizationError):
            await service.get_scoped_order(ACME_ORDER_ID, Principal(NIKE_STAFF))

        with pytest.raises(NotFoundError):
            await service.get_scoped_order("gid://shopify/Order/404", Principal(NIKE_STAFF))

    @pytest.mark.asyncio
    async def test_admin_filter_without_match_is_empty(self, service):
        scoped = await service.get_scoped_order(ACME_ORDER_ID, Principal(ADMIN), "Nike")
        assert scoped.is_empty


class TestListScopedOrders:
    @pytest.mark.asyncio
    async def test_vendor_list_omits_foreign_orders(self, service):
        rows = await service.list_scoped_orders(Principal(NIKE_STAFF))

        assert [row.order_id for row in rows] == [ORDER_ID]
        assert rows[0].item_count == 2

    @pytest.mark.asyncio
    async def test_admin_list(self, service):
        rows = await service.list_scoped_orders(Principal(ADMIN))
        assert [row.item_count for row in rows] == [3, 1]

    @pytest.mark.asyncio
    async def test_limit(self, service):
        rows = await service.list_scoped_orders(Principal(ADMIN), limit=1)
        assert len(rows) == 1


class TestSubmitRefund:
    @pytest.mark.asyncio
    async def test_vendor_refund_succeeds(self, service, refund_sink):
        outcome = await service.submit_refund(
            ORDER_ID, Principal(NIKE_STAFF), {"nike-1": "1", "nike-2": 1}, note="Damaged"
        )

        assert outcome.ok
        assert outcome.status == RefundStatus.SUCCEEDED
        assert outcome.reference == "gid://shopify/Refund/1"
        assert outcome.commit.total_amount == Decimal("35.00")

        assert len(refund_sink.commits) == 1
        assert refund_sink.commits[0].note == "Damaged"

    @pytest.mark.asyncio
    async def test_foreign_item_is_forbidden_and_nothing_committed(self, service, refund_sink):
        with pytest.raises(AuthorizationError) as exc_info:
            await service.submit_refund(
                ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 1, "acme-1": 1}
            )

        assert exc_info.value.offending_vendors == ["Acme"]
        assert refund_sink.commits == []

    @pytest.mark.asyncio
    async def test_over_refund_is_invalid(self, service, refund_sink):
        outcome = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 3})

        assert outcome.status == RefundStatus.INVALID
        assert outcome.error_code == "INVALID_QUANTITY"
        assert outcome.reasons
        assert refund_sink.commits == []

    @pytest.mark.asyncio
    async def test_empty_draft_is_invalid(self, service, refund_sink):
        outcome = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": ""})

        assert outcome.status == RefundStatus.INVALID
        assert outcome.error_code == "EMPTY_REFUND"
        assert refund_sink.commits == []

    @pytest.mark.asyncio
    async def test_unknown_order(self, service):
        with pytest.raises(NotFoundError):
            await service.submit_refund("missing", Principal(ADMIN), {"x": 1})

    @pytest.mark.asyncio
    async def test_unknown_line_item(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.submit_refund(ORDER_ID, Principal(ADMIN), {"nope": 1})
        assert exc_info.value.resource == "line_item"

    @pytest.mark.asyncio
    async def test_rejection_reasons_pass_through(self, directory, order_source):
        sink = RecordingRefundSink(reject_with=["Refund amount exceeds available balance"])
        service = OrderAccessService(directory, order_source, sink)

        outcome = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 1})

        assert outcome.status == RefundStatus.REJECTED
        assert outcome.reasons == ["Refund amount exceeds available balance"]
        assert len(sink.commits) == 1

    @pytest.mark.asyncio
    async def test_order_is_refetched_for_each_submission(self, service, order_source):
        await service.get_scoped_order(ORDER_ID, Principal(NIKE_STAFF))
        await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 1})

        assert order_source.fetches == [ORDER_ID, ORDER_ID]

    @pytest.mark.asyncio
    async def test_validates_against_current_refundable_quantity(self, directory, refund_sink):
        order_source = InMemoryOrderSource(
            [Order(id=ORDER_ID, line_items=[make_line_item("nike-1", "Nike", 2, "10.00")])]
        )
        service = OrderAccessService(directory, order_source, refund_sink)

        first = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 2})
        assert first.ok

        # The order system now reports the item as fully refunded
        order_source.orders[ORDER_ID] = Order(
            id=ORDER_ID,
            line_items=[make_line_item("nike-1", "Nike", 2, "10.00", refundable=0)],
        )
        second = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 1})
        assert second.status == RefundStatus.INVALID

    @pytest.mark.asyncio
    async def test_refund_ignores_admin_filter(self, service, refund_sink):
        outcome = await service.submit_refund(
            ORDER_ID, Principal(ADMIN), {"nike-1": 1, "acme-1": 2}
        )

        assert outcome.ok
        assert outcome.commit.total_amount == Decimal("20.00")


class TestRefundOutcomeLifecycle:
    @pytest.mark.asyncio
    async def test_succeeded_outcome_carries_lifecycle_history(self, service):
        outcome = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 1})

        assert outcome.history == [
            RefundStatus.DRAFT,
            RefundStatus.VALIDATING,
            RefundStatus.VALIDATED,
            RefundStatus.RECONCILED,
            RefundStatus.SUBMITTED,
            RefundStatus.SUCCEEDED,
        ]
        assert outcome.status == outcome.history[-1]

    @pytest.mark.asyncio
    async def test_invalid_outcome_stops_at_validation(self, service):
        outcome = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 9})

        assert outcome.history == [
            RefundStatus.DRAFT,
            RefundStatus.VALIDATING,
            RefundStatus.INVALID,
        ]

    @pytest.mark.asyncio
    async def test_rejected_outcome_history(self, directory, order_source):
        sink = RecordingRefundSink(reject_with=["Order is archived"])
        service = OrderAccessService(directory, order_source, sink)

        outcome = await service.submit_refund(ORDER_ID, Principal(NIKE_STAFF), {"nike-1": 1})

        assert outcome.history[-2:] == [RefundStatus.SUBMITTED, RefundStatus.REJECTED]
        assert outcome.error_code == "UPSTREAM_REJECTED"

    def test_unfinished_lifecycle_has_no_outcome(self):
        lifecycle = RefundLifecycle(ORDER_ID)
        lifecycle.advance(RefundStatus.VALIDATING)

        with pytest.raises(ValueError):
            RefundOutcome.from_lifecycle(lifecycle, order_id=ORDER_ID)
