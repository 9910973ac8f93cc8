"""Application tests for the status operations of OrderService."""

import pytest
from commerce.errors import CommerceError, ErrorKind
from commerce.order.order import Order, OrderStatus, PaymentStatus
from commerce.order.service import OrderService
from protean import current_domain


@pytest.fixture()
def service():
    return OrderService()


@pytest.fixture()
def order(service, user, cart, shipping_address):
    return service.create_order(user.id, shipping_address)


def _stored(order_id):
    return current_domain.repository_for(Order).get(order_id)


def _without_status(order):
    data = order.to_dict()
    data.pop("order_status")
    data.pop("_version", None)
    return data


class TestPlacedOrder:
    def test_sets_status_and_payment(self, service, order):
        placed = service.placed_order(order.id)
        assert placed.order_status == OrderStatus.PLACED.value
        assert placed.payment_details.status == PaymentStatus.COMPLETED.value

    def test_persists(self, service, order):
        service.placed_order(order.id)
        stored = _stored(order.id)
        assert stored.order_status == OrderStatus.PLACED.value
        assert stored.payment_details.status == PaymentStatus.COMPLETED.value

    def test_only_status_and_payment_change(self, service, order):
        before = _without_status(order)
        before.pop("payment_details")
        after = _without_status(service.placed_order(order.id))
        after.pop("payment_details")
        assert after == before


class TestStatusOperations:
    def test_confirmed_order(self, service, order):
        service.placed_order(order.id)
        assert service.confirmed_order(order.id).order_status == OrderStatus.CONFIRMED.value

    def test_ship_order(self, service, order):
        service.placed_order(order.id)
        service.confirmed_order(order.id)
        assert service.ship_order(order.id).order_status == OrderStatus.SHIPPED.value

    def test_delivered_order(self, service, order):
        service.placed_order(order.id)
        service.confirmed_order(order.id)
        service.ship_order(order.id)
        delivered = service.delivered_order(order.id)
        assert delivered.order_status == OrderStatus.DELIVERED.value
        assert _stored(order.id).order_status == OrderStatus.DELIVERED.value

    def test_cancelled_order(self, service, order):
        assert service.cancelled_order(order.id).order_status == OrderStatus.CANCELLED.value

    def test_confirm_leaves_everything_else_unchanged(self, service, order):
        placed = service.placed_order(order.id)
        before = _without_status(placed)
        after = _without_status(service.confirmed_order(order.id))
        assert after == before

    def test_payment_status_untouched_by_cancel(self, service, order):
        cancelled = service.cancelled_order(order.id)
        assert cancelled.payment_details.status == PaymentStatus.PENDING.value


class TestUnconditionalStatusChanges:
    def test_pending_order_can_be_shipped(self, service, order):
        before = _without_status(order)
        shipped = service.ship_order(order.id)
        assert shipped.order_status == OrderStatus.SHIPPED.value
        assert _without_status(shipped) == before
        assert _stored(order.id).order_status == OrderStatus.SHIPPED.value

    def test_delivered_order_can_be_placed_again(self, service, order):
        for step in (service.placed_order, service.confirmed_order, service.ship_order, service.delivered_order):
            step(order.id)
        delivered = _stored(order.id)

        placed = service.placed_order(order.id)
        assert placed.order_status == OrderStatus.PLACED.value
        assert placed.payment_details.status == PaymentStatus.COMPLETED.value
        assert _without_status(placed) == _without_status(delivered)
        assert _stored(order.id).order_status == OrderStatus.PLACED.value


class TestStrictStatusChanges:
    def test_ship_pending_order_fails_validation(self, service, order):
        with pytest.raises(CommerceError) as exc_info:
            service.ship_order(order.id, strict=True)
        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert "Cannot transition from PENDING to SHIPPED" in exc_info.value.message

    def test_rejected_change_is_not_persisted(self, service, order):
        with pytest.raises(CommerceError):
            service.delivered_order(order.id, strict=True)
        assert _stored(order.id).order_status == OrderStatus.PENDING.value

    def test_usual_progression_is_accepted(self, service, order):
        service.placed_order(order.id, strict=True)
        service.confirmed_order(order.id, strict=True)
        assert _stored(order.id).order_status == OrderStatus.CONFIRMED.value



class TestUnknownOrder:
    @pytest.mark.parametrize(
        "operation",
        ["placed_order", "confirmed_order", "ship_order", "delivered_order", "cancelled_order"],
    )
    def test_unknown_id_fails_not_found(self, service, operation):
        with pytest.raises(CommerceError) as exc_info:
            getattr(service, operation)("no-such-order")
        assert exc_info.value.kind == ErrorKind.NOT_FOUND
        assert exc_info.value.context["order_id"] == "no-such-order"

    def test_unknown_id_performs_no_write(self, service, order):
        with pytest.raises(CommerceError):
            service.placed_order("no-such-order")
        orders = current_domain.repository_for(Order).list_all()
        assert [o.order_status for o in orders] == [OrderStatus.PENDING.value]
