"""Shared BDD fixtures and step definitions for the order lifecycle."""

import pytest
from commerce.cart.cart import Cart
from commerce.errors import CommerceError
from commerce.order.order import Order, OrderItem
from commerce.order.service import OrderService
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def service():
    return OrderService()


@pytest.fixture()
def outcome():
    """Container for the order under test and any captured error."""
    return {"order_id": None, "error": None}


@pytest.fixture()
def run(outcome):
    """Call an OrderService operation, recording the order it returns or the error it raises."""

    def _run(operation, *args, **kwargs):
        try:
            result = operation(*args, **kwargs)
        except CommerceError as exc:
            outcome["error"] = exc
            return None
        if isinstance(result, Order):
            outcome["order_id"] = result.id
        return result

    return _run


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a user with a cart holding 2 shirts and 3 mugs")
def _(cart):
    return cart


@given("the user's cart is empty")
def _(cart):
    for item in list(cart.items):
        cart.remove_item(item.id)
    current_domain.repository_for(Cart).add(cart)


@given("the user has checked out")
def _(service, run, user, shipping_address):
    run(service.create_order, user.id, shipping_address)


@given("the order has been delivered")
def _(service, run, outcome):
    for operation in (service.placed_order, service.confirmed_order, service.ship_order, service.delivered_order):
        run(operation, outcome["order_id"])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.parse('the order status is "{status}"'))
def _(outcome, status):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.order_status == status


@then(parsers.parse('the payment status is "{status}"'))
def _(outcome, status):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.payment_details.status == status


@then(parsers.parse("the order has {count:d} items linked to it"))
def _(outcome, count):
    items = current_domain.repository_for(OrderItem).for_order(outcome["order_id"])
    assert len(items) == count


@then("the order totals equal the cart totals")
def _(outcome, cart):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.total_price == cart.total_price
    assert order.total_discounted_price == cart.total_discounted_price
    assert order.discount == cart.discount
    assert order.total_item == cart.total_item


@then(parsers.parse('the operation fails with a "{kind}" error'))
def _(outcome, kind):
    assert outcome["error"] is not None
    assert outcome["error"].kind.value == kind
