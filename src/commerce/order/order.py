"""Order aggregate and the OrderItem records it owns.

An Order is created from a user's cart. Each cart line is copied into an
OrderItem snapshot that points back at the order, and the cart totals are
copied onto the order verbatim.

Status changes are applied as requested: any status can be set from any
other one. The usual progression is

    PENDING → PLACED → CONFIRMED → SHIPPED → DELIVERED
    CANCELLED (from any state except DELIVERED and CANCELLED)

and `can_transition_to` reports whether a change follows it. Passing
`strict=True` to a transition method rejects changes that do not.
"""

import json
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text, ValueObject

from commerce.domain import commerce
from commerce.order.events import (
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderPlaced,
    OrderShipped,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "PENDING"
    PLACED = "PLACED"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


# Usual progression, enforced only for strict transitions
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PLACED, OrderStatus.CANCELLED},
    OrderStatus.PLACED: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

# Cart item fields an order line cannot do without; zero counts as missing
_REQUIRED_ITEM_FIELDS = ("price", "product_id", "quantity")


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@commerce.value_object(part_of="Order")
class PaymentDetails:
    """Payment progress of an order.

    No gateway is involved: the status flips to COMPLETED when the order is
    placed.
    """

    status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    payment_method = String(max_length=50)
    payment_id = String(max_length=255)


# ---------------------------------------------------------------------------
# OrderItem: stored separately, linked to its order by order_id
# ---------------------------------------------------------------------------
@commerce.aggregate
class OrderItem:
    """A copy of a cart line taken when the order was created.

    Later price changes on the product or the cart do not affect it.
    """

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    user_id = Identifier()
    price = Float(required=True, min_value=0.0)
    discounted_price = Float(min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    size = String(max_length=20)

    @classmethod
    def snapshot(cls, order_id, cart_item):
        return cls(
            order_id=order_id,
            product_id=cart_item.product_id,
            user_id=cart_item.user_id,
            price=cart_item.price,
            discounted_price=cart_item.discounted_price,
            quantity=cart_item.quantity,
            size=cart_item.size,
        )


def _describe_cart_item(cart_item):
    return json.dumps(
        {
            "id": str(cart_item.id),
            "product_id": str(cart_item.product_id) if cart_item.product_id else None,
            "price": cart_item.price,
            "quantity": cart_item.quantity,
            "size": cart_item.size,
        }
    )


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@commerce.aggregate
class Order:
    user_id = Identifier(required=True)
    item_ids = Text(default="[]")  # JSON array of OrderItem ids, in cart order
    total_price = Float(default=0.0)
    total_discounted_price = Float(default=0.0)
    discount = Float(default=0.0)
    total_item = Integer(default=0)
    shipping_address_id = Identifier(required=True)
    order_status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    payment_details = ValueObject(PaymentDetails)
    order_date = DateTime()
    created_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.order_item_ids:
            raise ValidationError({"order_items": ["An order must contain at least one item"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, cart, shipping_address_id):
        """Create an order and its item snapshots from ``cart``.

        The order id is generated before the items so that every item is
        linked to the order from the start.

        Returns:
            A tuple ``(order, items)``. Neither is persisted.
        """
        for cart_item in cart.items:
            if not all(getattr(cart_item, field) for field in _REQUIRED_ITEM_FIELDS):
                raise ValidationError({"cart_items": [f"Invalid cart item: {_describe_cart_item(cart_item)}"]})

        order_id = str(uuid4())
        items = [OrderItem.snapshot(order_id, cart_item) for cart_item in cart.items]
        now = datetime.now(UTC)

        order = cls(
            id=order_id,
            user_id=user_id,
            item_ids=json.dumps([str(item.id) for item in items]),
            total_price=cart.total_price,
            total_discounted_price=cart.total_discounted_price,
            discount=cart.discount,
            total_item=cart.total_item,
            shipping_address_id=shipping_address_id,
            order_status=OrderStatus.PENDING.value,
            payment_details=PaymentDetails(status=PaymentStatus.PENDING.value),
            order_date=now,
            created_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=order_id,
                user_id=str(user_id),
                item_count=len(items),
                total_price=cart.total_price,
                total_discounted_price=cart.total_discounted_price,
                created_at=now,
            )
        )
        return order, items

    @property
    def order_item_ids(self):
        return json.loads(self.item_ids) if self.item_ids else []

    # -------------------------------------------------------------------
    # State transition helpers
    # -------------------------------------------------------------------
    def can_transition_to(self, target_status):
        return target_status in _VALID_TRANSITIONS.get(OrderStatus(self.order_status), set())

    def _transition_to(self, target_status, strict=False):
        """Apply a status change and return the previous status.

        With ``strict`` the change must follow the usual progression.
        """
        current = OrderStatus(self.order_status)
        if strict and not self.can_transition_to(target_status):
            raise ValidationError(
                {"order_status": [f"Cannot transition from {current.value} to {target_status.value}"]}
            )
        self.order_status = target_status.value
        return current

    # -------------------------------------------------------------------
    # Order lifecycle transitions
    # -------------------------------------------------------------------
    def place(self, strict=False):
        """Place the order; payment counts as completed from here on."""
        self._transition_to(OrderStatus.PLACED, strict)
        current = self.payment_details or PaymentDetails()
        self.payment_details = PaymentDetails(
            status=PaymentStatus.COMPLETED.value,
            payment_method=current.payment_method,
            payment_id=current.payment_id,
        )
        self.raise_(OrderPlaced(order_id=str(self.id), placed_at=datetime.now(UTC)))

    def confirm(self, strict=False):
        self._transition_to(OrderStatus.CONFIRMED, strict)
        self.raise_(OrderConfirmed(order_id=str(self.id), confirmed_at=datetime.now(UTC)))

    def ship(self, strict=False):
        self._transition_to(OrderStatus.SHIPPED, strict)
        self.raise_(OrderShipped(order_id=str(self.id), shipped_at=datetime.now(UTC)))

    def deliver(self, strict=False):
        self._transition_to(OrderStatus.DELIVERED, strict)
        self.raise_(OrderDelivered(order_id=str(self.id), delivered_at=datetime.now(UTC)))

    def cancel(self, strict=False):
        previous = self._transition_to(OrderStatus.CANCELLED, strict)
        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                previous_status=previous.value,
                cancelled_at=datetime.now(UTC),
            )
        )
