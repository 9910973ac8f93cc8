"""Cart aggregate: the items a user has picked, with running totals.

Order creation copies the cart's totals verbatim, so the cart is the only
place where they are computed.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from commerce.domain import commerce


@commerce.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    user_id = Identifier()
    # Copied from the product when the item is added; the product may have
    # no price yet, which order creation rejects.
    price = Float(min_value=0.0)
    discounted_price = Float(min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    size = String(max_length=20)
    added_at = DateTime()


@commerce.aggregate
class Cart:
    user_id = Identifier(required=True)
    items = HasMany(CartItem)
    total_price = Float(default=0.0)
    total_discounted_price = Float(default=0.0)
    discount = Float(default=0.0)
    total_item = Integer(default=0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    def _recalculate_totals(self):
        self.total_price = sum((item.price or 0.0) * item.quantity for item in self.items)
        self.total_discounted_price = sum((item.discounted_price or 0.0) * item.quantity for item in self.items)
        self.discount = self.total_price - self.total_discounted_price
        self.total_item = sum(item.quantity for item in self.items)
        self.updated_at = datetime.now(UTC)

    def add_item(self, product_id, quantity, price, discounted_price, size=None):
        """Add a product to the cart, or increase its quantity if the same product and size is present."""
        existing = next(
            (i for i in self.items if str(i.product_id) == str(product_id) and i.size == size),
            None,
        )

        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(
                product_id=product_id,
                user_id=self.user_id,
                price=price,
                discounted_price=discounted_price,
                quantity=quantity,
                size=size,
                added_at=datetime.now(UTC),
            )
            self.add_items(item)

        self._recalculate_totals()
        return item

    def remove_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})

        self.remove_items(item)
        self._recalculate_totals()

    @property
    def is_empty(self):
        return not self.items
