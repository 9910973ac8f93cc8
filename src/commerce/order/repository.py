"""Order and OrderItem lookups."""

from commerce.domain import commerce
from commerce.order.order import Order, OrderItem


@commerce.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """Orders placed by ``user_id``, in store order."""
        return self._dao.query.filter(user_id=str(user_id)).all().items

    def list_all(self) -> list[Order]:
        return self._dao.query.all().items


@commerce.repository(part_of=OrderItem)
class OrderItemRepository:
    def for_order(self, order_id) -> list[OrderItem]:
        return self._dao.query.filter(order_id=str(order_id)).all().items
