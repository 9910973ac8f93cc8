"""Read-side shapes of an order.

Orders reference their user, shipping address, items and products by id.
These helpers expand those references into plain dicts, detached from the
aggregates they were read from. A reference that no longer resolves is
expanded to ``None``.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from commerce.address.address import Address
from commerce.order.order import Order, OrderItem
from commerce.product.product import Product
from commerce.user.user import User


def _related(cls, identifier):
    if not identifier:
        return None
    try:
        return current_domain.repository_for(cls).get(identifier).to_dict()
    except ObjectNotFoundError:
        return None


def _item_snapshot(item_id):
    item = _related(OrderItem, item_id)
    if item is not None:
        item["product"] = _related(Product, item.get("product_id"))
    return item


def order_snapshot(order: Order) -> dict:
    """The order with its items (and their products) expanded."""
    data = order.to_dict()
    data.pop("item_ids", None)
    data["order_items"] = [item for item in map(_item_snapshot, order.order_item_ids) if item is not None]
    return data


def order_detail(order: Order) -> dict:
    """The order with user, items, products and shipping address expanded."""
    data = order_snapshot(order)
    data["user"] = _related(User, order.user_id)
    data["shipping_address"] = _related(Address, order.shipping_address_id)
    return data
