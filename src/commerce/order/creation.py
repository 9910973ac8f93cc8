"""Order creation: command and handler.

Creating an order runs as one unit of work:

1. Resolve the shipping address (existing by id, or a new one for the user)
2. Load the user's cart and reject a missing or empty one
3. Snapshot every cart line into an OrderItem linked to the new order
4. Persist the items and the order
"""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from commerce.address.address import Address
from commerce.cart.cart import Cart
from commerce.domain import commerce
from commerce.errors import CommerceNotFoundError, CommerceValidationError, InvalidStateError
from commerce.order.order import Order, OrderItem
from commerce.user.user import User

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Order")
class CreateOrder:
    user_id = Identifier(required=True)
    shipping_address = Text()  # JSON: address dict, or {"id": ...} for a saved address


@commerce.command_handler(part_of=Order)
class CreateOrderHandler:
    def _resolve_address(self, user, shipping_address):
        repo = current_domain.repository_for(Address)

        address_id = shipping_address.get("id")
        if address_id:
            try:
                return repo.get(address_id)
            except ObjectNotFoundError as exc:
                raise CommerceNotFoundError("Address not found with provided ID.", address_id=str(address_id)) from exc

        address = Address.for_user(user.id, shipping_address)
        repo.add(address)

        user.add_address(address.id)
        current_domain.repository_for(User).add(user)

        logger.info("Saved new shipping address", user_id=str(user.id), address_id=str(address.id))
        return address

    @handle(CreateOrder)
    def create_order(self, command):
        shipping_address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )
        if not shipping_address:
            raise CommerceValidationError("Shipping address is required.", user_id=str(command.user_id))

        user = current_domain.repository_for(User).get(command.user_id)
        address = self._resolve_address(user, shipping_address)

        cart = current_domain.repository_for(Cart).find_for_user(user.id)
        if cart is None or cart.is_empty:
            raise InvalidStateError("Cart is empty or not found.", user_id=str(user.id))

        order, items = Order.create(
            user_id=user.id,
            cart=cart,
            shipping_address_id=address.id,
        )

        item_repo = current_domain.repository_for(OrderItem)
        for item in items:
            item_repo.add(item)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order created",
            order_id=str(order.id),
            user_id=str(user.id),
            item_count=len(items),
            total_price=order.total_price,
        )
        return str(order.id)
