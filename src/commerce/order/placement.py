"""Order placement: command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from commerce.domain import commerce
from commerce.order.order import Order


@commerce.command(part_of="Order")
class PlaceOrder:
    order_id = Identifier(required=True)
    strict = Boolean(default=False)


@commerce.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.place(strict=command.strict)
        repo.add(order)
