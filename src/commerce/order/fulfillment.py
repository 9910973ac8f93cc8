"""Order fulfillment: shipping and delivery commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from commerce.domain import commerce
from commerce.order.order import Order


@commerce.command(part_of="Order")
class ShipOrder:
    order_id = Identifier(required=True)
    strict = Boolean(default=False)


@commerce.command(part_of="Order")
class DeliverOrder:
    order_id = Identifier(required=True)
    strict = Boolean(default=False)


@commerce.command_handler(part_of=Order)
class FulfillmentHandler:
    @handle(ShipOrder)
    def ship_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.ship(strict=command.strict)
        repo.add(order)

    @handle(DeliverOrder)
    def deliver_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.deliver(strict=command.strict)
        repo.add(order)
