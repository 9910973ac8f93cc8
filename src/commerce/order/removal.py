"""Order removal: command and handler.

Deleting an order also deletes the OrderItems that belong to it.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from commerce.domain import commerce
from commerce.order.order import Order, OrderItem

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@commerce.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        item_repo = current_domain.repository_for(OrderItem)
        items = item_repo.for_order(order.id)
        for item in items:
            item_repo._dao.delete(item)
        repo._dao.delete(order)

        logger.info("Order deleted", order_id=str(order.id), items_deleted=len(items))
