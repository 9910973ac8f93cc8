"""OrderService: the entry point for every order operation.

Each operation dispatches a command (or reads through the repositories)
inside the active domain context. Failures are logged and re-raised as a
``CommerceError`` whose ``kind`` tells callers what went wrong:

- Validation: rejected input, invalid cart lines, strict status changes
  outside the usual progression
- NotFound: unknown user, address or order
- InvalidState: missing or empty cart
- Store: anything else raised underneath

Status operations set the requested status whatever the current one is.
Pass ``strict=True`` to reject changes outside the usual progression
(see ``commerce.order.order``).
"""

import json
from contextlib import contextmanager
from typing import Any

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from commerce.errors import (
    CommerceError,
    CommerceNotFoundError,
    CommerceValidationError,
    StoreError,
)
from commerce.order.cancellation import CancelOrder
from commerce.order.confirmation import ConfirmOrder
from commerce.order.creation import CreateOrder
from commerce.order.fulfillment import DeliverOrder, ShipOrder
from commerce.order.order import Order
from commerce.order.placement import PlaceOrder
from commerce.order.removal import DeleteOrder
from commerce.order.views import order_detail, order_snapshot
from commerce.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


def _describe(exc: Exception) -> str:
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        parts = []
        for field, errors in messages.items():
            errors = errors if isinstance(errors, (list, tuple)) else [errors]
            parts.append(f"{field}: {', '.join(str(error) for error in errors)}")
        return "; ".join(parts)
    if messages:
        return str(messages)
    return str(exc)


def _classify(exc: Exception, context: dict[str, Any]) -> CommerceError:
    if isinstance(exc, ValidationError):
        errors = exc.messages if isinstance(exc.messages, dict) else {}
        return CommerceValidationError(_describe(exc), errors=errors, **context)
    if isinstance(exc, ObjectNotFoundError):
        return CommerceNotFoundError(_describe(exc), **context)
    return StoreError(_describe(exc), **context)


@contextmanager
def _reported(action: str, **context: Any):
    """Log any failure inside the block and re-raise it as a ``CommerceError``.

    ``context`` is bound to every log line emitted inside the block.
    """
    add_context(**context)
    try:
        yield
    except CommerceError as exc:
        logger.error(action, kind=exc.kind.value, error=exc.message, **exc.context)
        raise
    except Exception as exc:
        error = _classify(exc, context)
        logger.error(action, kind=error.kind.value, error=error.message)
        raise error from exc
    finally:
        clear_context()


class OrderService:
    """Create, advance, query and delete orders."""

    def create_order(self, user_id, shipping_address: dict | None) -> Order:
        with _reported("Error creating order", user_id=str(user_id)):
            order_id = current_domain.process(
                CreateOrder(
                    user_id=user_id,
                    shipping_address=json.dumps(shipping_address) if shipping_address else None,
                ),
                asynchronous=False,
            )
            return current_domain.repository_for(Order).get(order_id)

    def _advance(self, action, command_cls, order_id, strict) -> Order:
        with _reported(action, order_id=str(order_id)):
            current_domain.process(command_cls(order_id=order_id, strict=strict), asynchronous=False)
            return current_domain.repository_for(Order).get(order_id)

    def placed_order(self, order_id, strict: bool = False) -> Order:
        return self._advance("Error placing order", PlaceOrder, order_id, strict)

    def confirmed_order(self, order_id, strict: bool = False) -> Order:
        return self._advance("Error confirming order", ConfirmOrder, order_id, strict)

    def ship_order(self, order_id, strict: bool = False) -> Order:
        return self._advance("Error shipping order", ShipOrder, order_id, strict)

    def delivered_order(self, order_id, strict: bool = False) -> Order:
        return self._advance("Error delivering order", DeliverOrder, order_id, strict)

    def cancelled_order(self, order_id, strict: bool = False) -> Order:
        return self._advance("Error cancelling order", CancelOrder, order_id, strict)

    def find_order_by_id(self, order_id) -> dict:
        with _reported("Error finding order", order_id=str(order_id)):
            order = current_domain.repository_for(Order).get(order_id)
            return order_detail(order)

    def users_order_history(self, user_id) -> list[dict]:
        with _reported("Error fetching user order history", user_id=str(user_id)):
            orders = current_domain.repository_for(Order).for_user(user_id)
            return [order_snapshot(order) for order in orders]

    def get_all_orders(self) -> list[dict]:
        with _reported("Error fetching all orders"):
            return [order_snapshot(order) for order in current_domain.repository_for(Order).list_all()]

    def delete_order(self, order_id) -> None:
        with _reported("Error deleting order", order_id=str(order_id)):
            current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
