"""Cart lookups used by checkout."""

from commerce.cart.cart import Cart
from commerce.domain import commerce


@commerce.repository(part_of=Cart)
class CartRepository:
    def find_for_user(self, user_id) -> Cart | None:
        """Return the cart of ``user_id``, or None if the user has none."""
        carts = self._dao.query.filter(user_id=str(user_id)).all().items
        return carts[0] if carts else None
