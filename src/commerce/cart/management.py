"""Cart management: commands and handler.

A user has a single cart. Items are added by product id; the price and
discounted price are copied from the product at that moment.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from commerce.cart.cart import Cart
from commerce.domain import commerce
from commerce.errors import CommerceNotFoundError
from commerce.product.product import Product


@commerce.command(part_of="Cart")
class CreateCart:
    user_id = Identifier(required=True)


@commerce.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    size = String(max_length=20)


@commerce.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@commerce.command_handler(part_of=Cart)
class ManageCartHandler:
    def _cart_for(self, user_id):
        cart = current_domain.repository_for(Cart).find_for_user(user_id)
        if cart is None:
            raise CommerceNotFoundError("Cart not found for user.", user_id=str(user_id))
        return cart

    @handle(CreateCart)
    def create_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_for_user(command.user_id)
        if cart is None:
            cart = Cart.create(user_id=command.user_id)
            repo.add(cart)
        return str(cart.id)

    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        cart = self._cart_for(command.user_id)
        item = cart.add_item(
            product_id=product.id,
            quantity=command.quantity,
            price=product.price,
            discounted_price=product.discounted_price,
            size=command.size,
        )
        current_domain.repository_for(Cart).add(cart)
        return str(item.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = self._cart_for(command.user_id)
        cart.remove_item(item_id=command.item_id)
        current_domain.repository_for(Cart).add(cart)
