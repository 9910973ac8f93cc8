"""Product management: command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from commerce.domain import commerce
from commerce.product.product import Product


@commerce.command(part_of="Product")
class AddProduct:
    title = String(required=True, max_length=255)
    brand = String(max_length=100)
    price = Float(required=True, min_value=0.0)
    discounted_price = Float(min_value=0.0)


@commerce.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product(
            title=command.title,
            brand=command.brand,
            price=command.price,
            # Without a discount the product sells at full price
            discounted_price=command.discounted_price if command.discounted_price is not None else command.price,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
