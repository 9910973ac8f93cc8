"""Product aggregate: the minimal catalogue record that orders point at."""

from protean.fields import Float, String

from commerce.domain import commerce


@commerce.aggregate
class Product:
    title = String(required=True, max_length=255)
    brand = String(max_length=100)
    price = Float(required=True, min_value=0.0)
    discounted_price = Float(min_value=0.0)
