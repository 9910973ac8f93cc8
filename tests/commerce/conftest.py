import os

import pytest


@pytest.fixture(scope="session")
def _commerce_domain(request):
    """Initialize the commerce domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from commerce.domain import commerce

    commerce.init()
    return commerce


@pytest.fixture(scope="session", autouse=True)
def setup_db(_commerce_domain):
    from commerce.utils.db import drop_db, setup_db

    setup_db(_commerce_domain)

    yield

    drop_db(_commerce_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_commerce_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _commerce_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def user():
    from protean import current_domain

    from commerce.user.user import User

    user = User.register(first_name="Ada", last_name="Lovelace", email="ada@example.com")
    current_domain.repository_for(User).add(user)
    return user


@pytest.fixture()
def products():
    from protean import current_domain

    from commerce.product.product import Product

    repo = current_domain.repository_for(Product)
    shirt = Product(title="Linen Shirt", brand="Acme", price=40.0, discounted_price=30.0)
    mug = Product(title="Coffee Mug", brand="Acme", price=12.0, discounted_price=10.0)
    repo.add(shirt)
    repo.add(mug)
    return {"shirt": shirt, "mug": mug}


@pytest.fixture()
def cart(user, products):
    """A cart for ``user`` holding two shirts (size M) and three mugs."""
    from protean import current_domain

    from commerce.cart.cart import Cart

    cart = Cart.create(user_id=user.id)
    for product, quantity, size in ((products["shirt"], 2, "M"), (products["mug"], 3, None)):
        cart.add_item(
            product_id=product.id,
            quantity=quantity,
            price=product.price,
            discounted_price=product.discounted_price,
            size=size,
        )
    current_domain.repository_for(Cart).add(cart)
    return cart


@pytest.fixture()
def shipping_address():
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "street_address": "12 St James's Square",
        "city": "London",
        "state": "London",
        "zip_code": "SW1Y 4JH",
        "mobile": "5550100",
    }
