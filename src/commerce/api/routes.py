"""FastAPI routes for the Commerce domain: users, products, carts and orders."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from commerce.api.schemas import (
    AddProductRequest,
    AddToCartRequest,
    CartIdResponse,
    CreateCartRequest,
    CreateOrderRequest,
    ItemIdResponse,
    ProductIdResponse,
    RegisterUserRequest,
    StatusResponse,
    UserIdResponse,
)
from commerce.cart.cart import Cart
from commerce.cart.management import AddToCart, CreateCart, RemoveFromCart
from commerce.errors import CommerceNotFoundError
from commerce.order.service import OrderService
from commerce.order.views import order_snapshot
from commerce.product.management import AddProduct
from commerce.user.registration import RegisterUser

orders = OrderService()

# ---------------------------------------------------------------------------
# User & Product Routers
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])
product_router = APIRouter(prefix="/products", tags=["products"])


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
    )
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        title=body.title,
        brand=body.brand,
        price=body.price,
        discounted_price=body.discounted_price,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    result = current_domain.process(CreateCart(user_id=body.user_id), asynchronous=False)
    return CartIdResponse(cart_id=result)


@cart_router.get("/{user_id}")
async def get_cart(user_id: str) -> dict:
    cart = current_domain.repository_for(Cart).find_for_user(user_id)
    if cart is None:
        raise CommerceNotFoundError("Cart not found for user.", user_id=user_id)
    return cart.to_dict()


@cart_router.put("/{user_id}/items", response_model=ItemIdResponse)
async def add_cart_item(user_id: str, body: AddToCartRequest) -> ItemIdResponse:
    command = AddToCart(
        user_id=user_id,
        product_id=body.product_id,
        quantity=body.quantity,
        size=body.size,
    )
    result = current_domain.process(command, asynchronous=False)
    return ItemIdResponse(item_id=result)


@cart_router.delete("/{user_id}/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(user_id: str, item_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(user_id=user_id, item_id=item_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201)
async def create_order(body: CreateOrderRequest) -> dict:
    shipping_address = body.shipping_address.model_dump(exclude_none=True) if body.shipping_address else None
    order = orders.create_order(body.user_id, shipping_address)
    return orders.find_order_by_id(order.id)


@order_router.get("/user/{user_id}")
async def order_history(user_id: str) -> list[dict]:
    return orders.users_order_history(user_id)


@order_router.get("/{order_id}")
async def find_order(order_id: str) -> dict:
    return orders.find_order_by_id(order_id)


# ---------------------------------------------------------------------------
# Admin Order Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin/orders", tags=["admin"])


@admin_router.get("")
async def list_orders() -> list[dict]:
    return orders.get_all_orders()


@admin_router.put("/{order_id}/placed")
async def place_order(order_id: str, strict: bool = False) -> dict:
    return order_snapshot(orders.placed_order(order_id, strict=strict))


@admin_router.put("/{order_id}/confirmed")
async def confirm_order(order_id: str, strict: bool = False) -> dict:
    return order_snapshot(orders.confirmed_order(order_id, strict=strict))


@admin_router.put("/{order_id}/ship")
async def ship_order(order_id: str, strict: bool = False) -> dict:
    return order_snapshot(orders.ship_order(order_id, strict=strict))


@admin_router.put("/{order_id}/deliver")
async def deliver_order(order_id: str, strict: bool = False) -> dict:
    return order_snapshot(orders.delivered_order(order_id, strict=strict))


@admin_router.put("/{order_id}/cancel")
async def cancel_order(order_id: str, strict: bool = False) -> dict:
    return order_snapshot(orders.cancelled_order(order_id, strict=strict))


@admin_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    orders.delete_order(order_id)
    return StatusResponse()
