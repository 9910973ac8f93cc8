"""Pydantic request/response schemas for the Commerce API.

These are external contracts, separate from internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ShippingAddressSchema(BaseModel):
    """Either a saved address (``id`` only) or the fields of a new one."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    mobile: str | None = None


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    first_name: str
    last_name: str
    email: str


class AddProductRequest(BaseModel):
    title: str
    brand: str | None = None
    price: float = Field(ge=0)
    discounted_price: float | None = Field(default=None, ge=0)


class CreateCartRequest(BaseModel):
    user_id: str


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)
    size: str | None = None


class CreateOrderRequest(BaseModel):
    user_id: str
    shipping_address: ShippingAddressSchema | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "user-001",
                    "shipping_address": {
                        "first_name": "Ada",
                        "last_name": "Lovelace",
                        "street_address": "12 St James's Square",
                        "city": "London",
                        "state": "London",
                        "zip_code": "SW1Y 4JH",
                        "mobile": "5550100",
                    },
                },
                {"user_id": "user-001", "shipping_address": {"id": "addr-001"}},
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class UserIdResponse(BaseModel):
    user_id: str


class ProductIdResponse(BaseModel):
    product_id: str


class CartIdResponse(BaseModel):
    cart_id: str


class ItemIdResponse(BaseModel):
    item_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
