"""Pydantic request/response schemas for the QuickBite API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

# --- User Schemas ---


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "jane",
                    "password": "s3cret-pass",
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                }
            ]
        }
    }

    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=128)
    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=254)
    is_admin: bool = False


class UserResponse(BaseModel):
    id: int
    username: str
    name: str | None = None
    email: str | None = None
    is_admin: bool = False

    @classmethod
    def from_user(cls, user) -> UserResponse:
        return cls(id=user.id, username=user.username, name=user.name, email=user.email, is_admin=user.is_admin)


# --- Menu Schemas ---


class NutritionalInfo(BaseModel):
    calories: int | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    allergens: list[str] = Field(default_factory=list)


class Addon(BaseModel):
    name: str
    price: float = Field(0.0, ge=0)
    category: str | None = None


class MenuItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Pepperoni Pizza",
                    "description": "Classic pizza topped with pepperoni and mozzarella.",
                    "price": 12.99,
                    "category": "Pizza",
                    "is_popular": True,
                    "dietary_preferences": [],
                    "nutritional_info": {"calories": 850, "protein": 35, "carbs": 80, "fat": 40},
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100)
    image_url: str | None = Field(None, max_length=1000)
    is_popular: bool = False
    is_seasonal: bool = False
    is_combo: bool = False
    dietary_preferences: list[str] | None = None
    nutritional_info: NutritionalInfo | None = None
    available_addons: list[Addon] | None = None
    discount_percentage: float = Field(0.0, ge=0, le=100)


class MenuItemUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    image_url: str | None = Field(None, max_length=1000)
    is_popular: bool | None = None
    is_seasonal: bool | None = None
    is_combo: bool | None = None
    dietary_preferences: list[str] | None = None
    nutritional_info: NutritionalInfo | None = None
    available_addons: list[Addon] | None = None
    discount_percentage: float | None = Field(None, ge=0, le=100)


class MenuItemResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    image_url: str | None = None
    category: str
    rating: float = 0.0
    review_count: int = 0
    is_popular: bool = False
    is_seasonal: bool = False
    is_combo: bool = False
    dietary_preferences: list[str] = Field(default_factory=list)
    nutritional_info: dict[str, Any] | None = None
    available_addons: list[dict[str, Any]] = Field(default_factory=list)
    discount_percentage: float = 0.0
    created_at: datetime | None = None

    @classmethod
    def from_item(cls, item) -> MenuItemResponse:
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
            image_url=item.image_url,
            category=item.category,
            rating=item.rating or 0.0,
            review_count=item.review_count or 0,
            is_popular=bool(item.is_popular),
            is_seasonal=bool(item.is_seasonal),
            is_combo=bool(item.is_combo),
            dietary_preferences=item.dietary_tags(),
            nutritional_info=item.nutrition(),
            available_addons=item.addons(),
            discount_percentage=item.discount_percentage or 0.0,
            created_at=item.created_at,
        )


# --- Cart Schemas ---


class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"menu_item_id": 1, "quantity": 2}]}}

    menu_item_id: int
    quantity: int = 1
    selected_addons: list[str] | None = None
    special_instructions: str | None = None


class UpdateCartQuantityRequest(BaseModel):
    quantity: int


class CartLineResponse(BaseModel):
    id: int
    user_id: int
    menu_item_id: int
    quantity: int
    selected_addons: list[str] = Field(default_factory=list)
    special_instructions: str | None = None
    menu_item: MenuItemResponse | None = None
    line_total: float = 0.0

    @classmethod
    def from_detail(cls, detail) -> CartLineResponse:
        line = detail.line
        return cls(
            id=line.id,
            user_id=line.user_id,
            menu_item_id=line.menu_item_id,
            quantity=line.quantity,
            selected_addons=line.addons(),
            special_instructions=line.special_instructions,
            menu_item=MenuItemResponse.from_item(detail.menu_item) if detail.menu_item else None,
            line_total=float(detail.line_total),
        )


# --- Order Schemas ---


class OrderItemRequest(BaseModel):
    menu_item_id: int
    quantity: int = 1


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"menu_item_id": 1, "quantity": 2}, {"menu_item_id": 2, "quantity": 1}],
                    "total": 39.96,
                    "address": {"street": "1 Main St", "city": "Springfield", "postal_code": "12345"},
                    "payment_intent_id": "pi_123",
                }
            ]
        }
    }

    items: list[OrderItemRequest] | None = None
    total: float | None = Field(None, ge=0)
    address: dict[str, Any] | str | None = None
    payment_intent_id: str | None = Field(None, max_length=255)
    status: str | None = None  # accepted for compatibility; orders always start pending


class UpdateOrderStatusRequest(BaseModel):
    status: str


class OrderItemResponse(BaseModel):
    menu_item_id: int
    quantity: int
    name: str | None = None
    unit_price: float | None = None
    menu_item: MenuItemResponse | None = None


class OrderResponse(BaseModel):
    id: int
    user_id: int
    status: str
    total: float
    address: dict[str, Any] | str | None = None
    payment_reference: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItemResponse] = Field(default_factory=list)

    @classmethod
    def from_order(cls, order, item_details=None) -> OrderResponse:
        if item_details is None:
            items = [
                OrderItemResponse(
                    menu_item_id=item.menu_item_id,
                    quantity=item.quantity,
                    name=item.name,
                    unit_price=item.unit_price,
                )
                for item in order.items
            ]
        else:
            items = [
                OrderItemResponse(
                    menu_item_id=detail.item.menu_item_id,
                    quantity=detail.item.quantity,
                    name=detail.item.name,
                    unit_price=detail.item.unit_price,
                    menu_item=MenuItemResponse.from_item(detail.menu_item) if detail.menu_item else None,
                )
                for detail in item_details
            ]
        return cls(
            id=order.id,
            user_id=order.user_id,
            status=order.status,
            total=order.total,
            address=order.delivery_address(),
            payment_reference=order.payment_reference,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=items,
        )

    @classmethod
    def from_detail(cls, detail) -> OrderResponse:
        return cls.from_order(detail.order, detail.items)


# --- Payment Schemas ---


class PaymentRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"amount": 39.96}]}}

    amount: float | None = None  # major units; defaults to the cart total plus delivery
    currency: str | None = Field(None, min_length=3, max_length=3)


class PaymentResponse(BaseModel):
    client_secret: str
    payment_intent_id: str
    amount: int
    currency: str
