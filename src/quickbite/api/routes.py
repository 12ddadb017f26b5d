"""FastAPI endpoints for QuickBite: users, menu, cart, orders and payments."""

import json

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from quickbite.api.auth import current_user, optional_user, require_admin
from quickbite.api.schemas import (
    AddToCartRequest,
    CartLineResponse,
    CreateOrderRequest,
    MenuItemRequest,
    MenuItemResponse,
    MenuItemUpdateRequest,
    OrderResponse,
    PaymentRequest,
    PaymentResponse,
    RegisterUserRequest,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    UserResponse,
)
from quickbite.catalogue.browsing import get_menu_item, list_menu_items
from quickbite.catalogue.management import CreateMenuItem, DeleteMenuItem, UpdateMenuItem
from quickbite.config import get_settings
from quickbite.exceptions import Forbidden
from quickbite.identity.registration import RegisterUser, get_user
from quickbite.identity.user import User
from quickbite.ordering.cart.details import cart_subtotal, list_with_details
from quickbite.ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from quickbite.ordering.order.checkout import PlaceOrder
from quickbite.ordering.order.history import all_orders, get_order, orders_for_user
from quickbite.ordering.order.status import UpdateOrderStatus
from quickbite.ordering.pricing import order_total
from quickbite.payments.intents import create_payment_handle

user_router = APIRouter(tags=["users"])
menu_router = APIRouter(prefix="/menu", tags=["menu"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
payment_router = APIRouter(prefix="/payment", tags=["payment"])


def _json(value):
    if value is None:
        return None
    return json.dumps(value)


# --- User endpoints ---


@user_router.post("/users", status_code=201, response_model=UserResponse)
async def register_user(body: RegisterUserRequest, caller: User | None = Depends(optional_user)) -> UserResponse:
    if body.is_admin and (caller is None or not caller.is_admin):
        raise Forbidden("Only admins can create admin accounts")

    command = RegisterUser(
        username=body.username,
        password=body.password,
        name=body.name,
        email=body.email,
        is_admin=body.is_admin,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return UserResponse.from_user(get_user(user_id))


@user_router.get("/user", response_model=UserResponse)
async def read_current_user(user: User = Depends(current_user)) -> UserResponse:
    return UserResponse.from_user(user)


# --- Menu endpoints ---


@menu_router.get("", response_model=list[MenuItemResponse])
async def list_menu(
    search: str | None = Query(None),
    category: str | None = Query(None),
) -> list[MenuItemResponse]:
    return [MenuItemResponse.from_item(item) for item in list_menu_items(search=search, category=category)]


@menu_router.get("/{menu_item_id}", response_model=MenuItemResponse)
async def read_menu_item(menu_item_id: int) -> MenuItemResponse:
    return MenuItemResponse.from_item(get_menu_item(menu_item_id))


@menu_router.post("", status_code=201, response_model=MenuItemResponse)
async def create_menu_item(body: MenuItemRequest, _admin: User = Depends(require_admin)) -> MenuItemResponse:
    command = CreateMenuItem(
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category,
        image_url=body.image_url,
        is_popular=body.is_popular,
        is_seasonal=body.is_seasonal,
        is_combo=body.is_combo,
        dietary_preferences=_json(body.dietary_preferences),
        nutritional_info=_json(body.nutritional_info.model_dump() if body.nutritional_info else None),
        available_addons=_json([addon.model_dump() for addon in body.available_addons] if body.available_addons else None),
        discount_percentage=body.discount_percentage,
    )
    menu_item_id = current_domain.process(command, asynchronous=False)
    return MenuItemResponse.from_item(get_menu_item(menu_item_id))


@menu_router.put("/{menu_item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    menu_item_id: int,
    body: MenuItemUpdateRequest,
    _admin: User = Depends(require_admin),
) -> MenuItemResponse:
    command = UpdateMenuItem(
        menu_item_id=menu_item_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category,
        image_url=body.image_url,
        is_popular=body.is_popular,
        is_seasonal=body.is_seasonal,
        is_combo=body.is_combo,
        dietary_preferences=_json(body.dietary_preferences),
        nutritional_info=_json(body.nutritional_info.model_dump() if body.nutritional_info else None),
        available_addons=_json([addon.model_dump() for addon in body.available_addons] if body.available_addons else None),
        discount_percentage=body.discount_percentage,
    )
    current_domain.process(command, asynchronous=False)
    return MenuItemResponse.from_item(get_menu_item(menu_item_id))


@menu_router.delete("/{menu_item_id}", status_code=204)
async def delete_menu_item(menu_item_id: int, _admin: User = Depends(require_admin)) -> Response:
    current_domain.process(DeleteMenuItem(menu_item_id=menu_item_id), asynchronous=False)
    return Response(status_code=204)


# --- Cart endpoints ---


def _line_response(user_id, line_id) -> CartLineResponse:
    detail = next(detail for detail in list_with_details(user_id) if detail.line.id == line_id)
    return CartLineResponse.from_detail(detail)


@cart_router.get("", response_model=list[CartLineResponse])
async def read_cart(user: User = Depends(current_user)) -> list[CartLineResponse]:
    return [CartLineResponse.from_detail(detail) for detail in list_with_details(user.id)]


@cart_router.post("", status_code=201, response_model=CartLineResponse)
async def add_to_cart(body: AddToCartRequest, user: User = Depends(current_user)) -> CartLineResponse:
    command = AddToCart(
        user_id=user.id,
        menu_item_id=body.menu_item_id,
        quantity=body.quantity,
        selected_addons=_json(body.selected_addons),
        special_instructions=body.special_instructions,
    )
    line_id = current_domain.process(command, asynchronous=False)
    return _line_response(user.id, line_id)


@cart_router.put("/{line_id}", response_model=CartLineResponse)
async def update_cart_quantity(
    line_id: int,
    body: UpdateCartQuantityRequest,
    user: User = Depends(current_user),
) -> CartLineResponse:
    command = UpdateCartQuantity(line_id=line_id, user_id=user.id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return _line_response(user.id, line_id)


@cart_router.delete("/{line_id}", status_code=204)
async def remove_from_cart(line_id: int, user: User = Depends(current_user)) -> Response:
    current_domain.process(RemoveFromCart(line_id=line_id, user_id=user.id), asynchronous=False)
    return Response(status_code=204)


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest, user: User = Depends(current_user)) -> OrderResponse:
    items = None
    if body.items is not None:
        items = json.dumps([item.model_dump() for item in body.items])

    command = PlaceOrder(
        user_id=user.id,
        items=items,
        total=body.total,
        address=_json(body.address),
        payment_reference=body.payment_intent_id,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id))


@order_router.get("", response_model=list[OrderResponse])
async def list_all_orders(_admin: User = Depends(require_admin)) -> list[OrderResponse]:
    return [OrderResponse.from_detail(detail) for detail in all_orders()]


@order_router.get("/{user_id}", response_model=list[OrderResponse])
async def list_user_orders(user_id: int, user: User = Depends(current_user)) -> list[OrderResponse]:
    if not user.owns(user_id):
        raise Forbidden("You can only view your own orders")
    return [OrderResponse.from_detail(detail) for detail in orders_for_user(user_id)]


@order_router.patch("/{order_id}", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    body: UpdateOrderStatusRequest,
    _admin: User = Depends(require_admin),
) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderResponse.from_order(get_order(order_id))


# --- Payment endpoints ---


@payment_router.post("", response_model=PaymentResponse)
async def create_payment(body: PaymentRequest, user: User = Depends(current_user)) -> PaymentResponse:
    amount = body.amount
    if amount is None:
        details = list_with_details(user.id)
        amount = order_total(cart_subtotal(details), get_settings().delivery_fee, has_items=bool(details))

    intent = create_payment_handle(user.id, amount, body.currency)
    return PaymentResponse(
        client_secret=intent.client_secret,
        payment_intent_id=intent.intent_id,
        amount=intent.amount,
        currency=intent.currency,
    )
