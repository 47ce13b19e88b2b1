"""FastAPI routes for the Ordering domain — baskets, order products, addresses and checkouts.

Every endpoint requires an authenticated caller. Non-admin callers only see
and mutate their own rows: list queries are pinned to the caller's
``user_id`` and single rows go through the owner-or-admin check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from ordering.address.management import CreateAddress, RemoveAddress, UpdateAddress
from ordering.address.queries import AddressQuery, get_address, list_addresses
from ordering.api.schemas import (
    AddOrderProductRequest,
    ChangeBasketStatusRequest,
    ChangeQuantityRequest,
    CreateAddressRequest,
    CreateBasketRequest,
    CreateCheckoutRequest,
    IdResponse,
    StatusResponse,
    UpdateAddressRequest,
    UpdateCheckoutRequest,
)
from ordering.basket.management import ChangeBasketStatus, CreateBasket, RemoveBasket
from ordering.basket.queries import BasketQuery, get_basket, list_baskets
from ordering.checkout.management import CreateCheckout, RemoveCheckout, UpdateCheckout
from ordering.checkout.queries import CheckoutQuery, get_checkout, list_checkouts
from ordering.domain import ordering
from ordering.order_product.management import AddOrderProduct, ChangeOrderProductQuantity, RemoveOrderProduct
from ordering.order_product.queries import OrderProductQuery, get_order_product, list_order_products
from shared.auth import UserAuth, authenticated_user, is_owner_or_admin
from shared.concurrency import run_in_domain

basket_router = APIRouter(prefix="/baskets", tags=["baskets"])
order_product_router = APIRouter(prefix="/order-products", tags=["order-products"])
address_router = APIRouter(prefix="/addresses", tags=["addresses"])
checkout_router = APIRouter(prefix="/checkouts", tags=["checkouts"])

Caller = Annotated[UserAuth, Depends(authenticated_user)]


def _scoped(query, user: UserAuth):
    """Pin a list query to the caller's own rows unless the caller is an admin."""
    if user.is_admin:
        return query
    return query.model_copy(update={"user_id": user.id})


def _owner_id(requested_user_id: str | None, user: UserAuth) -> str:
    if user.is_admin and requested_user_id:
        return requested_user_id
    return user.id


def _owned(view: dict, user: UserAuth) -> dict:
    is_owner_or_admin(view["user_id"], user.id, user.role)
    return view


# ---------------------------------------------------------------------------
# Basket Router
# ---------------------------------------------------------------------------
@basket_router.get("")
async def get_baskets(query: Annotated[BasketQuery, Query()], user: Caller) -> dict:
    return list_baskets(_scoped(query, user))


@basket_router.get("/{basket_id}")
async def get_single_basket(basket_id: str, user: Caller) -> dict:
    return _owned(get_basket(basket_id), user)


@basket_router.post("", status_code=201, response_model=IdResponse)
async def create_basket(body: CreateBasketRequest, user: Caller) -> IdResponse:
    command = CreateBasket(user_id=_owner_id(body.user_id, user))
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@basket_router.put("/{basket_id}")
async def change_basket_status(basket_id: str, body: ChangeBasketStatusRequest, user: Caller) -> dict:
    command = ChangeBasketStatus(
        basket_id=basket_id,
        status=body.status,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return get_basket(basket_id)


@basket_router.delete("/{basket_id}", response_model=StatusResponse)
async def remove_basket(basket_id: str, user: Caller) -> StatusResponse:
    command = RemoveBasket(basket_id=basket_id, requested_by=user.id, requester_role=user.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Product Router
# ---------------------------------------------------------------------------
@order_product_router.get("")
async def get_order_products(query: Annotated[OrderProductQuery, Query()], user: Caller) -> dict:
    return list_order_products(_scoped(query, user))


@order_product_router.get("/{order_product_id}")
async def get_single_order_product(order_product_id: str, user: Caller) -> dict:
    view = get_order_product(order_product_id)
    _owned(get_basket(view["basket_id"]), user)
    return view


@order_product_router.post("", status_code=201, response_model=IdResponse)
async def add_order_product(body: AddOrderProductRequest, user: Caller) -> IdResponse:
    command = AddOrderProduct(
        basket_id=body.basket_id,
        product_id=body.product_id,
        product_variant_id=body.product_variant_id,
        quantity=body.quantity,
        requested_by=user.id,
        requester_role=user.role,
    )
    # Pricing calls the catalogue service
    result = await run_in_domain(ordering, ordering.process, command, asynchronous=False)
    return IdResponse(id=result)


@order_product_router.put("/{order_product_id}")
async def change_order_product_quantity(order_product_id: str, body: ChangeQuantityRequest, user: Caller) -> dict:
    command = ChangeOrderProductQuantity(
        order_product_id=order_product_id,
        quantity=body.quantity,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return get_order_product(order_product_id)


@order_product_router.delete("/{order_product_id}", response_model=StatusResponse)
async def remove_order_product(order_product_id: str, user: Caller) -> StatusResponse:
    command = RemoveOrderProduct(order_product_id=order_product_id, requested_by=user.id, requester_role=user.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Address Router
# ---------------------------------------------------------------------------
@address_router.get("")
async def get_addresses(query: Annotated[AddressQuery, Query()], user: Caller) -> dict:
    return list_addresses(_scoped(query, user))


@address_router.get("/{address_id}")
async def get_single_address(address_id: str, user: Caller) -> dict:
    return _owned(get_address(address_id), user)


@address_router.post("", status_code=201, response_model=IdResponse)
async def create_address(body: CreateAddressRequest, user: Caller) -> IdResponse:
    command = CreateAddress(
        user_id=_owner_id(body.user_id, user),
        receiver_name=body.receiver_name,
        receiver_phone=body.receiver_phone,
        address=body.address,
        room_or_office=body.room_or_office,
        door=body.door,
        floor=body.floor,
        ring_bell=body.ring_bell,
        zip_code=body.zip_code,
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@address_router.put("/{address_id}")
async def update_address(address_id: str, body: UpdateAddressRequest, user: Caller) -> dict:
    command = UpdateAddress(
        address_id=address_id,
        requested_by=user.id,
        requester_role=user.role,
        **body.model_dump(),
    )
    current_domain.process(command, asynchronous=False)
    return get_address(address_id)


@address_router.delete("/{address_id}", response_model=StatusResponse)
async def remove_address(address_id: str, user: Caller) -> StatusResponse:
    command = RemoveAddress(address_id=address_id, requested_by=user.id, requester_role=user.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
@checkout_router.get("")
async def get_checkouts(query: Annotated[CheckoutQuery, Query()], user: Caller) -> dict:
    return list_checkouts(_scoped(query, user))


@checkout_router.get("/{checkout_id}")
async def get_single_checkout(checkout_id: str, user: Caller) -> dict:
    return _owned(get_checkout(checkout_id), user)


@checkout_router.post("", status_code=201, response_model=IdResponse)
async def create_checkout(body: CreateCheckoutRequest, user: Caller) -> IdResponse:
    command = CreateCheckout(
        user_id=_owner_id(body.user_id, user),
        address_id=body.address_id,
        basket_id=body.basket_id,
        comment=body.comment,
        requester_role=user.role,
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@checkout_router.put("/{checkout_id}")
async def update_checkout(checkout_id: str, body: UpdateCheckoutRequest, user: Caller) -> dict:
    command = UpdateCheckout(
        checkout_id=checkout_id,
        address_id=body.address_id,
        comment=body.comment,
        requested_by=user.id,
        requester_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return get_checkout(checkout_id)


@checkout_router.delete("/{checkout_id}", response_model=StatusResponse)
async def remove_checkout(checkout_id: str, user: Caller) -> StatusResponse:
    command = RemoveCheckout(checkout_id=checkout_id, requested_by=user.id, requester_role=user.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
