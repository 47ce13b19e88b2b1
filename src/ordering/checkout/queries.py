"""Checkout reads."""

from protean.utils.globals import current_domain

from ordering.address.address import Address
from ordering.basket.queries import get_basket
from ordering.checkout.checkout import Checkout
from shared.listing import ListQuery, first_by, page, run_list_query


class CheckoutQuery(ListQuery):
    sort_by: str = "created_at"
    user_id: str | None = None
    address_id: str | None = None
    basket_id: str | None = None


def list_checkouts(query: CheckoutQuery) -> dict:
    lookups = {
        "user_id": query.user_id,
        "address_id": query.address_id,
        "basket_id": query.basket_id,
    }
    rows, length = run_list_query(Checkout, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_checkout(checkout_id: str) -> dict:
    checkout = current_domain.repository_for(Checkout).get(checkout_id)
    view = checkout.to_view()

    address = first_by(Address, id=str(checkout.address_id))
    view["address"] = address.to_view() if address else None
    view["basket"] = get_basket(str(checkout.basket_id))
    return view
