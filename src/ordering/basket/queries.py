"""Basket reads."""

from datetime import datetime

from protean.utils.globals import current_domain
from pydantic import field_validator

from ordering.basket.basket import Basket
from ordering.order_product.order_product import OrderProduct
from shared.listing import ListQuery, find_by, page, run_list_query


class BasketQuery(ListQuery):
    sort_by: str = "updated_at"
    min_total_amount: float | None = None
    max_total_amount: float | None = None
    updated_from: datetime | None = None
    updated_to: datetime | None = None
    user_id: str | None = None
    status: str | None = None

    @field_validator("updated_from", "updated_to")
    @classmethod
    def _as_local_time(cls, value):
        # Timestamps are stored as naive local time
        if value is not None and value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


def list_baskets(query: BasketQuery) -> dict:
    lookups = {
        "total_amount__gte": query.min_total_amount,
        "total_amount__lte": query.max_total_amount,
        "updated_at__gte": query.updated_from,
        "updated_at__lte": query.updated_to,
        "user_id": query.user_id,
        "status": query.status,
    }
    rows, length = run_list_query(Basket, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_basket(basket_id: str) -> dict:
    basket = current_domain.repository_for(Basket).get(basket_id)
    view = basket.to_view()
    view["order_products"] = [row.to_view() for row in find_by(OrderProduct, basket_id=str(basket.id))]
    return view
