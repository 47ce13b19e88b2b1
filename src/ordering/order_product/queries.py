"""Order product reads."""

from protean.utils.globals import current_domain

from ordering.basket.basket import Basket
from ordering.order_product.order_product import OrderProduct
from shared.listing import ListQuery, find_by, page, run_list_query


class OrderProductQuery(ListQuery):
    sort_by: str = "product_id"
    user_id: str | None = None
    min_qty: int | None = None
    max_qty: int | None = None
    min_price: float | None = None
    max_price: float | None = None
    product_id: str | None = None
    basket_id: str | None = None


def list_order_products(query: OrderProductQuery) -> dict:
    lookups = {
        "quantity__gte": query.min_qty,
        "quantity__lte": query.max_qty,
        "product_price__gte": query.min_price,
        "product_price__lte": query.max_price,
        "product_id": query.product_id,
        "basket_id": query.basket_id,
    }
    if query.user_id:
        basket_ids = [str(basket.id) for basket in find_by(Basket, user_id=query.user_id)]
        if not basket_ids:
            return page([], current_domain.repository_for(OrderProduct)._dao.query.all().total)
        lookups["basket_id__in"] = basket_ids

    rows, length = run_list_query(OrderProduct, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_order_product(order_product_id: str) -> dict:
    return current_domain.repository_for(OrderProduct).get(order_product_id).to_view()
