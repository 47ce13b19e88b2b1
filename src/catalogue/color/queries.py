"""Color reads."""

from protean.utils.globals import current_domain

from catalogue.color.color import Color
from catalogue.product.product import Product
from shared.listing import ListQuery, as_list, find_by, page, run_list_query


class ColorQuery(ListQuery):
    name: str | None = None
    url: str | None = None
    code: str | None = None
    products: list[str] | None = None  # product urls


def list_colors(query: ColorQuery) -> dict:
    lookups = {
        "name__icontains": query.name,
        "url__icontains": query.url,
    }
    predicates = []
    if query.code:
        code = query.code.lower()
        predicates.append(lambda color: code in (color.code or "").lower())

    product_urls = as_list(query.products)
    if product_urls:
        color_ids = sorted({cid for product in find_by(Product, url__in=product_urls) for cid in product.colors})
        if not color_ids:
            return page([], current_domain.repository_for(Color)._dao.query.all().total)
        lookups["id__in"] = color_ids

    rows, length = run_list_query(Color, query, lookups, predicates)
    return page([row.to_view() for row in rows], length)


def get_color(color_id: str) -> dict:
    return current_domain.repository_for(Color).get(color_id).to_view()
