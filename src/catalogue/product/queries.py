"""Product reads — the filtered product list and single-product views."""

from protean.utils.globals import current_domain

from catalogue.brand.brand import Brand
from catalogue.category.category import Category
from catalogue.color.color import Color
from catalogue.product.product import Product
from catalogue.tag.tag import Tag
from shared.errors import entity_not_found
from shared.listing import ListQuery, as_list, find_by, first_by, page, run_list_query

UNDER_ONE_THOUSAND_TAG = "UnderOneThousand"


class ProductQuery(ListQuery):
    name: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    desc: str | None = None
    available: bool | None = None
    colors: list[str] | None = None  # color urls
    categories: list[str] | None = None  # category urls
    brands: list[str] | None = None  # brand urls
    tags: list[str] | None = None  # tag urls


class _NoMatch(Exception):
    """A relation filter named urls that resolve to nothing."""


def _ids_for_urls(aggregate_cls, urls) -> list[str] | None:
    urls = as_list(urls)
    if not urls:
        return None
    ids = [str(row.id) for row in find_by(aggregate_cls, url__in=urls)]
    if not ids:
        raise _NoMatch
    return ids


def _filters(query: ProductQuery):
    """Translate ``query`` into database lookups plus in-process predicates."""
    lookups = {
        "name__icontains": query.name,
        "price__gte": query.min_price,
        "price__lte": query.max_price,
        "available": query.available,
        "category_id__in": _ids_for_urls(Category, query.categories),
        "brand_id__in": _ids_for_urls(Brand, query.brands),
    }

    predicates = []
    if query.desc:
        needle = query.desc.lower()
        predicates.append(lambda product: needle in (product.description or "").lower())

    color_ids = _ids_for_urls(Color, query.colors)
    if color_ids:
        wanted_colors = set(color_ids)
        predicates.append(lambda product: bool(wanted_colors.intersection(product.colors)))
    tag_ids = _ids_for_urls(Tag, query.tags)
    if tag_ids:
        wanted_tags = set(tag_ids)
        predicates.append(lambda product: bool(wanted_tags.intersection(product.tags)))

    return lookups, predicates


def list_products(query: ProductQuery) -> dict:
    try:
        lookups, predicates = _filters(query)
    except _NoMatch:
        return page([], _total())

    rows, length = run_list_query(Product, query, lookups, predicates)
    return page([row.to_view() for row in rows], length)


def products_under_one_thousand(query: ProductQuery) -> dict:
    return list_products(query.model_copy(update={"tags": [UNDER_ONE_THOUSAND_TAG]}))


def price_range(query: ProductQuery) -> dict:
    """Lowest and highest price among the products matching ``query``'s filters."""
    try:
        lookups, predicates = _filters(query)
    except _NoMatch:
        return {"min": None, "max": None}

    active = {key: value for key, value in lookups.items() if value is not None}
    prices = [
        product.price
        for product in find_by(Product, **active)
        if all(predicate(product) for predicate in predicates)
    ]
    if not prices:
        return {"min": None, "max": None}
    return {"min": min(prices), "max": max(prices)}


def get_product(product_id: str) -> dict:
    product = current_domain.repository_for(Product).get(product_id)
    return _expanded(product)


def get_product_by_url(url: str) -> dict:
    product = first_by(Product, url=url)
    if product is None:
        raise entity_not_found("Product", url)
    return _expanded(product)


def _expanded(product: Product) -> dict:
    view = product.to_view()

    category = first_by(Category, id=str(product.category_id)) if product.category_id else None
    brand = first_by(Brand, id=str(product.brand_id)) if product.brand_id else None
    view["category"] = category.to_view() if category else None
    view["brand"] = brand.to_view() if brand else None
    view["tags"] = [tag.to_view() for tag in find_by(Tag, id__in=product.tags)] if product.tags else []
    view["colors"] = [color.to_view() for color in find_by(Color, id__in=product.colors)] if product.colors else []
    return view


def _total() -> int:
    return current_domain.repository_for(Product)._dao.query.all().total
