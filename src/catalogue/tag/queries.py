"""Tag reads."""

from protean.utils.globals import current_domain

from catalogue.product.product import Product
from catalogue.tag.tag import Tag
from shared.listing import ListQuery, as_list, find_by, page, run_list_query


class TagQuery(ListQuery):
    name: str | None = None
    url: str | None = None
    products: list[str] | None = None  # product urls


def list_tags(query: TagQuery) -> dict:
    lookups = {
        "name__icontains": query.name,
        "url__icontains": query.url,
    }

    product_urls = as_list(query.products)
    if product_urls:
        tag_ids = sorted({tid for product in find_by(Product, url__in=product_urls) for tid in product.tags})
        if not tag_ids:
            return page([], current_domain.repository_for(Tag)._dao.query.all().total)
        lookups["id__in"] = tag_ids

    rows, length = run_list_query(Tag, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_tag(tag_id: str) -> dict:
    return current_domain.repository_for(Tag).get(tag_id).to_view()
