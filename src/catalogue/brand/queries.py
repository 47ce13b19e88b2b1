"""Brand reads."""

from protean.utils.globals import current_domain

from catalogue.brand.brand import Brand
from shared.listing import ListQuery, page, run_list_query


class BrandQuery(ListQuery):
    name: str | None = None
    show_on_main: bool | None = None


def list_brands(query: BrandQuery) -> dict:
    lookups = {
        "name__icontains": query.name,
        "show_on_main": query.show_on_main,
    }
    rows, length = run_list_query(Brand, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_brand(brand_id: str) -> dict:
    return current_domain.repository_for(Brand).get(brand_id).to_view()
