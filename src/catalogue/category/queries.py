"""Category reads — filtered lists, lookups and the full tree."""

from protean.utils.globals import current_domain

from catalogue.category.category import Category
from shared.errors import entity_not_found
from shared.listing import ListQuery, first_by, find_by, page, run_list_query, scan


class CategoryQuery(ListQuery):
    name: str | None = None
    url: str | None = None
    parent: str | None = None  # parent category url


def list_categories(query: CategoryQuery) -> dict:
    lookups = {
        "name__icontains": query.name,
        "url__icontains": query.url,
    }
    if query.parent:
        parents = find_by(Category, url=query.parent)
        if not parents:
            return page([], _total())
        lookups["parent_id"] = str(parents[0].id)

    rows, length = run_list_query(Category, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_category(category_id: str) -> dict:
    category = current_domain.repository_for(Category).get(category_id)
    return _with_relatives(category)


def get_category_by_url(url: str) -> dict:
    category = first_by(Category, url=url)
    if category is None:
        raise entity_not_found("Category", url)
    return _with_relatives(category)


def category_tree() -> list[dict]:
    """All categories nested under their parents, roots first."""
    categories = scan(current_domain.repository_for(Category)._dao.query.order_by("name"))
    nodes = {str(c.id): {**c.to_view(), "children": []} for c in categories}

    roots = []
    for node in nodes.values():
        parent = nodes.get(node["parent_id"]) if node["parent_id"] else None
        if parent is None:
            roots.append(node)
        else:
            parent["children"].append(node)
    return roots


def _with_relatives(category: Category) -> dict:
    view = category.to_view()
    parent = None
    if category.parent_id:
        parent = first_by(Category, id=str(category.parent_id))
    view["parent"] = parent.to_view() if parent else None
    view["children"] = [child.to_view() for child in find_by(Category, parent_id=str(category.id))]
    return view


def _total() -> int:
    return current_domain.repository_for(Category)._dao.query.all().total
