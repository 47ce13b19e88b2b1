"""Parameter reads."""

from protean.utils.globals import current_domain

from catalogue.category.category import Category
from catalogue.parameter.parameter import Parameter
from shared.listing import ListQuery, as_list, find_by, page, run_list_query


class ParameterQuery(ListQuery):
    name: str | None = None
    categories: list[str] | None = None  # category urls


def list_parameters(query: ParameterQuery) -> dict:
    lookups = {"name__icontains": query.name}

    category_urls = as_list(query.categories)
    if category_urls:
        parameter_ids = sorted(
            {pid for category in find_by(Category, url__in=category_urls) for pid in category.parameters}
        )
        if not parameter_ids:
            return page([], current_domain.repository_for(Parameter)._dao.query.all().total)
        lookups["id__in"] = parameter_ids

    rows, length = run_list_query(Parameter, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_parameter(parameter_id: str) -> dict:
    return current_domain.repository_for(Parameter).get(parameter_id).to_view()
