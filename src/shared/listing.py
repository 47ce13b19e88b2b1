"""List-query specification and its translation to Protean querysets.

Every list endpoint takes a ``ListQuery`` subclass: filters plus sort key and
offset/limit pagination. ``run_list_query`` applies scalar lookups in the
database, then optional in-process predicates for relations stored as JSON id
lists, then pagination. ``length`` is the unfiltered row count of the
aggregate unless the caller asks for the filtered count.
"""

import json
from collections.abc import Callable
from typing import Any, Literal

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from protean.utils.reflection import declared_fields
from pydantic import BaseModel, Field, field_validator

# Rows fetched per round trip when a query is read in full
SCAN_PAGE = 1_000


class ListQuery(BaseModel):
    sort_by: str = "name"
    order_by: Literal["ASC", "DESC"] = "DESC"
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=10, ge=1)

    @field_validator("order_by", mode="before")
    @classmethod
    def _normalize_order(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def ordering(self) -> str:
        return f"-{self.sort_by}" if self.order_by == "DESC" else self.sort_by


def as_list(value) -> list[str] | None:
    """Normalize repeated query params or a JSON array string into a list."""
    if value is None:
        return None
    items = value if isinstance(value, list | tuple) else [value]
    result = []
    for item in items:
        if isinstance(item, str) and item.strip().startswith("["):
            result.extend(str(v) for v in json.loads(item))
        else:
            result.append(str(item))
    return result


def load_ids(raw: str | None) -> list[str]:
    return json.loads(raw) if raw else []


def dump_ids(ids) -> str:
    return json.dumps([str(i) for i in ids or []])


def page(rows: list, length: int) -> dict:
    return {"rows": rows, "length": length}


def scan(queryset) -> list:
    """Every row of ``queryset``, fetched a page at a time."""
    rows = []
    offset = 0
    while True:
        batch = queryset.offset(offset).limit(SCAN_PAGE).all().items
        rows.extend(batch)
        if len(batch) < SCAN_PAGE:
            return rows
        offset += SCAN_PAGE


def run_list_query(
    aggregate_cls,
    query: ListQuery,
    lookups: dict[str, Any],
    predicates: list[Callable[[Any], bool]] | None = None,
    filtered_length: bool = False,
) -> tuple[list, int]:
    """Return the requested page of ``aggregate_cls`` rows and a count.

    The count is the aggregate's total row count, or with ``filtered_length``
    the number of rows matching the filters before pagination.
    """
    if query.sort_by not in declared_fields(aggregate_cls):
        raise ValidationError({"sort_by": [f"Cannot sort {aggregate_cls.__name__} by '{query.sort_by}'"]})

    dao = current_domain.repository_for(aggregate_cls)._dao
    queryset = dao.query
    active = {key: value for key, value in lookups.items() if value is not None}
    if active:
        queryset = queryset.filter(**active)
    queryset = queryset.order_by(query.ordering)

    if predicates:
        matched = [row for row in scan(queryset) if all(p(row) for p in predicates)]
        rows = matched[query.offset : query.offset + query.limit]
        matched_count = len(matched)
    else:
        result = queryset.offset(query.offset).limit(query.limit).all()
        rows = result.items
        matched_count = result.total

    return rows, matched_count if filtered_length else dao.query.all().total


def find_by(aggregate_cls, **lookups) -> list:
    """Fetch every row matching ``lookups``."""
    dao = current_domain.repository_for(aggregate_cls)._dao
    return scan(dao.query.filter(**lookups))


def first_by(aggregate_cls, **lookups):
    rows = find_by(aggregate_cls, **lookups)
    return rows[0] if rows else None
