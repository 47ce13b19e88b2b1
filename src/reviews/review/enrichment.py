"""Enrichment of stored review rows with remote products and users.

All lookups for a page are fanned out on a thread pool and joined before any
row is built, so the result keeps the order of the stored rows. A lookup
that does not resolve leaves the raw id in place of the remote object.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from shared.siblings.port import LookupResult, LookupStatus, SiblingLookup

MAX_LOOKUP_WORKERS = 8


@dataclass
class Resolution:
    products: dict[str, LookupResult] = field(default_factory=dict)
    users: dict[str, LookupResult] = field(default_factory=dict)

    def product(self, product_id: str):
        result = self.products.get(product_id)
        return result.or_default(product_id) if result else product_id

    def user(self, user_id: str):
        result = self.users.get(user_id)
        return result.or_default(user_id) if result else user_id

    def user_forbidden(self, user_id: str) -> bool:
        result = self.users.get(user_id)
        return result is not None and result.status == LookupStatus.FORBIDDEN


def resolve(lookup: SiblingLookup, product_ids, user_ids, authorization: str = "") -> Resolution:
    """Look up every distinct product and user id concurrently."""
    product_ids = list(dict.fromkeys(product_ids))
    user_ids = list(dict.fromkeys(user_ids))
    total = len(product_ids) + len(user_ids)
    if total == 0:
        return Resolution()

    with ThreadPoolExecutor(max_workers=min(MAX_LOOKUP_WORKERS, total)) as pool:
        product_futures = {pid: pool.submit(lookup.get_product, pid) for pid in product_ids}
        user_futures = {uid: pool.submit(lookup.get_user, uid, authorization) for uid in user_ids}
        return Resolution(
            products={pid: future.result() for pid, future in product_futures.items()},
            users={uid: future.result() for uid, future in user_futures.items()},
        )


def enrich(rows: list[dict], lookup: SiblingLookup, authorization: str = "", merge: bool = True) -> list[dict]:
    """Attach remote data to joined review rows.

    With ``merge`` every row gets ``product`` and ``user``; without it the
    rows stay raw and only comment authors are resolved.
    """
    comment_authors = [comment["user_id"] for row in rows for comment in row.get("comments", [])]
    if merge:
        resolution = resolve(
            lookup,
            product_ids=[row["product_id"] for row in rows],
            user_ids=[row["user_id"] for row in rows] + comment_authors,
            authorization=authorization,
        )
    else:
        resolution = resolve(lookup, product_ids=[], user_ids=comment_authors, authorization=authorization)

    return [apply(row, resolution, merge) for row in rows]


def apply(row: dict, resolution: Resolution, merge: bool = True) -> dict:
    enriched = dict(row)
    enriched["comments"] = [
        {**comment, "user": resolution.user(comment["user_id"])} for comment in row.get("comments", [])
    ]
    if merge:
        enriched["product"] = resolution.product(row["product_id"])
        enriched["user"] = resolution.user(row["user_id"])
    return enriched
