"""Fake sibling lookup — in-memory products and users for tests and local runs."""

from shared.siblings.port import LookupResult, LookupStatus, SiblingLookup


class FakeSiblingLookup(SiblingLookup):
    def __init__(self):
        self.products: dict[str, dict] = {}
        self.users: dict[str, dict] = {}
        self.failures: dict[tuple[str, str], LookupStatus] = {}
        self.calls: list[tuple[str, str, str]] = []

    def add_product(self, product_id: str, **data) -> dict:
        self.products[str(product_id)] = {"id": str(product_id), **data}
        return self.products[str(product_id)]

    def add_user(self, user_id: str, **data) -> dict:
        self.users[str(user_id)] = {"id": str(user_id), **data}
        return self.users[str(user_id)]

    def fail(self, kind: str, resource_id: str, status: LookupStatus = LookupStatus.UNAVAILABLE) -> None:
        """Force lookups of ``kind`` ("product" or "user") for ``resource_id`` to fail."""
        self.failures[(kind, str(resource_id))] = status

    def get_product(self, product_id: str) -> LookupResult:
        self.calls.append(("product", str(product_id), ""))
        return self._resolve("product", str(product_id), self.products)

    def get_user(self, user_id: str, auth_token: str = "") -> LookupResult:
        self.calls.append(("user", str(user_id), auth_token))
        return self._resolve("user", str(user_id), self.users)

    def _resolve(self, kind, resource_id, store) -> LookupResult:
        failure = self.failures.get((kind, resource_id))
        if failure is not None:
            return LookupResult(failure)
        if resource_id in store:
            return LookupResult.of(store[resource_id])
        return LookupResult.not_found()
