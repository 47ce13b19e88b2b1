"""HTTP adapter for sibling services, built on requests."""

import requests
import structlog

from shared.siblings.port import LookupResult, SiblingLookup

logger = structlog.get_logger(__name__)


class HttpSiblingLookup(SiblingLookup):
    """Plain GET calls to ``{catalog_url}/products/{id}`` and ``{users_url}/users/{id}``."""

    def __init__(self, catalog_url: str, users_url: str, timeout: float | None = None, session=None) -> None:
        self.catalog_url = catalog_url.rstrip("/")
        self.users_url = users_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_product(self, product_id: str) -> LookupResult:
        return self._get("catalogue", f"{self.catalog_url}/products/{product_id}", product_id)

    def get_user(self, user_id: str, auth_token: str = "") -> LookupResult:
        headers = {"Authorization": auth_token} if auth_token else {}
        return self._get("users", f"{self.users_url}/users/{user_id}", user_id, headers=headers)

    def _get(self, service: str, url: str, resource_id: str, headers: dict | None = None) -> LookupResult:
        try:
            response = self.session.get(url, headers=headers or {}, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("sibling_lookup_failed", service=service, resource_id=resource_id, error=str(exc))
            return LookupResult.unavailable()

        if response.status_code == 200:
            try:
                return LookupResult.of(response.json())
            except requests.exceptions.JSONDecodeError as exc:
                logger.warning("sibling_lookup_bad_body", service=service, resource_id=resource_id, error=str(exc))
                return LookupResult.unavailable()
        if response.status_code == 403:
            return LookupResult.forbidden()
        if response.status_code == 404:
            return LookupResult.not_found()

        logger.warning(
            "sibling_lookup_unexpected_status",
            service=service,
            resource_id=resource_id,
            status=response.status_code,
        )
        return LookupResult.unavailable()
