"""Sibling-service lookups — pluggable adapters for the catalogue and users services."""

import os

_lookup_instance = None


def get_sibling_lookup():
    """Return the configured sibling lookup adapter (singleton).

    Uses the HTTP adapter by default, pointed at ``CATALOG_DB`` and
    ``USERS_DB``. Set ``SIBLING_LOOKUP_ADAPTER=fake`` for an in-memory adapter.
    """
    global _lookup_instance
    if _lookup_instance is None:
        adapter = os.environ.get("SIBLING_LOOKUP_ADAPTER", "http")
        if adapter == "http":
            from shared.siblings.http_adapter import HttpSiblingLookup

            timeout = os.environ.get("SIBLING_TIMEOUT")
            _lookup_instance = HttpSiblingLookup(
                catalog_url=os.environ.get("CATALOG_DB", "http://localhost:8000"),
                users_url=os.environ.get("USERS_DB", "http://localhost:8000"),
                timeout=float(timeout) if timeout else None,
            )
        elif adapter == "fake":
            from shared.siblings.fake_adapter import FakeSiblingLookup

            _lookup_instance = FakeSiblingLookup()
        else:
            raise ValueError(f"Unknown sibling lookup adapter: {adapter}")
    return _lookup_instance


def set_sibling_lookup(lookup):
    """Install a specific adapter (used by tests and the composition root)."""
    global _lookup_instance
    _lookup_instance = lookup


def reset_sibling_lookup():
    """Reset the lookup singleton (useful for testing)."""
    global _lookup_instance
    _lookup_instance = None
