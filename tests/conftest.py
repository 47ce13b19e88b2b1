import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config overlay and the in-memory sibling lookup before any
    domain module is imported.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["SIBLING_LOOKUP_ADAPTER"] = "fake"


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def sibling_lookup():
    """A fresh in-memory catalogue/users lookup for every test."""
    from shared.siblings import reset_sibling_lookup, set_sibling_lookup
    from shared.siblings.fake_adapter import FakeSiblingLookup

    lookup = FakeSiblingLookup()
    set_sibling_lookup(lookup)
    yield lookup
    reset_sibling_lookup()


@pytest.fixture()
def auth_headers():
    """Build an ``Authorization`` header for a user id and role."""
    from shared.auth import create_access_token

    def _headers(user_id="user-1", role="User"):
        return {"Authorization": f"Bearer {create_access_token(user_id, role)}"}

    return _headers
