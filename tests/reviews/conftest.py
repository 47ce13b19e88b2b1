import os

import pytest


@pytest.fixture(scope="session")
def _reviews_domain(request):
    """Initialize the reviews domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from reviews.domain import reviews

    reviews.init()
    return reviews


@pytest.fixture(scope="session", autouse=True)
def setup_db(_reviews_domain):
    from shared.db import drop_db, setup_db

    setup_db(_reviews_domain)

    yield

    drop_db(_reviews_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_reviews_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _reviews_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    ctx.pop()
