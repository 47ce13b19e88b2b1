"""Fixtures for tests that drive the composed application across contexts."""

import pytest


@pytest.fixture(autouse=True)
def reset_all_domains():
    """Clear every context's in-memory data after each test."""
    yield

    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering
    from reviews.domain import reviews

    for domain in (identity, catalogue, ordering, reviews):
        with domain.domain_context():
            for _, provider in domain.providers.items():
                provider._data_reset()
