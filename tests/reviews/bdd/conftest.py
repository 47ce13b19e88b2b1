"""Shared BDD fixtures for the Reviews domain."""

import pytest


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}
