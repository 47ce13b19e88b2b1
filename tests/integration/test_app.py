"""Integration tests for the composed storefront application."""

import pytest
from app import _resolve_domain, app
from catalogue.domain import catalogue
from fastapi.testclient import TestClient
from identity.domain import identity
from ordering.domain import ordering
from reviews.domain import reviews


@pytest.fixture()
def client():
    return TestClient(app)


class TestHealth:
    def test_health_lists_every_domain(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert set(response.json()["domains"]) == {"identity", "catalogue", "ordering", "reviews"}


class TestRouting:
    @pytest.mark.parametrize(
        "path, domain",
        [
            ("/users/login", identity),
            ("/products", catalogue),
            ("/products/abc/variants", catalogue),
            ("/categories/tree", catalogue),
            ("/brands", catalogue),
            ("/baskets/b1", ordering),
            ("/order-products", ordering),
            ("/checkouts", ordering),
            ("/reviews/r1/comments", reviews),
        ],
    )
    def test_prefix_resolves_domain(self, path, domain):
        assert _resolve_domain(path) is domain

    @pytest.mark.parametrize("path", ["/health", "/docs", "/productsx", "/"])
    def test_unmapped_paths(self, path):
        assert _resolve_domain(path) is None


class TestCrossContextFlow:
    def test_register_login_and_open_basket(self, client):
        client.post(
            "/users",
            json={"first_name": "Jane", "last_name": "Doe", "email": "flow@example.com", "password": "long-enough-pw"},
        )
        token = client.post("/users/login", json={"email": "flow@example.com", "password": "long-enough-pw"}).json()[
            "access_token"
        ]
        headers = {"Authorization": f"Bearer {token}"}

        basket_id = client.post("/baskets", json={}, headers=headers).json()["id"]
        assert client.get(f"/baskets/{basket_id}", headers=headers).json()["status"] == "Open"
