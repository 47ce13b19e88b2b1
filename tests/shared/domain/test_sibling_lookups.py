"""Tests for the sibling lookup adapters."""

import pytest
import requests
from shared.siblings import get_sibling_lookup, reset_sibling_lookup, set_sibling_lookup
from shared.siblings.fake_adapter import FakeSiblingLookup
from shared.siblings.http_adapter import HttpSiblingLookup
from shared.siblings.port import LookupStatus


_NOT_JSON = object()


class _Response:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is _NOT_JSON:
            raise requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        return self._payload


class _Session:
    """Stands in for ``requests.Session``, replaying canned responses per URL."""

    def __init__(self, responses):
        self.responses = responses
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append((url, headers, timeout))
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


def _adapter(responses, timeout=None):
    session = _Session(responses)
    return HttpSiblingLookup("http://catalog/", "http://users", timeout=timeout, session=session), session


class TestHttpSiblingLookup:
    def test_product_found(self):
        lookup, session = _adapter({"http://catalog/products/P1": _Response(200, {"id": "P1"})}, timeout=2.0)

        result = lookup.get_product("P1")

        assert result.found
        assert result.data == {"id": "P1"}
        assert session.requests == [("http://catalog/products/P1", {}, 2.0)]

    @pytest.mark.parametrize(
        "status, expected",
        [(404, LookupStatus.NOT_FOUND), (403, LookupStatus.FORBIDDEN), (500, LookupStatus.UNAVAILABLE)],
    )
    def test_status_mapping(self, status, expected):
        lookup, _ = _adapter({"http://users/users/U1": _Response(status)})
        assert lookup.get_user("U1").status == expected

    def test_authorization_header_is_forwarded(self):
        lookup, session = _adapter({"http://users/users/U1": _Response(200, {"id": "U1"})})
        lookup.get_user("U1", "Bearer abc")
        assert session.requests[0][1] == {"Authorization": "Bearer abc"}

    def test_connection_error_is_unavailable(self):
        lookup, _ = _adapter({"http://catalog/products/P1": requests.ConnectionError("refused")})
        assert lookup.get_product("P1").status == LookupStatus.UNAVAILABLE

    def test_undecodable_body_is_unavailable(self):
        lookup, _ = _adapter({"http://users/users/U1": _Response(200, _NOT_JSON)})
        assert lookup.get_user("U1").status == LookupStatus.UNAVAILABLE


class TestFakeSiblingLookup:
    def test_unknown_is_not_found(self):
        assert FakeSiblingLookup().get_product("P1").status == LookupStatus.NOT_FOUND

    def test_forced_failure(self):
        lookup = FakeSiblingLookup()
        lookup.add_user("U1")
        lookup.fail("user", "U1", LookupStatus.FORBIDDEN)
        assert lookup.get_user("U1").status == LookupStatus.FORBIDDEN

    def test_default_when_unresolved(self):
        assert FakeSiblingLookup().get_product("P1").or_default("P1") == "P1"


class TestAdapterSelection:
    def test_installed_adapter_is_returned(self, sibling_lookup):
        assert get_sibling_lookup() is sibling_lookup

    def test_environment_selects_http(self, monkeypatch):
        monkeypatch.setenv("SIBLING_LOOKUP_ADAPTER", "http")
        monkeypatch.setenv("CATALOG_DB", "http://catalogue:8000")
        reset_sibling_lookup()

        lookup = get_sibling_lookup()
        assert isinstance(lookup, HttpSiblingLookup)
        assert lookup.catalog_url == "http://catalogue:8000"

    def test_unknown_adapter(self, monkeypatch):
        monkeypatch.setenv("SIBLING_LOOKUP_ADAPTER", "carrier-pigeon")
        reset_sibling_lookup()
        with pytest.raises(ValueError):
            get_sibling_lookup()

    def test_set_replaces_singleton(self):
        replacement = FakeSiblingLookup()
        set_sibling_lookup(replacement)
        assert get_sibling_lookup() is replacement
