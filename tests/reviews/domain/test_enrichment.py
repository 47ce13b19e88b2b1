"""Tests for concurrent enrichment of review rows."""

from reviews.review.enrichment import MAX_LOOKUP_WORKERS, Resolution, apply, enrich, resolve
from shared.siblings.fake_adapter import FakeSiblingLookup
from shared.siblings.port import LookupResult, LookupStatus


def _row(review_id, product_id="P1", user_id="U1", comments=None):
    return {"id": review_id, "product_id": product_id, "user_id": user_id, "comments": comments or []}


class TestResolve:
    def test_duplicate_ids_are_looked_up_once(self):
        lookup = FakeSiblingLookup()
        lookup.add_product("P1", name="Phone")

        resolve(lookup, product_ids=["P1", "P1", "P1"], user_ids=["U1", "U1"])

        assert sorted(lookup.calls) == [("product", "P1", ""), ("user", "U1", "")]

    def test_authorization_is_forwarded_to_user_lookups(self):
        lookup = FakeSiblingLookup()
        resolve(lookup, product_ids=[], user_ids=["U1"], authorization="Bearer abc")
        assert lookup.calls == [("user", "U1", "Bearer abc")]

    def test_nothing_to_resolve(self):
        lookup = FakeSiblingLookup()
        assert resolve(lookup, [], []) == Resolution()
        assert lookup.calls == []

    def test_many_ids(self):
        lookup = FakeSiblingLookup()
        ids = [f"P{i}" for i in range(MAX_LOOKUP_WORKERS * 3)]
        for product_id in ids:
            lookup.add_product(product_id)

        resolution = resolve(lookup, product_ids=ids, user_ids=[])
        assert all(resolution.product(pid) == {"id": pid} for pid in ids)


class TestResolution:
    def test_unresolved_falls_back_to_raw_id(self):
        resolution = Resolution(
            products={"P1": LookupResult.unavailable()},
            users={"U1": LookupResult.not_found(), "U2": LookupResult.forbidden()},
        )
        assert resolution.product("P1") == "P1"
        assert resolution.user("U1") == "U1"
        assert resolution.user("U2") == "U2"
        assert resolution.user("U3") == "U3"

    def test_user_forbidden(self):
        resolution = Resolution(users={"U1": LookupResult.forbidden()})
        assert resolution.user_forbidden("U1") is True
        assert resolution.user_forbidden("U2") is False


class TestEnrich:
    def test_rows_keep_their_order(self):
        lookup = FakeSiblingLookup()
        for product_id in ("P1", "P2", "P3"):
            lookup.add_product(product_id, name=product_id.lower())
        rows = [_row("3", "P3"), _row("1", "P1"), _row("2", "P2")]

        enriched = enrich(rows, lookup)

        assert [row["id"] for row in enriched] == ["3", "1", "2"]
        assert [row["product"]["name"] for row in enriched] == ["p3", "p1", "p2"]

    def test_merge_degrades_to_raw_ids(self):
        lookup = FakeSiblingLookup()
        lookup.add_user("U1", first_name="Ann")
        lookup.fail("product", "P1", LookupStatus.UNAVAILABLE)

        (row,) = enrich([_row("1")], lookup)

        assert row["product"] == "P1"
        assert row["user"] == {"id": "U1", "first_name": "Ann"}

    def test_without_merge_only_comment_authors_resolve(self):
        lookup = FakeSiblingLookup()
        lookup.add_user("U2", first_name="Bob")
        rows = [_row("1", comments=[{"id": "c1", "user_id": "U2", "text": "Agreed"}])]

        (row,) = enrich(rows, lookup, merge=False)

        assert "product" not in row
        assert "user" not in row
        assert row["comments"][0]["user"] == {"id": "U2", "first_name": "Bob"}
        assert {kind for kind, _, _ in lookup.calls} == {"user"}

    def test_apply_does_not_mutate_input(self):
        row = _row("1")
        apply(row, Resolution())
        assert "product" not in row
