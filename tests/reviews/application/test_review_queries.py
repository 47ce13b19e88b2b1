"""Application tests for enriched review reads."""

import pytest
import requests
from protean.utils.globals import current_domain
from reviews.review.comments import CreateComment
from reviews.review.queries import ReviewQuery, get_review, get_reviews
from reviews.review.reactions import CreateCommentReaction, CreateReaction
from reviews.review.review import Review
from shared.errors import Forbidden
from shared.siblings import set_sibling_lookup
from shared.siblings.http_adapter import HttpSiblingLookup
from shared.siblings.port import LookupStatus


def _store(review_id, product_id="P1", user_id="U1", **overrides):
    fields = {"rating": 4, **overrides}
    review = Review(id=review_id, product_id=product_id, user_id=user_id, **fields)
    current_domain.repository_for(Review).add(review)
    return review_id


@pytest.fixture()
def directory(sibling_lookup):
    sibling_lookup.add_product("P1", name="Acme Phone")
    sibling_lookup.add_product("P2", name="Acme Case")
    sibling_lookup.add_user("U1", first_name="Ann")
    sibling_lookup.add_user("U2", first_name="Bob")
    return sibling_lookup


class TestGetReviews:
    def test_sort_by_id_descending_with_limit(self, directory):
        _store("1")
        _store("2")

        result = get_reviews(ReviewQuery(product_id="P1", sort_by="id", limit=1))

        assert [row["id"] for row in result["rows"]] == ["2"]
        assert result["length"] == 2

    def test_rows_are_merged_with_product_and_user(self, directory):
        _store("1")

        (row,) = get_reviews(ReviewQuery())["rows"]
        assert row["product"]["name"] == "Acme Phone"
        assert row["user"]["first_name"] == "Ann"

    def test_unavailable_user_service_degrades_to_raw_id(self, directory):
        directory.fail("user", "U1", LookupStatus.UNAVAILABLE)
        _store("1")

        (row,) = get_reviews(ReviewQuery())["rows"]
        assert row["user"] == "U1"
        assert row["product"]["name"] == "Acme Phone"

    def test_without_merge_rows_stay_raw(self, directory):
        _store("1")
        _process_comment("1", "U2", "Agreed")
        directory.calls.clear()

        (row,) = get_reviews(ReviewQuery(merge=False))["rows"]

        assert "product" not in row
        assert row["comments"][0]["user"]["first_name"] == "Bob"
        assert directory.calls == [("user", "U2", "")]

    def test_filters(self, directory):
        _store("1", product_id="P1", user_id="U1", show_on_main=True)
        _store("2", product_id="P2", user_id="U1")
        _store("3", product_id="P2", user_id="U2")

        assert _ids(get_reviews(ReviewQuery(product_id="P2"))) == ["3", "2"]
        assert _ids(get_reviews(ReviewQuery(user_id="U1", sort_by="id", order_by="ASC"))) == ["1", "2"]
        assert _ids(get_reviews(ReviewQuery(show_on_main=True))) == ["1"]

    def test_comments_and_reactions_are_joined(self, directory):
        _store("1")
        _process_comment("1", "U2", "First")
        _process_comment("1", "U1", "Second")
        current_domain.process(CreateReaction(review_id="1", user_id="U2", reaction="like"), asynchronous=False)

        (row,) = get_reviews(ReviewQuery())["rows"]
        assert [comment["text"] for comment in row["comments"]] == ["First", "Second"]
        assert [reaction["reaction"] for reaction in row["reactions"]] == ["like"]

    def test_comment_reactions_are_joined(self, directory):
        _store("1")
        comment_id = _process_comment("1", "U2", "First")
        current_domain.process(
            CreateCommentReaction(review_id="1", comment_id=comment_id, user_id="U1", reaction="like"),
            asynchronous=False,
        )

        (row,) = get_reviews(ReviewQuery())["rows"]
        (comment,) = row["comments"]
        assert [reaction["reaction"] for reaction in comment["reactions"]] == ["like"]
        assert comment["user"]["first_name"] == "Bob"

    def test_length_counts_only_matching_reviews(self, directory):
        _store("1", product_id="P1")
        _store("2", product_id="P1")
        _store("3", product_id="P2")

        result = get_reviews(ReviewQuery(product_id="P1", sort_by="id", limit=1))

        assert _ids(result) == ["2"]
        assert result["length"] == 2

    def test_non_json_user_response_degrades_to_raw_id(self, directory):
        session = _CannedSession(
            {
                "http://catalog/products/P1": _CannedResponse(200, {"id": "P1", "name": "Acme Phone"}),
                "http://users/users/U1": _CannedResponse(200, ValueError("<html>Bad gateway</html>")),
            }
        )
        set_sibling_lookup(HttpSiblingLookup("http://catalog", "http://users", session=session))
        _store("1")

        (row,) = get_reviews(ReviewQuery())["rows"]

        assert row["user"] == "U1"
        assert row["product"]["name"] == "Acme Phone"

    def test_authorization_is_forwarded(self, directory):
        _store("1")
        directory.calls.clear()

        get_reviews(ReviewQuery(), authorization="Bearer token-1")
        assert ("user", "U1", "Bearer token-1") in directory.calls


class TestGetReview:
    def test_single_review_is_enriched(self, directory):
        _store("1", text="Great")

        row = get_review("1")
        assert row["text"] == "Great"
        assert row["product"]["name"] == "Acme Phone"

    def test_forbidden_author_lookup_is_raised(self, directory):
        directory.fail("user", "U1", LookupStatus.FORBIDDEN)
        _store("1")

        with pytest.raises(Forbidden):
            get_review("1")

    def test_missing_product_degrades(self, directory):
        _store("1", product_id="P404")
        assert get_review("1")["product"] == "P404"


def _process_comment(review_id, user_id, text):
    return current_domain.process(CreateComment(review_id=review_id, user_id=user_id, text=text), asynchronous=False)


def _ids(result):
    return [row["id"] for row in result["rows"]]


class _CannedResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise requests.exceptions.JSONDecodeError("Expecting value", str(self._payload), 0)
        return self._payload


class _CannedSession:
    def __init__(self, responses):
        self.responses = responses

    def get(self, url, headers=None, timeout=None):
        return self.responses[url]
