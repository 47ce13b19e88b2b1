"""BDD tests for review ownership rules."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from reviews.review.editing import UpdateReview
from reviews.review.removal import RemoveReview
from reviews.review.review import Review
from reviews.review.submission import CreateReview
from shared.errors import Forbidden, ProductNotFound

scenarios("features/review_ownership.feature")


def _capture(error, command):
    try:
        current_domain.process(command, asynchronous=False)
    except (Forbidden, ProductNotFound) as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue has a product "{product_id}"'))
def catalogue_product(sibling_lookup, product_id):
    sibling_lookup.add_product(product_id, name=f"Product {product_id}")


@given(
    parsers.cfparse('user "{user_id}" has reviewed "{product_id}" with rating {rating:d} and text "{text}"'),
    target_fixture="review_id",
)
def existing_review(user_id, product_id, rating, text):
    command = CreateReview(product_id=product_id, user_id=user_id, rating=rating, text=text)
    return current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('user "{user_id}" changes the rating to {rating:d}'))
def user_changes_rating(error, review_id, user_id, rating):
    _capture(error, UpdateReview(review_id=review_id, rating=rating, requested_by=user_id))


@when(parsers.cfparse('admin "{user_id}" changes the rating to {rating:d}'))
def admin_changes_rating(error, review_id, user_id, rating):
    _capture(error, UpdateReview(review_id=review_id, rating=rating, requested_by=user_id, requester_role="Admin"))


@when(parsers.cfparse('user "{user_id}" removes the review'))
def user_removes_review(error, review_id, user_id):
    _capture(error, RemoveReview(review_id=review_id, requested_by=user_id))


@when(parsers.cfparse('user "{user_id}" reviews "{product_id}" with rating {rating:d}'))
def user_reviews_product(error, user_id, product_id, rating):
    _capture(error, CreateReview(product_id=product_id, user_id=user_id, rating=rating))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request is forbidden")
def request_forbidden(error):
    assert isinstance(error["exc"], Forbidden)


@then("the product is reported missing")
def product_missing(error):
    assert isinstance(error["exc"], ProductNotFound)
    assert current_domain.repository_for(Review)._dao.query.all().total == 0


@then(parsers.cfparse('the review has rating {rating:d} and text "{text}"'))
def review_state(review_id, rating, text):
    review = current_domain.repository_for(Review).get(review_id)
    assert review.rating == rating
    assert review.text == text


@then("the review still exists")
def review_exists(review_id):
    assert str(current_domain.repository_for(Review).get(review_id).id) == review_id


@then("the review no longer exists")
def review_gone(review_id):
    try:
        current_domain.repository_for(Review).get(review_id)
    except ObjectNotFoundError:
        return
    raise AssertionError(f"Review {review_id} was not removed")
