"""Review reads — stored rows joined with their comments and reactions (on reviews and on comments), then enriched."""

from protean.utils.globals import current_domain

from reviews.review.comment import Comment
from reviews.review.comment_reaction import ReactionComment
from reviews.review.enrichment import apply, enrich, resolve
from reviews.review.reaction import ReactionReview
from reviews.review.review import Review
from shared.errors import Forbidden
from shared.listing import ListQuery, find_by, page, run_list_query
from shared.siblings import get_sibling_lookup


class ReviewQuery(ListQuery):
    sort_by: str = "product_id"
    product_id: str | None = None
    user_id: str | None = None
    show_on_main: bool | None = None
    merge: bool = True


def _joined(reviews_: list[Review]) -> list[dict]:
    """Review views with their comments and reactions, in the given order."""
    review_ids = [str(review.id) for review in reviews_]
    comments: dict[str, list[dict]] = {review_id: [] for review_id in review_ids}
    reactions: dict[str, list[dict]] = {review_id: [] for review_id in review_ids}

    if review_ids:
        stored_comments = sorted(find_by(Comment, review_id__in=review_ids), key=lambda c: c.created_at)
        comment_reactions: dict[str, list[dict]] = {str(comment.id): [] for comment in stored_comments}
        if stored_comments:
            for reaction in find_by(ReactionComment, comment_id__in=list(comment_reactions)):
                comment_reactions[str(reaction.comment_id)].append(reaction.to_view())

        for comment in stored_comments:
            view = {**comment.to_view(), "reactions": comment_reactions[str(comment.id)]}
            comments[str(comment.review_id)].append(view)
        for reaction in find_by(ReactionReview, review_id__in=review_ids):
            reactions[str(reaction.review_id)].append(reaction.to_view())

    return [
        {**review.to_view(), "comments": comments[str(review.id)], "reactions": reactions[str(review.id)]}
        for review in reviews_
    ]


def get_reviews(query: ReviewQuery, authorization: str = "") -> dict:
    lookups = {
        "product_id": query.product_id,
        "user_id": query.user_id,
        "show_on_main": query.show_on_main,
    }
    rows, length = run_list_query(Review, query, lookups, filtered_length=True)
    enriched = enrich(_joined(rows), get_sibling_lookup(), authorization=authorization, merge=query.merge)
    return page(enriched, length)


def get_review(review_id: str, authorization: str = "") -> dict:
    """One review, enriched; a 403 from the users service surfaces as ``Forbidden``."""
    review = current_domain.repository_for(Review).get(review_id)
    (row,) = _joined([review])

    resolution = resolve(
        get_sibling_lookup(),
        product_ids=[row["product_id"]],
        user_ids=[row["user_id"]] + [comment["user_id"] for comment in row["comments"]],
        authorization=authorization,
    )
    if resolution.user_forbidden(row["user_id"]):
        raise Forbidden("The users service refused the author lookup")

    return apply(row, resolution)
