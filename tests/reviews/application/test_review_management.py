"""Application tests for writing, revising and removing reviews."""

import json

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain
from protean.utils.reflection import declared_fields
from reviews.review.comment import Comment
from reviews.review.comment_reaction import ReactionComment
from reviews.review.comments import CreateComment, EditComment, RemoveComment
from reviews.review.editing import UpdateReview
from reviews.review.reaction import ReactionReview
from reviews.review.reactions import CreateCommentReaction, CreateReaction, RemoveCommentReaction, RemoveReaction
from reviews.review.removal import RemoveReview
from reviews.review.review import Review
from reviews.review.submission import CreateReview
from shared.errors import Forbidden, ProductNotFound
from shared.siblings.port import LookupStatus


def _process(command):
    return current_domain.process(command, asynchronous=False)


@pytest.fixture()
def product(sibling_lookup):
    return sibling_lookup.add_product("P1", name="Acme Phone")


def _write(user_id="U1", **overrides):
    defaults = {"product_id": "P1", "user_id": user_id, "rating": 4, "text": "Solid"}
    defaults.update(overrides)
    return _process(CreateReview(**defaults))


def _count(aggregate_cls):
    return current_domain.repository_for(aggregate_cls)._dao.query.all().total


class TestCreateReview:
    def test_round_trip(self, product):
        review_id = _write(rating=5, text="Great phone", images=json.dumps(["a.jpg"]))

        review = current_domain.repository_for(Review).get(review_id)
        assert review.rating == 5
        assert review.text == "Great phone"
        assert review.image_list == ["a.jpg"]

    def test_missing_product_writes_nothing(self):
        with pytest.raises(ProductNotFound):
            _write(product_id="P404")
        assert _count(Review) == 0

    @pytest.mark.parametrize("status", [LookupStatus.UNAVAILABLE, LookupStatus.FORBIDDEN])
    def test_unresolved_product_writes_nothing(self, sibling_lookup, product, status):
        sibling_lookup.fail("product", "P1", status)
        with pytest.raises(ProductNotFound):
            _write()
        assert _count(Review) == 0

    def test_out_of_range_rating(self, product):
        with pytest.raises(ValidationError):
            _write(rating=7)
        assert _count(Review) == 0


class TestUpdateReview:
    def test_owner_updates_in_place(self, product):
        review_id = _write()
        _process(UpdateReview(review_id=review_id, rating=2, requested_by="U1"))

        review = current_domain.repository_for(Review).get(review_id)
        assert review.rating == 2
        assert review.text == "Solid"
        assert review.product_id == "P1"
        assert _count(Review) == 1

    def test_update_has_no_product_field(self):
        assert "product_id" not in declared_fields(UpdateReview)

    def test_admin_may_update(self, product):
        review_id = _write()
        _process(UpdateReview(review_id=review_id, show_on_main=True, requested_by="A1", requester_role="Admin"))
        assert current_domain.repository_for(Review).get(review_id).show_on_main is True

    def test_stranger_is_forbidden_and_row_unchanged(self, product):
        review_id = _write()
        with pytest.raises(Forbidden):
            _process(UpdateReview(review_id=review_id, rating=1, text="Hacked", requested_by="U2"))

        review = current_domain.repository_for(Review).get(review_id)
        assert (review.rating, review.text) == (4, "Solid")

    def test_missing_review(self):
        with pytest.raises(ObjectNotFoundError):
            _process(UpdateReview(review_id="missing", rating=1, requested_by="U1"))


class TestRemoveReview:
    def test_remove_cascades_to_reactions_and_comments(self, product):
        review_id = _write()
        _process(CreateReaction(review_id=review_id, user_id="U2", reaction="like"))
        _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))

        _process(RemoveReview(review_id=review_id, requested_by="U1"))

        assert _count(Review) == 0
        assert _count(ReactionReview) == 0
        assert _count(Comment) == 0

    def test_stranger_is_forbidden_and_row_kept(self, product):
        review_id = _write()
        with pytest.raises(Forbidden):
            _process(RemoveReview(review_id=review_id, requested_by="U2"))
        assert current_domain.repository_for(Review).get(review_id) is not None


class TestReactions:
    def test_reaction_needs_existing_review(self):
        with pytest.raises(ObjectNotFoundError):
            _process(CreateReaction(review_id="missing", user_id="U2", reaction="like"))

    def test_only_reactor_may_remove(self, product):
        review_id = _write()
        reaction_id = _process(CreateReaction(review_id=review_id, user_id="U2", reaction="like"))

        with pytest.raises(Forbidden):
            _process(RemoveReaction(review_id=review_id, reaction_id=reaction_id, requested_by="U1"))

        _process(RemoveReaction(review_id=review_id, reaction_id=reaction_id, requested_by="U2"))
        assert _count(ReactionReview) == 0

    def test_reaction_under_another_review_is_missing(self, product):
        review_id = _write()
        other_review_id = _write(user_id="U3")
        reaction_id = _process(CreateReaction(review_id=review_id, user_id="U2", reaction="like"))

        with pytest.raises(ObjectNotFoundError):
            _process(RemoveReaction(review_id=other_review_id, reaction_id=reaction_id, requested_by="U2"))
        assert _count(ReactionReview) == 1


class TestComments:
    def test_edit_comment(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))

        _process(EditComment(review_id=review_id, comment_id=comment_id, text="Fully agreed", requested_by="U2"))

        assert current_domain.repository_for(Comment).get(comment_id).text == "Fully agreed"

    def test_stranger_cannot_edit_comment(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))

        with pytest.raises(Forbidden):
            _process(EditComment(review_id=review_id, comment_id=comment_id, text="Nope", requested_by="U3"))

    def test_admin_removes_comment(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Spam"))

        _process(RemoveComment(review_id=review_id, comment_id=comment_id, requested_by="A1", requester_role="Admin"))
        assert _count(Comment) == 0

    def test_comment_under_another_review_is_missing(self, product):
        review_id = _write()
        other_review_id = _write(user_id="U3")
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))

        with pytest.raises(ObjectNotFoundError):
            _process(EditComment(review_id=other_review_id, comment_id=comment_id, text="Moved", requested_by="U2"))
        with pytest.raises(ObjectNotFoundError):
            _process(RemoveComment(review_id=other_review_id, comment_id=comment_id, requested_by="U2"))

        assert current_domain.repository_for(Comment).get(comment_id).text == "Agreed"


class TestCommentReactions:
    def test_react_to_comment(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))

        reaction_id = _process(
            CreateCommentReaction(review_id=review_id, comment_id=comment_id, user_id="U1", reaction="like")
        )

        reaction = current_domain.repository_for(ReactionComment).get(reaction_id)
        assert str(reaction.comment_id) == comment_id
        assert reaction.reaction == "like"

    def test_comment_must_exist_under_review(self, product):
        review_id = _write()
        other_review_id = _write(user_id="U3")
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))

        with pytest.raises(ObjectNotFoundError):
            _process(CreateCommentReaction(review_id=review_id, comment_id="missing", user_id="U1", reaction="like"))
        with pytest.raises(ObjectNotFoundError):
            _process(
                CreateCommentReaction(review_id=other_review_id, comment_id=comment_id, user_id="U1", reaction="like")
            )
        assert _count(ReactionComment) == 0

    def test_only_reactor_or_admin_may_remove(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))
        reaction_id = _process(
            CreateCommentReaction(review_id=review_id, comment_id=comment_id, user_id="U1", reaction="like")
        )

        with pytest.raises(Forbidden):
            _process(
                RemoveCommentReaction(
                    review_id=review_id, comment_id=comment_id, reaction_id=reaction_id, requested_by="U2"
                )
            )

        _process(
            RemoveCommentReaction(
                review_id=review_id,
                comment_id=comment_id,
                reaction_id=reaction_id,
                requested_by="A1",
                requester_role="Admin",
            )
        )
        assert _count(ReactionComment) == 0

    def test_removing_comment_removes_its_reactions(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))
        _process(CreateCommentReaction(review_id=review_id, comment_id=comment_id, user_id="U1", reaction="like"))

        _process(RemoveComment(review_id=review_id, comment_id=comment_id, requested_by="U2"))

        assert _count(Comment) == 0
        assert _count(ReactionComment) == 0

    def test_removing_review_removes_comment_reactions(self, product):
        review_id = _write()
        comment_id = _process(CreateComment(review_id=review_id, user_id="U2", text="Agreed"))
        _process(CreateCommentReaction(review_id=review_id, comment_id=comment_id, user_id="U1", reaction="like"))

        _process(RemoveReview(review_id=review_id, requested_by="U1"))

        assert _count(ReactionComment) == 0
