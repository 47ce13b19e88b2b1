"""Reactions on reviews and on their comments — create (target must exist) and owner-or-admin removal.

Reactions are addressed under their review; one that belongs to another
review is reported as missing.
"""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.comment_reaction import ReactionComment
from reviews.review.comments import comment_of_review
from reviews.review.reaction import ReactionReview
from reviews.review.review import Review
from shared.auth import Role, is_owner_or_admin
from shared.errors import entity_not_found


@reviews.command(part_of="ReactionReview")
class CreateReaction:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reaction = String(required=True, max_length=50)


@reviews.command(part_of="ReactionReview")
class RemoveReaction:
    review_id = Identifier(required=True)
    reaction_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@reviews.command(part_of="ReactionComment")
class CreateCommentReaction:
    review_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reaction = String(required=True, max_length=50)


@reviews.command(part_of="ReactionComment")
class RemoveCommentReaction:
    review_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    reaction_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@reviews.command_handler(part_of=ReactionReview)
class ManageReactionHandler:
    @handle(CreateReaction)
    def create_reaction(self, command):
        review = current_domain.repository_for(Review).get(command.review_id)

        reaction = ReactionReview(
            review_id=str(review.id),
            user_id=command.user_id,
            reaction=command.reaction,
        )
        current_domain.repository_for(ReactionReview).add(reaction)
        return str(reaction.id)

    @handle(RemoveReaction)
    def remove_reaction(self, command):
        repo = current_domain.repository_for(ReactionReview)
        reaction = repo.get(command.reaction_id)
        if str(reaction.review_id) != str(command.review_id):
            raise entity_not_found("ReactionReview", command.reaction_id)

        is_owner_or_admin(reaction.user_id, command.requested_by, command.requester_role)
        repo._dao.delete(reaction)


@reviews.command_handler(part_of=ReactionComment)
class ManageCommentReactionHandler:
    @handle(CreateCommentReaction)
    def create_comment_reaction(self, command):
        comment = comment_of_review(command.review_id, command.comment_id)

        reaction = ReactionComment(
            comment_id=str(comment.id),
            user_id=command.user_id,
            reaction=command.reaction,
        )
        current_domain.repository_for(ReactionComment).add(reaction)
        return str(reaction.id)

    @handle(RemoveCommentReaction)
    def remove_comment_reaction(self, command):
        comment = comment_of_review(command.review_id, command.comment_id)

        repo = current_domain.repository_for(ReactionComment)
        reaction = repo.get(command.reaction_id)
        if str(reaction.comment_id) != str(comment.id):
            raise entity_not_found("ReactionComment", command.reaction_id)

        is_owner_or_admin(reaction.user_id, command.requested_by, command.requester_role)
        repo._dao.delete(reaction)
