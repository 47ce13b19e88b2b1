"""RemoveReview — hard delete of a review together with its reactions, comments and comment reactions."""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import logger, reviews
from reviews.review.comment import Comment
from reviews.review.comments import remove_comment_reactions
from reviews.review.reaction import ReactionReview
from reviews.review.review import Review
from shared.auth import Role, is_owner_or_admin
from shared.listing import find_by


@reviews.command(part_of="Review")
class RemoveReview:
    review_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@reviews.command_handler(part_of=Review)
class RemoveReviewHandler:
    @handle(RemoveReview)
    def remove_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        is_owner_or_admin(review.user_id, command.requested_by, command.requester_role)

        remove_comment_reactions([comment.id for comment in find_by(Comment, review_id=str(review.id))])
        for dependent_cls in (ReactionReview, Comment):
            dao = current_domain.repository_for(dependent_cls)._dao
            for row in find_by(dependent_cls, review_id=str(review.id)):
                dao.delete(row)

        repo._dao.delete(review)
        logger.info("review_removed", review_id=str(review.id), removed_by=str(command.requested_by))
