"""Comments on reviews — create, edit and remove."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.comment import Comment
from reviews.review.comment_reaction import ReactionComment
from reviews.review.review import Review
from shared.auth import Role, is_owner_or_admin
from shared.errors import entity_not_found
from shared.listing import find_by


@reviews.command(part_of="Comment")
class CreateComment:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    text = Text(required=True)


@reviews.command(part_of="Comment")
class EditComment:
    review_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    text = Text(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@reviews.command(part_of="Comment")
class RemoveComment:
    review_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


def comment_of_review(review_id, comment_id) -> Comment:
    """The comment, provided it sits under ``review_id``; otherwise it is reported missing."""
    comment = current_domain.repository_for(Comment).get(comment_id)
    if str(comment.review_id) != str(review_id):
        raise entity_not_found("Comment", comment_id)
    return comment


def remove_comment_reactions(comment_ids) -> None:
    if not comment_ids:
        return
    dao = current_domain.repository_for(ReactionComment)._dao
    for reaction in find_by(ReactionComment, comment_id__in=[str(cid) for cid in comment_ids]):
        dao.delete(reaction)


@reviews.command_handler(part_of=Comment)
class ManageCommentHandler:
    @handle(CreateComment)
    def create_comment(self, command):
        review = current_domain.repository_for(Review).get(command.review_id)

        comment = Comment(review_id=str(review.id), user_id=command.user_id, text=command.text)
        current_domain.repository_for(Comment).add(comment)
        return str(comment.id)

    @handle(EditComment)
    def edit_comment(self, command):
        comment = comment_of_review(command.review_id, command.comment_id)
        is_owner_or_admin(comment.user_id, command.requested_by, command.requester_role)

        comment.edit(command.text)
        current_domain.repository_for(Comment).add(comment)

    @handle(RemoveComment)
    def remove_comment(self, command):
        comment = comment_of_review(command.review_id, command.comment_id)
        is_owner_or_admin(comment.user_id, command.requested_by, command.requester_role)

        remove_comment_reactions([comment.id])
        current_domain.repository_for(Comment)._dao.delete(comment)
