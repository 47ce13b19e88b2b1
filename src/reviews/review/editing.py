"""UpdateReview — in-place edit of an existing review by its author or an admin.

The command has no ``product_id``: the product of a review is fixed at
creation.
"""

import json

from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from shared.auth import Role, is_owner_or_admin


@reviews.command(part_of="Review")
class UpdateReview:
    review_id = Identifier(required=True)
    rating = Integer()
    text = Text()
    images = Text()  # JSON array
    show_on_main = Boolean()
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@reviews.command_handler(part_of=Review)
class UpdateReviewHandler:
    @handle(UpdateReview)
    def update_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        is_owner_or_admin(review.user_id, command.requested_by, command.requester_role)

        review.revise(
            rating=command.rating,
            text=command.text,
            images=json.loads(command.images) if command.images is not None else None,
            show_on_main=command.show_on_main,
        )
        repo.add(review)
