"""CreateReview — write a new review for a catalogue product.

The product must resolve in the catalogue service; any other outcome fails
with ``ProductNotFound`` before anything is stored.
"""

import json

from protean.fields import Boolean, Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import logger, reviews
from reviews.review.review import Review
from shared.errors import ProductNotFound
from shared.siblings import get_sibling_lookup


@reviews.command(part_of="Review")
class CreateReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    text = Text()
    images = Text()  # JSON array
    show_on_main = Boolean(default=False)


@reviews.command_handler(part_of=Review)
class CreateReviewHandler:
    @handle(CreateReview)
    def create_review(self, command):
        product = get_sibling_lookup().get_product(str(command.product_id))
        if not product.found:
            logger.info(
                "review_product_unresolved",
                product_id=str(command.product_id),
                status=product.status.value,
            )
            raise ProductNotFound(command.product_id)

        review = Review.write(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            text=command.text,
            images=json.loads(command.images) if command.images else None,
            show_on_main=bool(command.show_on_main),
        )
        current_domain.repository_for(Review).add(review)
        return str(review.id)
