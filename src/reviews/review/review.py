"""Review aggregate — a user's rating and text about a catalogue product.

``product_id`` and ``user_id`` are references into sibling services with no
local integrity; the product is checked once, when the review is written.
The product of a review never changes after creation.
"""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, Text

from reviews.domain import reviews
from shared.listing import dump_ids, load_ids

MIN_RATING = 1
MAX_RATING = 5


@reviews.aggregate
class Review:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    text = Text()
    images = Text()  # JSON array of image references
    show_on_main = Boolean(default=False)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

    @classmethod
    def write(cls, product_id, user_id, rating, text=None, images=None, show_on_main=False):
        now = datetime.now()
        return cls(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            text=text,
            images=dump_ids(images),
            show_on_main=show_on_main,
            created_at=now,
            updated_at=now,
        )

    def revise(self, rating=None, text=None, images=None, show_on_main=None):
        """Merge the given values into the review in place."""
        with atomic_change(self):
            if rating is not None:
                self.rating = rating
            if text is not None:
                self.text = text
            if images is not None:
                self.images = dump_ids(images)
            if show_on_main is not None:
                self.show_on_main = show_on_main
            self.updated_at = datetime.now()

    @property
    def image_list(self) -> list[str]:
        return load_ids(self.images)

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "product_id": str(self.product_id),
            "user_id": str(self.user_id),
            "rating": self.rating,
            "text": self.text,
            "images": self.image_list,
            "show_on_main": self.show_on_main,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
