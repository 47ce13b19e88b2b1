"""ReactionReview aggregate — a user's reaction (like, dislike, ...) to a review."""

from datetime import datetime

from protean.fields import DateTime, Identifier, String

from reviews.domain import reviews


@reviews.aggregate
class ReactionReview:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reaction = String(required=True, max_length=50)
    created_at = DateTime(default=datetime.now)

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "review_id": str(self.review_id),
            "user_id": str(self.user_id),
            "reaction": self.reaction,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
