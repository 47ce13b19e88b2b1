"""Comment aggregate — a user's reply under a review."""

from datetime import datetime

from protean.fields import DateTime, Identifier, Text

from reviews.domain import reviews


@reviews.aggregate
class Comment:
    review_id = Identifier(required=True)
    user_id = Identifier(required=True)
    text = Text(required=True)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    def edit(self, text):
        self.text = text
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "review_id": str(self.review_id),
            "user_id": str(self.user_id),
            "text": self.text,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
