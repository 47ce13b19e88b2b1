"""Checkout aggregate — ties a user's basket to the address it ships to."""

from datetime import datetime

from protean.fields import DateTime, Identifier, Text

from ordering.domain import ordering


@ordering.aggregate
class Checkout:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    basket_id = Identifier(required=True)
    comment = Text()
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    def update_details(self, address_id=None, comment=None):
        if address_id is not None:
            self.address_id = address_id
        if comment is not None:
            self.comment = comment
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "address_id": str(self.address_id),
            "basket_id": str(self.basket_id),
            "comment": self.comment,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
