"""Basket aggregate — a user's set of order products on its way to checkout."""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, Float, Identifier, String

from ordering.domain import ordering


class BasketStatus(Enum):
    OPEN = "Open"
    ORDERED = "Ordered"
    PAID = "Paid"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@ordering.aggregate
class Basket:
    user_id = Identifier(required=True)
    status = String(choices=BasketStatus, default=BasketStatus.OPEN.value)
    total_amount = Float(default=0.0, min_value=0.0)
    checkout_id = Identifier()
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def create(cls, user_id):
        now = datetime.now()
        return cls(
            user_id=user_id,
            status=BasketStatus.OPEN.value,
            total_amount=0.0,
            created_at=now,
            updated_at=now,
        )

    def recalculate(self, order_products):
        """Total is the sum of captured price times quantity over the basket's rows."""
        self.total_amount = round(sum(op.product_price * op.quantity for op in order_products), 2)
        self.updated_at = datetime.now()

    def change_status(self, status):
        self.status = BasketStatus(status).value
        self.updated_at = datetime.now()

    def attach_checkout(self, checkout_id):
        self.checkout_id = checkout_id
        self.status = BasketStatus.ORDERED.value
        self.updated_at = datetime.now()

    def detach_checkout(self):
        self.checkout_id = None
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "status": self.status,
            "total_amount": self.total_amount,
            "checkout_id": str(self.checkout_id) if self.checkout_id else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
