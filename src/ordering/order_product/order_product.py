"""OrderProduct aggregate — one product variant in a basket, priced when added.

A basket holds at most one row per product; ``(product_id, basket_id)`` is the
natural key.
"""

from datetime import datetime

from protean.fields import DateTime, Float, Identifier, Integer

from ordering.domain import ordering


@ordering.aggregate
class OrderProduct:
    product_id = Identifier(required=True)
    basket_id = Identifier(required=True)
    product_variant_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    product_price = Float(required=True, min_value=0.0)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    def reprice(self, product_variant_id, product_price, quantity):
        self.product_variant_id = product_variant_id
        self.product_price = product_price
        self.quantity = quantity
        self.updated_at = datetime.now()

    def change_quantity(self, quantity):
        self.quantity = quantity
        self.updated_at = datetime.now()

    @property
    def subtotal(self) -> float:
        return self.product_price * self.quantity

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "product_id": str(self.product_id),
            "basket_id": str(self.basket_id),
            "product_variant_id": str(self.product_variant_id),
            "quantity": self.quantity,
            "product_price": self.product_price,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
