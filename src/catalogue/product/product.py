"""Product aggregate root with ProductVariant and ParameterProduct entities."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, String, Text

from catalogue.domain import catalogue
from shared.listing import dump_ids, load_ids


@catalogue.entity(part_of="Product")
class ProductVariant:
    """A purchasable variant of a product in one color."""

    price: Float(required=True)
    old_price: Float()
    available: Boolean(default=True)
    color_id: Identifier(required=True)
    images: Text()  # JSON array of image references

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Variant price must be positive"]})

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "price": self.price,
            "old_price": self.old_price,
            "available": self.available,
            "color_id": str(self.color_id),
            "images": load_ids(self.images),
        }


@catalogue.entity(part_of="Product")
class ParameterProduct:
    """Value of one category parameter for a product."""

    parameter_id: Identifier(required=True)
    value: String(required=True, max_length=255)


@catalogue.aggregate
class Product:
    name: String(required=True, max_length=255)
    url: String(required=True, max_length=255, unique=True)
    price: Float(required=True)
    old_price: Float()
    description: Text()
    available: Boolean(default=True)
    images: Text()  # JSON array of image references
    category_id: Identifier()
    brand_id: Identifier()
    color_ids: Text()
    tag_ids: Text()
    variants: HasMany(ProductVariant)
    parameters: HasMany(ParameterProduct)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Product price must be positive"]})

    @property
    def tags(self) -> list[str]:
        return load_ids(self.tag_ids)

    @property
    def colors(self) -> list[str]:
        return load_ids(self.color_ids)

    @classmethod
    def create(
        cls,
        name,
        url,
        price,
        old_price=None,
        description=None,
        available=True,
        images=None,
        category_id=None,
        brand_id=None,
        color_ids=None,
        tag_ids=None,
    ):
        now = datetime.now()
        return cls(
            name=name,
            url=url,
            price=price,
            old_price=old_price,
            description=description,
            available=available,
            images=dump_ids(images),
            category_id=category_id,
            brand_id=brand_id,
            color_ids=dump_ids(color_ids),
            tag_ids=dump_ids(tag_ids),
            created_at=now,
            updated_at=now,
        )

    def update_details(
        self,
        name=None,
        url=None,
        price=None,
        old_price=None,
        description=None,
        available=None,
        images=None,
        category_id=None,
        brand_id=None,
        color_ids=None,
        tag_ids=None,
    ):
        """Shallow merge of the given values; ``None`` keeps the stored one."""
        for field_name, value in (
            ("name", name),
            ("url", url),
            ("price", price),
            ("old_price", old_price),
            ("description", description),
            ("available", available),
            ("category_id", category_id),
            ("brand_id", brand_id),
        ):
            if value is not None:
                setattr(self, field_name, value)

        if images is not None:
            self.images = dump_ids(images)
        if color_ids is not None:
            self.color_ids = dump_ids(color_ids)
        if tag_ids is not None:
            self.tag_ids = dump_ids(tag_ids)

        self.updated_at = datetime.now()

    def set_parameters(self, values):
        """Replace parameter values with ``values``, a list of (parameter_id, value) pairs."""
        for existing in list(self.parameters):
            self.remove_parameters(existing)
        for parameter_id, value in values:
            self.add_parameters(ParameterProduct(parameter_id=parameter_id, value=value))
        self.updated_at = datetime.now()

    def add_variant(self, price, color_id, old_price=None, available=True, images=None):
        variant = ProductVariant(
            price=price,
            old_price=old_price,
            available=available,
            color_id=color_id,
            images=dump_ids(images),
        )
        self.add_variants(variant)
        self.updated_at = datetime.now()
        return variant

    def variant(self, variant_id):
        variant = next((v for v in self.variants if str(v.id) == str(variant_id)), None)
        if variant is None:
            raise ValidationError({"variants": [f"Variant {variant_id} not found"]})
        return variant

    def update_variant(self, variant_id, price=None, old_price=None, available=None, color_id=None, images=None):
        variant = self.variant(variant_id)
        if price is not None:
            variant.price = price
        if old_price is not None:
            variant.old_price = old_price
        if available is not None:
            variant.available = available
        if color_id is not None:
            variant.color_id = color_id
        if images is not None:
            variant.images = dump_ids(images)
        self.updated_at = datetime.now()
        return variant

    def remove_variant(self, variant_id):
        self.remove_variants(self.variant(variant_id))
        self.updated_at = datetime.now()

    def to_view(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "url": self.url,
            "price": self.price,
            "old_price": self.old_price,
            "description": self.description,
            "available": self.available,
            "images": load_ids(self.images),
            "category_id": str(self.category_id) if self.category_id else None,
            "brand_id": str(self.brand_id) if self.brand_id else None,
            "color_ids": self.colors,
            "tag_ids": self.tags,
            "variants": [variant.to_view() for variant in self.variants],
            "parameters": [
                {"parameter_id": str(p.parameter_id), "value": p.value} for p in self.parameters
            ],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
