"""Product management — commands and handlers for products and their variants.

Every referenced category, brand, color, tag and parameter must exist; a
missing one fails the command with ``ObjectNotFoundError`` before anything is
written.
"""

import json

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from catalogue.brand.brand import Brand
from catalogue.category.category import Category
from catalogue.color.color import Color
from catalogue.domain import catalogue
from catalogue.parameter.parameter import Parameter
from catalogue.product.product import Product
from catalogue.tag.tag import Tag


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    url: String(required=True, max_length=255)
    price: Float(required=True)
    old_price: Float()
    description: Text()
    available: Boolean(default=True)
    images: Text()  # JSON array
    category_id: Identifier()
    brand_id: Identifier()
    color_ids: Text()  # JSON array
    tag_ids: Text()  # JSON array
    parameters: Text()  # JSON array of {"parameter_id", "value"}


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    url: String(max_length=255)
    price: Float()
    old_price: Float()
    description: Text()
    available: Boolean()
    images: Text()
    category_id: Identifier()
    brand_id: Identifier()
    color_ids: Text()
    tag_ids: Text()
    parameters: Text()


@catalogue.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@catalogue.command(part_of="Product")
class AddProductVariant:
    product_id: Identifier(required=True)
    price: Float(required=True)
    old_price: Float()
    available: Boolean(default=True)
    color_id: Identifier(required=True)
    images: Text()


@catalogue.command(part_of="Product")
class UpdateProductVariant:
    product_id: Identifier(required=True)
    variant_id: Identifier(required=True)
    price: Float()
    old_price: Float()
    available: Boolean()
    color_id: Identifier()
    images: Text()


@catalogue.command(part_of="Product")
class RemoveProductVariant:
    product_id: Identifier(required=True)
    variant_id: Identifier(required=True)


def _loads(raw):
    return json.loads(raw) if raw is not None else None


def _existing(aggregate_cls, ids):
    if ids is None:
        return None
    repo = current_domain.repository_for(aggregate_cls)
    return [str(repo.get(str(identifier)).id) for identifier in ids]


def _existing_one(aggregate_cls, identifier):
    if not identifier:
        return None
    return str(current_domain.repository_for(aggregate_cls).get(identifier).id)


def _parameter_values(raw):
    values = _loads(raw)
    if values is None:
        return None
    repo = current_domain.repository_for(Parameter)
    return [(str(repo.get(str(item["parameter_id"])).id), str(item["value"])) for item in values]


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        parameters = _parameter_values(command.parameters)
        product = Product.create(
            name=command.name,
            url=command.url,
            price=command.price,
            old_price=command.old_price,
            description=command.description,
            available=command.available if command.available is not None else True,
            images=_loads(command.images),
            category_id=_existing_one(Category, command.category_id),
            brand_id=_existing_one(Brand, command.brand_id),
            color_ids=_existing(Color, _loads(command.color_ids)),
            tag_ids=_existing(Tag, _loads(command.tag_ids)),
        )
        if parameters:
            product.set_parameters(parameters)

        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        parameters = _parameter_values(command.parameters)
        product.update_details(
            name=command.name,
            url=command.url,
            price=command.price,
            old_price=command.old_price,
            description=command.description,
            available=command.available,
            images=_loads(command.images),
            category_id=_existing_one(Category, command.category_id),
            brand_id=_existing_one(Brand, command.brand_id),
            color_ids=_existing(Color, _loads(command.color_ids)),
            tag_ids=_existing(Tag, _loads(command.tag_ids)),
        )
        if parameters is not None:
            product.set_parameters(parameters)

        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        # Variants and parameter values go with the aggregate
        repo._dao.delete(product)


@catalogue.command_handler(part_of=Product)
class ManageProductVariantsHandler:
    @handle(AddProductVariant)
    def add_variant(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        variant = product.add_variant(
            price=command.price,
            color_id=_existing_one(Color, command.color_id),
            old_price=command.old_price,
            available=command.available if command.available is not None else True,
            images=_loads(command.images),
        )
        repo.add(product)
        return str(variant.id)

    @handle(UpdateProductVariant)
    def update_variant(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.update_variant(
            command.variant_id,
            price=command.price,
            old_price=command.old_price,
            available=command.available,
            color_id=_existing_one(Color, command.color_id),
            images=_loads(command.images),
        )
        repo.add(product)

    @handle(RemoveProductVariant)
    def remove_variant(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.remove_variant(command.variant_id)
        repo.add(product)
