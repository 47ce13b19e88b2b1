"""Order product management — adding, re-quantifying and removing basket rows.

The price of a row is captured from the catalogue when the row is added, by
looking the product up through the sibling lookup port. Every change
recomputes the owning basket's ``total_amount``.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.basket.basket import Basket
from ordering.domain import logger, ordering
from ordering.order_product.order_product import OrderProduct
from shared.auth import Role, is_owner_or_admin
from shared.errors import ProductNotFound, entity_not_found
from shared.listing import find_by, first_by
from shared.siblings import get_sibling_lookup


@ordering.command(part_of="OrderProduct")
class AddOrderProduct:
    basket_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_variant_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command(part_of="OrderProduct")
class ChangeOrderProductQuantity:
    order_product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command(part_of="OrderProduct")
class RemoveOrderProduct:
    order_product_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


def variant_price(product_id, product_variant_id) -> float:
    """Current price of a product variant according to the catalogue."""
    result = get_sibling_lookup().get_product(str(product_id))
    if not result.found:
        logger.info("order_product_product_unresolved", product_id=str(product_id), status=result.status.value)
        raise ProductNotFound(product_id)

    for variant in result.data.get("variants", []):
        if str(variant["id"]) == str(product_variant_id):
            return float(variant["price"])
    raise entity_not_found("ProductVariant", product_variant_id)


def _owned_basket(basket_id, requested_by, requester_role):
    basket = current_domain.repository_for(Basket).get(basket_id)
    is_owner_or_admin(basket.user_id, requested_by, requester_role)
    return basket


def _recalculate(basket, changed=None, removed_id=None):
    """Recompute the basket total from its stored rows, overlaid with in-flight changes."""
    skip = {str(changed.id)} if changed is not None else set()
    if removed_id is not None:
        skip.add(str(removed_id))
    rows = [row for row in find_by(OrderProduct, basket_id=str(basket.id)) if str(row.id) not in skip]
    if changed is not None:
        rows.append(changed)

    basket.recalculate(rows)
    current_domain.repository_for(Basket).add(basket)


@ordering.command_handler(part_of=OrderProduct)
class ManageOrderProductHandler:
    @handle(AddOrderProduct)
    def add_order_product(self, command):
        basket = _owned_basket(command.basket_id, command.requested_by, command.requester_role)
        price = variant_price(command.product_id, command.product_variant_id)

        repo = current_domain.repository_for(OrderProduct)
        order_product = first_by(OrderProduct, product_id=str(command.product_id), basket_id=str(basket.id))
        if order_product is None:
            order_product = OrderProduct(
                product_id=command.product_id,
                basket_id=str(basket.id),
                product_variant_id=command.product_variant_id,
                quantity=command.quantity,
                product_price=price,
            )
        else:
            order_product.reprice(command.product_variant_id, price, command.quantity)
        repo.add(order_product)

        _recalculate(basket, changed=order_product)
        return str(order_product.id)

    @handle(ChangeOrderProductQuantity)
    def change_quantity(self, command):
        repo = current_domain.repository_for(OrderProduct)
        order_product = repo.get(command.order_product_id)
        basket = _owned_basket(order_product.basket_id, command.requested_by, command.requester_role)

        order_product.change_quantity(command.quantity)
        repo.add(order_product)
        _recalculate(basket, changed=order_product)

    @handle(RemoveOrderProduct)
    def remove_order_product(self, command):
        repo = current_domain.repository_for(OrderProduct)
        order_product = repo.get(command.order_product_id)
        basket = _owned_basket(order_product.basket_id, command.requested_by, command.requester_role)

        repo._dao.delete(order_product)
        _recalculate(basket, removed_id=order_product.id)
