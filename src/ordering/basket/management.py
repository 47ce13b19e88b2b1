"""Basket management — commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.basket.basket import Basket, BasketStatus
from ordering.domain import ordering
from ordering.order_product.order_product import OrderProduct
from shared.auth import Role, is_owner_or_admin
from shared.listing import find_by


@ordering.command(part_of="Basket")
class CreateBasket:
    user_id = Identifier(required=True)


@ordering.command(part_of="Basket")
class ChangeBasketStatus:
    basket_id = Identifier(required=True)
    status = String(required=True, choices=BasketStatus)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command(part_of="Basket")
class RemoveBasket:
    basket_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command_handler(part_of=Basket)
class ManageBasketHandler:
    @handle(CreateBasket)
    def create_basket(self, command):
        basket = Basket.create(user_id=command.user_id)
        current_domain.repository_for(Basket).add(basket)
        return str(basket.id)

    @handle(ChangeBasketStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        is_owner_or_admin(basket.user_id, command.requested_by, command.requester_role)

        basket.change_status(command.status)
        repo.add(basket)

    @handle(RemoveBasket)
    def remove_basket(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        is_owner_or_admin(basket.user_id, command.requested_by, command.requester_role)

        op_dao = current_domain.repository_for(OrderProduct)._dao
        for order_product in find_by(OrderProduct, basket_id=str(basket.id)):
            op_dao.delete(order_product)

        repo._dao.delete(basket)
