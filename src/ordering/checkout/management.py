"""Checkout management — commands and handler.

A checkout binds one of the user's baskets to one of the user's addresses and
moves the basket to ``Ordered``. A basket can be checked out once.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.address.address import Address
from ordering.basket.basket import Basket
from ordering.checkout.checkout import Checkout
from ordering.domain import ordering
from shared.auth import Role, is_owner_or_admin
from shared.listing import first_by


@ordering.command(part_of="Checkout")
class CreateCheckout:
    user_id = Identifier(required=True)
    address_id = Identifier(required=True)
    basket_id = Identifier(required=True)
    comment = Text()
    requester_role = String(default=Role.USER.value)


@ordering.command(part_of="Checkout")
class UpdateCheckout:
    checkout_id = Identifier(required=True)
    address_id = Identifier()
    comment = Text()
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command(part_of="Checkout")
class RemoveCheckout:
    checkout_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


def _owned_address(address_id, user_id, role):
    address = current_domain.repository_for(Address).get(address_id)
    is_owner_or_admin(address.user_id, user_id, role)
    return address


@ordering.command_handler(part_of=Checkout)
class ManageCheckoutHandler:
    @handle(CreateCheckout)
    def create_checkout(self, command):
        basket_repo = current_domain.repository_for(Basket)
        basket = basket_repo.get(command.basket_id)
        is_owner_or_admin(basket.user_id, command.user_id, command.requester_role)
        _owned_address(command.address_id, command.user_id, command.requester_role)

        if basket.checkout_id:
            raise ValidationError({"basket_id": [f"Basket {basket.id} is already checked out"]})

        checkout = Checkout(
            user_id=command.user_id,
            address_id=command.address_id,
            basket_id=str(basket.id),
            comment=command.comment,
        )
        current_domain.repository_for(Checkout).add(checkout)

        basket.attach_checkout(str(checkout.id))
        basket_repo.add(basket)
        return str(checkout.id)

    @handle(UpdateCheckout)
    def update_checkout(self, command):
        repo = current_domain.repository_for(Checkout)
        checkout = repo.get(command.checkout_id)
        is_owner_or_admin(checkout.user_id, command.requested_by, command.requester_role)

        if command.address_id:
            _owned_address(command.address_id, checkout.user_id, command.requester_role)

        checkout.update_details(address_id=command.address_id, comment=command.comment)
        repo.add(checkout)

    @handle(RemoveCheckout)
    def remove_checkout(self, command):
        repo = current_domain.repository_for(Checkout)
        checkout = repo.get(command.checkout_id)
        is_owner_or_admin(checkout.user_id, command.requested_by, command.requester_role)

        basket = first_by(Basket, id=str(checkout.basket_id))
        if basket is not None:
            basket.detach_checkout()
            current_domain.repository_for(Basket).add(basket)

        repo._dao.delete(checkout)
