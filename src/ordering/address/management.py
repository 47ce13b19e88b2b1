"""Address management — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from ordering.address.address import Address
from ordering.domain import ordering
from shared.auth import Role, is_owner_or_admin


@ordering.command(part_of="Address")
class CreateAddress:
    user_id = Identifier(required=True)
    receiver_name = String(required=True, max_length=150)
    receiver_phone = String(required=True, max_length=30)
    address = String(required=True, max_length=500)
    room_or_office = String(max_length=50)
    door = String(max_length=50)
    floor = String(max_length=20)
    ring_bell = Boolean(default=False)
    zip_code = String(max_length=20)


@ordering.command(part_of="Address")
class UpdateAddress:
    address_id = Identifier(required=True)
    receiver_name = String(max_length=150)
    receiver_phone = String(max_length=30)
    address = String(max_length=500)
    room_or_office = String(max_length=50)
    door = String(max_length=50)
    floor = String(max_length=20)
    ring_bell = Boolean()
    zip_code = String(max_length=20)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command(part_of="Address")
class RemoveAddress:
    address_id = Identifier(required=True)
    requested_by = Identifier(required=True)
    requester_role = String(default=Role.USER.value)


@ordering.command_handler(part_of=Address)
class ManageAddressHandler:
    @handle(CreateAddress)
    def create_address(self, command):
        address = Address(
            user_id=command.user_id,
            receiver_name=command.receiver_name,
            receiver_phone=command.receiver_phone,
            address=command.address,
            room_or_office=command.room_or_office,
            door=command.door,
            floor=command.floor,
            ring_bell=bool(command.ring_bell),
            zip_code=command.zip_code,
        )
        current_domain.repository_for(Address).add(address)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(Address)
        address = repo.get(command.address_id)
        is_owner_or_admin(address.user_id, command.requested_by, command.requester_role)

        address.update_details(
            receiver_name=command.receiver_name,
            receiver_phone=command.receiver_phone,
            address=command.address,
            room_or_office=command.room_or_office,
            door=command.door,
            floor=command.floor,
            ring_bell=command.ring_bell,
            zip_code=command.zip_code,
        )
        repo.add(address)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(Address)
        address = repo.get(command.address_id)
        is_owner_or_admin(address.user_id, command.requested_by, command.requester_role)
        repo._dao.delete(address)
