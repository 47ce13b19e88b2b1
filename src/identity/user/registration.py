"""User registration and administration — commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity, logger
from identity.user.user import User
from shared.auth import Role
from shared.listing import first_by


@identity.command(part_of="User")
class RegisterUser:
    """Create a new account. Passwords arrive in plain text and are hashed on the aggregate."""

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, min_length=8, max_length=128)
    role: String(choices=Role, default=Role.USER.value)


@identity.command(part_of="User")
class VerifyUser:
    user_id: Identifier(required=True)


@identity.command(part_of="User")
class ChangeUserRole:
    user_id: Identifier(required=True)
    role: String(required=True, choices=Role)


@identity.command_handler(part_of=User)
class ManageUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        email = command.email.strip().lower()
        if first_by(User, email=email) is not None:
            raise ValidationError({"email": [f"{email} is already registered"]})

        user = User.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=email,
            password=command.password,
            role=command.role or Role.USER.value,
        )
        current_domain.repository_for(User).add(user)
        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return str(user.id)

    @handle(VerifyUser)
    def verify_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.verify()
        repo.add(user)

    @handle(ChangeUserRole)
    def change_role(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.change_role(command.role)
        repo.add(user)
