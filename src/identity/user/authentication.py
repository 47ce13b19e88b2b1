"""Credential checks and token issue."""

from identity.domain import logger
from identity.user.user import User
from shared.auth import create_access_token
from shared.listing import first_by


class InvalidCredentials(Exception):
    """Email unknown or password mismatch."""


def login(email: str, password: str) -> dict:
    """Exchange credentials for a bearer token carrying the user's id and role."""
    user = first_by(User, email=email.strip().lower())
    if user is None or not user.check_password(password):
        logger.info("login_failed", email=email)
        raise InvalidCredentials()

    token = create_access_token(str(user.id), user.role)
    return {"access_token": token, "token_type": "bearer", "user": user.to_view()}
