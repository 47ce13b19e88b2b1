"""User reads."""

from protean.utils.globals import current_domain

from identity.user.user import User


def get_user(user_id: str) -> dict:
    return current_domain.repository_for(User).get(user_id).to_view()
