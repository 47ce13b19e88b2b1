"""Bearer-token authentication and the owner-or-admin rule.

Tokens are HS256 JWTs issued by the identity context. Route handlers chain
``authenticated_user`` and ``admin_user`` as FastAPI dependencies; services
call ``is_owner_or_admin`` before mutating user-owned rows.
"""

import os
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from shared.errors import Forbidden

_bearer = HTTPBearer(auto_error=False)


class Role(Enum):
    USER = "User"
    ADMIN = "Admin"


@dataclass(frozen=True)
class UserAuth:
    """The authenticated caller, as carried by the access token."""

    id: str
    role: str = Role.USER.value
    token: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}" if self.token else ""


def _secret_key() -> str:
    return os.environ.get("JWT_SECRET", "storefront-dev-secret")


def _algorithm() -> str:
    return os.environ.get("JWT_ALGORITHM", "HS256")


def create_access_token(user_id: str, role: str = Role.USER.value, expires_delta: timedelta | None = None) -> str:
    minutes = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=minutes))
    claims = {"sub": str(user_id), "role": role, "exp": expire}
    return jwt.encode(claims, _secret_key(), algorithm=_algorithm())


def decode_access_token(token: str) -> UserAuth:
    """Decode a token into a ``UserAuth``. Raises ``JWTError`` when invalid."""
    payload = jwt.decode(token, _secret_key(), algorithms=[_algorithm()])
    user_id = payload.get("sub")
    if not user_id:
        raise JWTError("Token has no subject")
    return UserAuth(id=str(user_id), role=payload.get("role", Role.USER.value), token=token)


def is_owner_or_admin(resource_user_id, caller_id, caller_role) -> None:
    """Raise ``Forbidden`` unless the caller owns the resource or is an Admin."""
    if str(resource_user_id) == str(caller_id):
        return
    if caller_role == Role.ADMIN.value:
        return
    raise Forbidden("Only the owner or an admin can modify this resource")


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------
def optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> UserAuth | None:
    if credentials is None:
        return None
    try:
        return decode_access_token(credentials.credentials)
    except JWTError:
        return None


def authenticated_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> UserAuth:
    if credentials is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        return decode_access_token(credentials.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Could not validate credentials") from None


def admin_user(user: UserAuth = Depends(authenticated_user)) -> UserAuth:
    if not user.is_admin:
        raise Forbidden("Admin role required")
    return user
