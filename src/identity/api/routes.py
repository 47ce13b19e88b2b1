"""FastAPI endpoints for the Identity domain."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from identity.api.schemas import (
    ChangeRoleRequest,
    IdResponse,
    LoginRequest,
    RegisterUserRequest,
    StatusResponse,
    TokenResponse,
)
from identity.user.authentication import InvalidCredentials, login
from identity.user.queries import get_user
from identity.user.registration import ChangeUserRole, RegisterUser, VerifyUser
from shared.auth import UserAuth, admin_user, authenticated_user, is_owner_or_admin

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, response_model=IdResponse)
async def register_user(body: RegisterUserRequest) -> IdResponse:
    command = RegisterUser(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@router.post("/login", response_model=TokenResponse)
async def login_user(body: LoginRequest) -> TokenResponse:
    try:
        return TokenResponse(**login(body.email, body.password))
    except InvalidCredentials:
        raise HTTPException(status_code=401, detail="Incorrect email or password") from None


@router.get("/{user_id}")
async def get_single_user(user_id: str, user: Annotated[UserAuth, Depends(authenticated_user)]) -> dict:
    """Owner or admin only. The reviews service calls this with the end user's token."""
    is_owner_or_admin(user_id, user.id, user.role)
    return get_user(user_id)


@router.put("/{user_id}/verify", response_model=StatusResponse, dependencies=[Depends(admin_user)])
async def verify_user(user_id: str) -> StatusResponse:
    current_domain.process(VerifyUser(user_id=user_id), asynchronous=False)
    return StatusResponse()


@router.put("/{user_id}/role", response_model=StatusResponse, dependencies=[Depends(admin_user)])
async def change_user_role(user_id: str, body: ChangeRoleRequest) -> StatusResponse:
    current_domain.process(ChangeUserRole(user_id=user_id, role=body.role), asynchronous=False)
    return StatusResponse()
