"""
Auth API Router - keeps the local user record in step with the identity provider.

POST /auth/sync is the one route that accepts a verified token whose subject
has no user record yet; it creates (or refreshes) that record from the token
claims, overridable by the request body.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from messenger.application.commands.users import SyncUserCommand, SyncUserHandler
from messenger.application.dto import UserDTO
from messenger.application.queries.users import GetUserHandler, GetUserQuery
from messenger.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from messenger.presentation.api.mappers import to_user_dto
from messenger.presentation.dependencies.auth import (
    AuthIdentity,
    AuthUser,
    get_current_user,
    get_identity,
)

logger = getLogger(__name__)


class SyncUserRequest(BaseModel):
    """Optional profile fields; token claims are used for anything left out."""

    name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/sync",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def sync_user(
    handler: FromDishka[SyncUserHandler],
    payload: Optional[SyncUserRequest] = None,
    identity: AuthIdentity = Depends(get_identity),
):
    """Create or refresh the caller's profile."""
    payload = payload or SyncUserRequest()
    try:
        command = SyncUserCommand(
            external_id=identity.external_id,
            email=payload.email or identity.email or "",
            name=payload.name or identity.name or "",
            avatar=payload.avatar if payload.avatar is not None else identity.avatar,
        )
        user = await handler.execute(command)
        return to_user_dto(user)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get(
    "/me",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_me(
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        user = await handler.execute(GetUserQuery(user_id=current_user.id))
        return to_user_dto(user)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
