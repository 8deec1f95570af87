"""Users API Router - directory of other users."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from messenger.application.dto import UserProfileDTO
from messenger.application.queries.users import ListUsersHandler, ListUsersQuery
from messenger.presentation.api.mappers import to_profile_dto
from messenger.presentation.dependencies.auth import AuthUser, get_current_user

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserProfileDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Every user except the caller, newest first."""
    users = await handler.execute(ListUsersQuery(excluding=current_user.id))
    return [to_profile_dto(user) for user in users]
