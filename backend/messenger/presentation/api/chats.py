"""
Chats API Router - list chats and get-or-create a chat with another user.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
                                        ↓
  HTTP Response ← Router ← ChatSummary ←
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject

from messenger.application.commands.chats import (
    GetOrCreateChatCommand,
    GetOrCreateChatHandler,
)
from messenger.application.dto import ChatSummaryDTO
from messenger.application.queries.chats import ListChatsHandler, ListChatsQuery
from messenger.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from messenger.presentation.api.mappers import to_chat_summary_dto
from messenger.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get(
    "",
    response_model=list[ChatSummaryDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_chats(
    handler: FromDishka[ListChatsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's chats, most recent conversation first."""
    summaries = await handler.execute(ListChatsQuery(user_id=current_user.id))
    return [to_chat_summary_dto(summary) for summary in summaries]


@router.get(
    "/{participant_id}",
    response_model=ChatSummaryDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_or_create_chat(
    participant_id: str,
    handler: FromDishka[GetOrCreateChatHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Get the chat with ``participant_id``, creating it on first request.

    Response:
    {
        "id": "uuid",
        "participant": {"id": "uuid", "name": "...", "email": "...", "avatar": "..."},
        "last_message": null,
        "last_message_at": "2025-01-27T12:00:00Z",
        "created_at": "2025-01-27T12:00:00Z"
    }
    """
    try:
        command = GetOrCreateChatCommand(
            user_id=current_user.id,
            participant_id=participant_id,
        )
        summary = await handler.execute(command)
        return to_chat_summary_dto(summary)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
