"""
Messages API Router - read and append messages of a chat.

Only participants see a chat. Everyone else gets 404 "Chat not found",
the same answer as for a chat that does not exist.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from messenger.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from messenger.application.dto import MessageDTO
from messenger.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from messenger.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from messenger.presentation.api.mappers import to_message_dto
from messenger.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class SendMessageRequest(BaseModel):
    """Request body for sending a message."""

    body: str


router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "/{chat_id}",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    chat_id: str,
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Messages of the chat, oldest first, each with its sender's profile."""
    try:
        query = ListMessagesQuery(chat_id=chat_id, user_id=current_user.id)
        items = await handler.execute(query)
        return [to_message_dto(item) for item in items]
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post(
    "/{chat_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    chat_id: str,
    payload: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Append a message to the chat as the caller."""
    try:
        command = SendMessageCommand(
            chat_id=chat_id,
            sender_id=current_user.id,
            body=payload.body,
        )
        item = await handler.execute(command)
        return to_message_dto(item)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
