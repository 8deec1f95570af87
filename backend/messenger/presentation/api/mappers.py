"""Mapping from application results to response DTOs."""

from typing import Optional

from messenger.application.dto import (
    ChatSummaryDTO,
    LastMessageDTO,
    MessageDTO,
    UserDTO,
    UserProfileDTO,
)
from messenger.application.queries.messages import MessageWithSender
from messenger.application.services.chat_summaries import ChatSummary
from messenger.domain.entities.user import User


def to_profile_dto(user: Optional[User]) -> Optional[UserProfileDTO]:
    if user is None:
        return None
    return UserProfileDTO(
        id=user.id.value,
        name=user.name,
        email=user.email.value,
        avatar=user.avatar,
    )


def to_user_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id.value,
        name=user.name,
        email=user.email.value,
        avatar=user.avatar,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def to_chat_summary_dto(summary: ChatSummary) -> ChatSummaryDTO:
    last_message = None
    if summary.last_message is not None:
        last_message = LastMessageDTO(
            id=summary.last_message.id.value,
            body=summary.last_message.body,
            sender_id=summary.last_message.sender_id.value,
            created_at=summary.last_message.created_at,
        )

    return ChatSummaryDTO(
        id=summary.chat.id.value,
        participant=to_profile_dto(summary.participant),
        last_message=last_message,
        last_message_at=summary.chat.last_message_at,
        created_at=summary.chat.created_at,
    )


def to_message_dto(item: MessageWithSender) -> MessageDTO:
    return MessageDTO(
        id=item.message.id.value,
        chat_id=item.message.chat_id.value,
        sender_id=item.message.sender_id.value,
        sender=to_profile_dto(item.sender),
        body=item.message.body,
        created_at=item.message.created_at,
    )
