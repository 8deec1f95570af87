"""
Chat summaries - how a chat looks from one participant's side.

A summary pairs a chat with the *other* participant's profile and the chat's
last message. Profiles and last messages are loaded in one batch per call,
not once per chat.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from messenger.domain.entities.chat import Chat
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User
from messenger.domain.ports.repositories import MessageRepository, UserRepository
from messenger.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class ChatSummary:
    chat: Chat
    participant: Optional[User]
    last_message: Optional[Message]


class ChatSummaryService:
    def __init__(
        self,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ):
        self._user_repository = user_repository
        self._message_repository = message_repository

    async def summarize(self, chats: list[Chat], viewer: UserId) -> list[ChatSummary]:
        """Build summaries for ``chats`` as seen by ``viewer``, keeping input order."""
        if not chats:
            return []

        other_ids = {
            other
            for other in (chat.other_participant(viewer) for chat in chats)
            if other is not None
        }
        users = await self._user_repository.get_many(sorted(other_ids, key=str))
        users_by_id = {user.id: user for user in users}

        last_message_ids = [
            chat.last_message_id for chat in chats if chat.last_message_id is not None
        ]
        messages_by_id: dict = {}
        if last_message_ids:
            messages = await self._message_repository.get_many(last_message_ids)
            messages_by_id = {message.id: message for message in messages}

        summaries = []
        for chat in chats:
            other = chat.other_participant(viewer)
            participant = users_by_id.get(other) if other else None
            if participant is None:
                logger.debug(f"Chat {chat.id} has no resolvable participant for {viewer}")
            last_message = (
                messages_by_id.get(chat.last_message_id)
                if chat.last_message_id
                else None
            )
            summaries.append(
                ChatSummary(
                    chat=chat,
                    participant=participant,
                    last_message=last_message,
                )
            )
        return summaries

    async def summarize_one(self, chat: Chat, viewer: UserId) -> ChatSummary:
        summaries = await self.summarize([chat], viewer)
        return summaries[0]
