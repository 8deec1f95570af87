"""
ListMessages Query - Messages of a chat, scoped to its participants.

Membership and existence are checked by one repository call; a chat that
does not exist and a chat the caller is not part of both end in
EntityNotFoundError("Chat not found").
"""

from dataclasses import dataclass
from typing import Optional

from messenger.application.common.identifiers import parse_chat_id
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User
from messenger.domain.exceptions import EntityNotFoundError
from messenger.domain.ports.repositories import (
    ChatRepository,
    MessageRepository,
    UserRepository,
)
from messenger.domain.value_objects.user_id import UserId


@dataclass
class MessageWithSender:
    """A message annotated with its sender's profile (None if the sender is gone)."""

    message: Message
    sender: Optional[User]


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[MessageWithSender]]):
    chat_id: str
    user_id: UserId


class ListMessagesHandler(QueryHandler[list[MessageWithSender]]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
    ):
        self._chat_repository = chat_repository
        self._message_repository = message_repository
        self._user_repository = user_repository

    async def execute(self, query: ListMessagesQuery) -> list[MessageWithSender]:
        """
        Raises:
            InvalidArgumentError: If chat_id is missing or malformed
            EntityNotFoundError: If the chat doesn't exist or the user is not in it
        """
        chat_id = parse_chat_id(query.chat_id)

        chat = await self._chat_repository.get_for_participant(chat_id, query.user_id)
        if chat is None:
            raise EntityNotFoundError("Chat not found")

        messages = await self._message_repository.get_by_chat(chat.id)
        if not messages:
            return []

        senders = await self._user_repository.get_many(
            sorted({message.sender_id for message in messages}, key=str)
        )
        senders_by_id = {sender.id: sender for sender in senders}

        return [
            MessageWithSender(message=message, sender=senders_by_id.get(message.sender_id))
            for message in messages
        ]
