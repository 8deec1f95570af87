"""
Send Message Command.

Appends a message to a chat the sender takes part in and moves the chat's
last-message pointer. The pointer write is conditional in the store, so
overlapping sends leave it on the newest message. A sender outside the chat
gets the same "Chat not found" as a chat that does not exist.
"""

import logging
from dataclasses import dataclass

from messenger.application.common.identifiers import parse_chat_id
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.queries.messages.list_messages import MessageWithSender
from messenger.domain.entities.message import Message
from messenger.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from messenger.domain.ports.repositories import (
    ChatRepository,
    MessageRepository,
    UserRepository,
)
from messenger.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[MessageWithSender]):
    chat_id: str
    sender_id: UserId
    body: str


class SendMessageHandler(CommandHandler[MessageWithSender]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        max_body_length: int,
    ):
        self._chat_repository = chat_repository
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._max_body_length = max_body_length

    async def execute(self, command: SendMessageCommand) -> MessageWithSender:
        chat_id = parse_chat_id(command.chat_id)

        body = (command.body or "").strip()
        if not body:
            raise InvalidArgumentError("Message body is required")
        if len(body) > self._max_body_length:
            raise InvalidArgumentError(
                f"Message body cannot exceed {self._max_body_length} characters"
            )

        chat = await self._chat_repository.get_for_participant(
            chat_id, command.sender_id
        )
        if chat is None:
            raise EntityNotFoundError("Chat not found")

        message = Message.create(chat_id=chat.id, sender_id=command.sender_id, body=body)
        await self._message_repository.save(message)

        chat.record_message(message)
        if not await self._chat_repository.save(chat):
            logger.debug(f"Chat {chat.id} already points past message {message.id}")

        sender = await self._user_repository.get_by_id(command.sender_id)
        logger.debug(f"Message {message.id} appended to chat {chat.id}")
        return MessageWithSender(message=message, sender=sender)
