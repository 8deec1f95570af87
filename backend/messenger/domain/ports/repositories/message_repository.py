"""
Message Repository Port - Interface for message persistence.
Implementation: messenger/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from messenger.domain.entities.message import Message
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId


class MessageRepository(ABC):
    @abstractmethod
    async def get_many(self, message_ids: list[MessageId]) -> list[Message]: ...

    @abstractmethod
    async def get_by_chat(self, chat_id: ChatId) -> list[Message]:
        """All messages of a chat, oldest first."""
        ...

    @abstractmethod
    async def save(self, message: Message) -> None: ...
