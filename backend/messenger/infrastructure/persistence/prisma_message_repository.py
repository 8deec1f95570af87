"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id         String   @id @default(uuid())
        chat_id    String
        sender_id  String
        body       String
        created_at DateTime @default(now())

        @@index([chat_id, created_at])
    }

Messages are append-only: save() inserts and never updates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from messenger.domain.entities.message import Message
from messenger.domain.ports.repositories.message_repository import MessageRepository
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.user_id import UserId
from messenger.infrastructure.persistence.store_guard import guarded

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Message as PrismaMessage


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """
        Map Prisma record to domain entity.

        Args:
            record: Prisma Message model instance

        Returns:
            Domain Message entity with value objects
        """
        return Message(
            id=MessageId(record.id),
            chat_id=ChatId(record.chat_id),
            sender_id=UserId(record.sender_id),
            body=record.body,
            created_at=record.created_at,
        )

    async def get_many(self, message_ids: list[MessageId]) -> list[Message]:
        if not message_ids:
            return []
        records = await guarded(
            "message.get_many",
            self._prisma.message.find_many(
                where={"id": {"in": [message_id.value for message_id in message_ids]}}
            ),
        )
        return [self._to_entity(record) for record in records]

    async def get_by_chat(self, chat_id: ChatId) -> list[Message]:
        """
        Get messages for a chat, ordered chronologically (oldest first).

        Args:
            chat_id: ChatId value object

        Returns:
            List of Message entities in chronological order (oldest first)
        """
        records = await guarded(
            "message.get_by_chat",
            self._prisma.message.find_many(
                where={"chat_id": chat_id.value},
                order=[{"created_at": "asc"}, {"id": "asc"}],
            ),
        )
        return [self._to_entity(record) for record in records]

    async def save(self, message: Message) -> None:
        """
        Insert a message.

        Args:
            message: Message entity to persist
        """
        await guarded(
            "message.save",
            self._prisma.message.create(
                data={
                    "id": message.id.value,
                    "chat_id": message.chat_id.value,
                    "sender_id": message.sender_id.value,
                    "body": message.body,
                    "created_at": message.created_at,
                }
            ),
        )
