"""
Prisma Chat Repository Implementation.

Prisma Chat Model (from schema.prisma):
    model Chat {
        id              String   @id @default(uuid())
        user_lower_id   String
        user_higher_id  String
        last_message_id String?
        last_message_at DateTime @default(now())
        created_at      DateTime @default(now())

        @@unique([user_lower_id, user_higher_id])
    }

Pair uniqueness:
- Participants are stored in canonical order (lower id first), so the
  compound unique index covers the unordered pair.
- A second insert for the same pair fails with UniqueViolationError, which
  is reported to the application layer as DuplicateChatError.
- Two columns means a chat always has exactly two participants.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from prisma.errors import UniqueViolationError

from messenger.domain.entities.chat import Chat
from messenger.domain.exceptions import DuplicateChatError
from messenger.domain.ports.repositories.chat_repository import ChatRepository
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.participant_pair import ParticipantPair
from messenger.domain.value_objects.user_id import UserId
from messenger.infrastructure.persistence.store_guard import guarded

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Chat as PrismaChat

logger = logging.getLogger(__name__)


def _membership_filter(user_id: UserId) -> list[dict]:
    return [
        {"user_lower_id": user_id.value},
        {"user_higher_id": user_id.value},
    ]


class PrismaChatRepository(ChatRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaChat) -> Chat:
        """Map Prisma record to domain entity."""
        return Chat(
            id=ChatId(record.id),
            participants=ParticipantPair.of(
                UserId(record.user_lower_id), UserId(record.user_higher_id)
            ),
            last_message_at=record.last_message_at,
            created_at=record.created_at,
            last_message_id=(
                MessageId(record.last_message_id) if record.last_message_id else None
            ),
        )

    async def get_by_pair(self, participants: ParticipantPair) -> Optional[Chat]:
        record = await guarded(
            "chat.get_by_pair",
            self._prisma.chat.find_first(
                where={
                    "user_lower_id": participants.user_lower.value,
                    "user_higher_id": participants.user_higher.value,
                }
            ),
        )
        return self._to_entity(record) if record else None

    async def get_for_participant(
        self, chat_id: ChatId, user_id: UserId
    ) -> Optional[Chat]:
        """Single query: the chat must exist AND include the user."""
        record = await guarded(
            "chat.get_for_participant",
            self._prisma.chat.find_first(
                where={"id": chat_id.value, "OR": _membership_filter(user_id)}
            ),
        )
        return self._to_entity(record) if record else None

    async def get_by_user(self, user_id: UserId) -> list[Chat]:
        """Get chats for user, ordered by last_message_at desc."""
        records = await guarded(
            "chat.get_by_user",
            self._prisma.chat.find_many(
                where={"OR": _membership_filter(user_id)},
                order=[{"last_message_at": "desc"}, {"created_at": "desc"}],
            ),
        )
        return [self._to_entity(record) for record in records]

    async def create(self, chat: Chat) -> None:
        try:
            await guarded(
                "chat.create",
                self._prisma.chat.create(
                    data={
                        "id": chat.id.value,
                        "user_lower_id": chat.participants.user_lower.value,
                        "user_higher_id": chat.participants.user_higher.value,
                        "last_message_at": chat.last_message_at,
                        "created_at": chat.created_at,
                    }
                ),
                passthrough=(UniqueViolationError,),
            )
        except UniqueViolationError as e:
            logger.info(f"[Chat] duplicate insert for pair {chat.participants}")
            raise DuplicateChatError(str(chat.participants)) from e

    async def save(self, chat: Chat) -> bool:
        """Conditional update: a stored pointer newer than ours is kept."""
        updated = await guarded(
            "chat.save",
            self._prisma.chat.update_many(
                where={
                    "id": chat.id.value,
                    "OR": [
                        {"last_message_id": None},
                        {"last_message_at": {"lte": chat.last_message_at}},
                    ],
                },
                data={
                    "last_message_id": (
                        chat.last_message_id.value if chat.last_message_id else None
                    ),
                    "last_message_at": chat.last_message_at,
                },
            ),
        )
        return updated > 0
