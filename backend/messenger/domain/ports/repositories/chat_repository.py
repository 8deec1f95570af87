"""
Chat Repository Port - Interface for chat persistence.
Implementation: messenger/infrastructure/persistence/prisma_chat_repository.py

Implementations must enforce at most one chat per ParticipantPair at the
storage level: ``create`` raises DuplicateChatError when the pair is taken.
"""

from abc import ABC, abstractmethod
from typing import Optional
from messenger.domain.entities.chat import Chat
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.participant_pair import ParticipantPair
from messenger.domain.value_objects.user_id import UserId


class ChatRepository(ABC):
    @abstractmethod
    async def get_by_pair(self, participants: ParticipantPair) -> Optional[Chat]: ...

    @abstractmethod
    async def get_for_participant(
        self, chat_id: ChatId, user_id: UserId
    ) -> Optional[Chat]:
        """Return the chat only if ``user_id`` is one of its participants."""
        ...

    @abstractmethod
    async def get_by_user(self, user_id: UserId) -> list[Chat]:
        """Chats the user takes part in, most recent activity first."""
        ...

    @abstractmethod
    async def create(self, chat: Chat) -> None:
        """Insert a new chat. Raises DuplicateChatError if the pair exists."""
        ...

    @abstractmethod
    async def save(self, chat: Chat) -> bool:
        """
        Persist the last-message pointer of an existing chat.

        The write only applies while the stored pointer is unset or not newer
        than ``chat.last_message_at``; concurrent senders cannot move it back.
        Returns False when a newer pointer was already stored.
        """
        ...
