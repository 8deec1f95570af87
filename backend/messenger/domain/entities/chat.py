"""
Chat Entity - A direct conversation between exactly two users.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from messenger.domain.entities.message import Message
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.participant_pair import ParticipantPair
from messenger.domain.value_objects.user_id import UserId


@dataclass
class Chat:
    id: ChatId
    participants: ParticipantPair
    last_message_at: datetime
    created_at: datetime
    last_message_id: Optional[MessageId] = None

    @classmethod
    def start(cls, participants: ParticipantPair) -> Chat:
        """Factory method for a new, empty chat."""
        now = datetime.now(timezone.utc)
        return cls(
            id=ChatId(str(uuid4())),
            participants=participants,
            last_message_at=now,
            created_at=now,
        )

    def has_participant(self, user_id: UserId) -> bool:
        return self.participants.includes(user_id)

    def other_participant(self, viewer: UserId) -> Optional[UserId]:
        return self.participants.other(viewer)

    def record_message(self, message: Message) -> None:
        """Move the last-message pointer to ``message``."""
        if message.chat_id != self.id:
            raise ValueError("Message does not belong to this chat")
        if self.last_message_id is not None and message.created_at < self.last_message_at:
            return  # never move the pointer back to an older message
        self.last_message_id = message.id
        self.last_message_at = message.created_at
