"""
Message Entity - A single message in a chat.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    chat_id: ChatId
    sender_id: UserId
    body: str
    created_at: datetime

    def __post_init__(self):
        if not self.body or not self.body.strip():
            raise ValueError("Message body cannot be empty")

    @classmethod
    def create(cls, chat_id: ChatId, sender_id: UserId, body: str) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            chat_id=chat_id,
            sender_id=sender_id,
            body=body.strip(),
            created_at=datetime.now(timezone.utc),
        )
