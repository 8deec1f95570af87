"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from messenger.domain.value_objects.user_id import UserId
from messenger.domain.value_objects.user_email import UserEmail
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.message_id import MessageId
from messenger.domain.value_objects.participant_pair import ParticipantPair

__all__ = [
    "UserId",
    "UserEmail",
    "ChatId",
    "MessageId",
    "ParticipantPair",
]
