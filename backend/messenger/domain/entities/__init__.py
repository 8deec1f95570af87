"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from messenger.domain.entities.user import User
from messenger.domain.entities.message import Message
from messenger.domain.entities.chat import Chat

__all__ = [
    "User",
    "Message",
    "Chat",
]
