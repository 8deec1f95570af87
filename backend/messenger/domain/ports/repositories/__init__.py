"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from messenger.domain.ports.repositories.user_repository import UserRepository
from messenger.domain.ports.repositories.chat_repository import ChatRepository
from messenger.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "ChatRepository",
    "MessageRepository",
]
