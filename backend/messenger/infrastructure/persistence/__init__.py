"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from messenger.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from messenger.infrastructure.persistence.prisma_chat_repository import (
    PrismaChatRepository,
)
from messenger.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from messenger.infrastructure.persistence.store_guard import guarded

__all__ = [
    "PrismaUserRepository",
    "PrismaChatRepository",
    "PrismaMessageRepository",
    "guarded",
]
