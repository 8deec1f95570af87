"""
Dishka DI Container Setup.

- PrismaProvider maps the repository ports to their Prisma implementations
- HandlerProvider (providers.py) wires the application handlers
- create_container() combines them; call it ONCE at startup (messenger.main)

Flow:
  Container → provides → PrismaChatRepository → to → GetOrCreateChatHandler
                                    ↓
                            uses ChatRepository interface
"""

import logging
from datetime import timedelta
from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma

from messenger.config.settings import Config
from messenger.domain.ports.repositories import (
    ChatRepository,
    MessageRepository,
    UserRepository,
)
from messenger.infrastructure.persistence import (
    PrismaChatRepository,
    PrismaMessageRepository,
    PrismaUserRepository,
)
from messenger.setup.ioc.providers import HandlerProvider

logger = logging.getLogger(__name__)


class PrismaProvider(Provider):
    """Persistence provider backed by PostgreSQL through Prisma."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - disconnected when the container closes
        """
        options = {}
        if Config.DATABASE_URL:
            options["datasource"] = {"url": Config.DATABASE_URL}
        prisma = Prisma(
            connect_timeout=timedelta(seconds=Config.STORE_CONNECT_TIMEOUT_SECONDS),
            **options,
        )
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self, prisma: Prisma) -> ChatRepository:
        return PrismaChatRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)


def create_container() -> AsyncContainer:
    """Create and configure the DI container."""
    return make_async_container(PrismaProvider(), HandlerProvider())
