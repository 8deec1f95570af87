"""
Dishka providers for the application layer.

HandlerProvider only depends on the repository ports, so it can be combined
with any persistence provider:

    make_async_container(PrismaProvider(), HandlerProvider())     # production
    make_async_container(InMemoryProvider(), HandlerProvider())   # tests

Scope.REQUEST = new instance per HTTP request.
"""

from dishka import Provider, Scope, provide

from messenger.application.commands.chats import GetOrCreateChatHandler
from messenger.application.commands.messages import SendMessageHandler
from messenger.application.commands.users import SyncUserHandler
from messenger.application.queries.chats import ListChatsHandler
from messenger.application.queries.messages import ListMessagesHandler
from messenger.application.queries.users import GetUserHandler, ListUsersHandler
from messenger.application.services.chat_summaries import ChatSummaryService
from messenger.config.settings import Config
from messenger.domain.ports.repositories import (
    ChatRepository,
    MessageRepository,
    UserRepository,
)


class HandlerProvider(Provider):
    """
    Application dependency provider.

    Parameters ask for the abstract repositories; Dishka resolves them from
    whichever persistence provider the container was built with.
    """

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_summary_service(
        self,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ) -> ChatSummaryService:
        return ChatSummaryService(user_repository, message_repository)

    # ==================== CHAT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_chats_handler(
        self,
        chat_repository: ChatRepository,
        summaries: ChatSummaryService,
    ) -> ListChatsHandler:
        return ListChatsHandler(chat_repository, summaries)

    @provide(scope=Scope.REQUEST)
    def get_get_or_create_chat_handler(
        self,
        chat_repository: ChatRepository,
        user_repository: UserRepository,
        summaries: ChatSummaryService,
    ) -> GetOrCreateChatHandler:
        return GetOrCreateChatHandler(chat_repository, user_repository, summaries)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
    ) -> ListMessagesHandler:
        return ListMessagesHandler(chat_repository, message_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            chat_repository=chat_repository,
            message_repository=message_repository,
            user_repository=user_repository,
            max_body_length=Config.MESSAGE_BODY_MAX_LENGTH,
        )

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(
        self, user_repository: UserRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_repository: UserRepository) -> GetUserHandler:
        return GetUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_sync_user_handler(self, user_repository: UserRepository) -> SyncUserHandler:
        return SyncUserHandler(user_repository)
