"""List Chats Query."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.application.services.chat_summaries import (
    ChatSummary,
    ChatSummaryService,
)
from messenger.domain.ports.repositories import ChatRepository
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListChatsQuery(Query[list[ChatSummary]]):
    user_id: UserId


class ListChatsHandler(QueryHandler[list[ChatSummary]]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        summaries: ChatSummaryService,
    ):
        self._chat_repository = chat_repository
        self._summaries = summaries

    async def execute(self, query: ListChatsQuery) -> list[ChatSummary]:
        chats = await self._chat_repository.get_by_user(query.user_id)
        return await self._summaries.summarize(chats, viewer=query.user_id)
