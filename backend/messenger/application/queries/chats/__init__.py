"""Chat-related queries."""

from messenger.application.queries.chats.list_chats import (
    ListChatsQuery,
    ListChatsHandler,
)

__all__ = [
    "ListChatsQuery",
    "ListChatsHandler",
]
