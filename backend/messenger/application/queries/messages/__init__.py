"""Message-related queries."""

from messenger.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
    MessageWithSender,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
    "MessageWithSender",
]
