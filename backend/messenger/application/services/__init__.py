"""Application services shared by several handlers."""

from messenger.application.services.chat_summaries import (
    ChatSummary,
    ChatSummaryService,
)

__all__ = [
    "ChatSummary",
    "ChatSummaryService",
]
