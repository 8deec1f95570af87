"""Chat commands."""

from .get_or_create_chat import GetOrCreateChatCommand, GetOrCreateChatHandler

__all__ = [
    "GetOrCreateChatCommand",
    "GetOrCreateChatHandler",
]
