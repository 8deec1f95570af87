"""Shared application building blocks."""

from messenger.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)
from messenger.application.common.identifiers import parse_chat_id, parse_user_id

__all__ = [
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "parse_chat_id",
    "parse_user_id",
]
