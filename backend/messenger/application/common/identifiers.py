"""Parsing of raw identifiers coming from the outside world."""

from messenger.domain.exceptions import InvalidArgumentError
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.user_id import UserId


def parse_user_id(raw: str | None, label: str = "user") -> UserId:
    if not raw:
        raise InvalidArgumentError(f"{label.capitalize()} ID is required")
    try:
        return UserId(raw)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid {label} ID") from e


def parse_chat_id(raw: str | None) -> ChatId:
    if not raw:
        raise InvalidArgumentError("Chat ID is required")
    try:
        return ChatId(raw)
    except ValueError as e:
        raise InvalidArgumentError("Invalid chat ID") from e
