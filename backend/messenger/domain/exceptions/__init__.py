"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from messenger.domain.exceptions.entity_not_found import EntityNotFoundError
from messenger.domain.exceptions.invalid_argument import InvalidArgumentError
from messenger.domain.exceptions.duplicate_chat import DuplicateChatError
from messenger.domain.exceptions.duplicate_user import DuplicateUserError
from messenger.domain.exceptions.store_failure import (
    StoreFailureError,
    StoreUnavailableError,
)

__all__ = [
    "EntityNotFoundError",
    "InvalidArgumentError",
    "DuplicateChatError",
    "DuplicateUserError",
    "StoreFailureError",
    "StoreUnavailableError",
]
