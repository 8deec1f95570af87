"""User-related queries."""

from messenger.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)
from messenger.application.queries.users.get_user import (
    GetUserQuery,
    GetUserHandler,
)

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
    "GetUserQuery",
    "GetUserHandler",
]
