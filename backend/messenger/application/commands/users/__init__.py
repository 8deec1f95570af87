"""User commands."""

from .sync_user import SyncUserCommand, SyncUserHandler

__all__ = [
    "SyncUserCommand",
    "SyncUserHandler",
]
