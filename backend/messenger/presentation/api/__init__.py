"""
API Routers - FastAPI endpoint definitions.
"""

from messenger.presentation.api.chats import router as chats_router
from messenger.presentation.api.messages import router as messages_router
from messenger.presentation.api.users import router as users_router
from messenger.presentation.api.auth import router as auth_router

__all__ = [
    "chats_router",
    "messages_router",
    "users_router",
    "auth_router",
]
