"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py    → UserProfileDTO, UserDTO
- chat.py    → ChatSummaryDTO, LastMessageDTO
- message.py → MessageDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from messenger.application.dto.user import UserProfileDTO, UserDTO
from messenger.application.dto.chat import ChatSummaryDTO, LastMessageDTO
from messenger.application.dto.message import MessageDTO

__all__ = [
    "UserProfileDTO",
    "UserDTO",
    "ChatSummaryDTO",
    "LastMessageDTO",
    "MessageDTO",
]
