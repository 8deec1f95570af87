"""Chat DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional

from messenger.application.dto.user import UserProfileDTO


class LastMessageDTO(BaseModel):
    id: str
    body: str
    sender_id: str
    created_at: datetime


class ChatSummaryDTO(BaseModel):
    """
    A chat as seen by the caller.

    ``participant`` is the other member of the chat, or None when that
    profile can no longer be resolved.
    """

    id: str
    participant: Optional[UserProfileDTO] = None
    last_message: Optional[LastMessageDTO] = None
    last_message_at: datetime
    created_at: datetime
