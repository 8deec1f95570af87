"""Message DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional

from messenger.application.dto.user import UserProfileDTO


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    chat_id: str
    sender_id: str
    sender: Optional[UserProfileDTO] = None
    body: str
    created_at: datetime
