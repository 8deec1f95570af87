"""User DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel


class UserProfileDTO(BaseModel):
    """Public profile shown to other users (chat participant, message sender)."""

    id: str
    name: str
    email: str
    avatar: str = ""


class UserDTO(UserProfileDTO):
    """The caller's own record."""

    created_at: datetime
    updated_at: datetime
