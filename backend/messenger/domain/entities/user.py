"""
User Entity - A registered participant of the messaging system.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from messenger.domain.value_objects.user_id import UserId
from messenger.domain.value_objects.user_email import UserEmail


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    name: str
    email: UserEmail
    external_id: str
    created_at: datetime
    updated_at: datetime
    # Optional fields (with defaults) - must come last
    avatar: str = ""

    def __post_init__(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValueError("User name cannot be empty")
        if not self.external_id:
            raise ValueError("User external_id cannot be empty")

    @classmethod
    def register(
        cls,
        external_id: str,
        email: UserEmail,
        name: str,
        avatar: str = "",
    ) -> User:
        """Factory method for a user seen for the first time by the identity provider."""
        now = datetime.now(timezone.utc)
        return cls(
            id=UserId(str(uuid4())),
            name=name,
            email=email,
            external_id=external_id,
            created_at=now,
            updated_at=now,
            avatar=avatar or "",
        )

    def update_profile(self, email: UserEmail, name: str, avatar: str = "") -> None:
        self.email = email
        self.name = name.strip() or self.name
        self.avatar = avatar or ""
        self.updated_at = datetime.now(timezone.utc)
