"""
User Repository Port - Interface for user persistence.
Implementation: messenger/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from messenger.domain.entities.user import User
from messenger.domain.value_objects.user_email import UserEmail
from messenger.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_many(self, user_ids: list[UserId]) -> list[User]:
        """Fetch the users that exist among ``user_ids`` (order not guaranteed)."""
        ...

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[User]: ...

    @abstractmethod
    async def list_excluding(self, user_id: UserId) -> list[User]:
        """All users except ``user_id``, newest first."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Create or update. Raises DuplicateUserError on a taken email or external id."""
        ...
