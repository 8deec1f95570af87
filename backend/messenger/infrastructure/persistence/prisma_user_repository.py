"""
Prisma User Repository Implementation.

Prisma User Model (from schema.prisma):
    model User {
        id          String   @id @default(uuid())
        name        String
        email       String   @unique
        avatar      String   @default("")
        external_id String   @unique
        created_at  DateTime @default(now())
        updated_at  DateTime @updatedAt
    }
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from prisma.errors import UniqueViolationError

from messenger.domain.entities.user import User
from messenger.domain.exceptions import DuplicateUserError
from messenger.domain.ports.repositories.user_repository import UserRepository
from messenger.domain.value_objects.user_email import UserEmail
from messenger.domain.value_objects.user_id import UserId
from messenger.infrastructure.persistence.store_guard import guarded

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import User as PrismaUser

logger = logging.getLogger(__name__)


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            name=record.name,
            email=UserEmail(record.email),
            external_id=record.external_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            avatar=record.avatar or "",
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await guarded(
            "user.get_by_id",
            self._prisma.user.find_unique(where={"id": user_id.value}),
        )
        return self._to_entity(record) if record else None

    async def get_many(self, user_ids: list[UserId]) -> list[User]:
        if not user_ids:
            return []
        records = await guarded(
            "user.get_many",
            self._prisma.user.find_many(
                where={"id": {"in": [user_id.value for user_id in user_ids]}}
            ),
        )
        return [self._to_entity(record) for record in records]

    async def get_by_external_id(self, external_id: str) -> Optional[User]:
        record = await guarded(
            "user.get_by_external_id",
            self._prisma.user.find_unique(where={"external_id": external_id}),
        )
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        record = await guarded(
            "user.get_by_email",
            self._prisma.user.find_unique(where={"email": email.value}),
        )
        return self._to_entity(record) if record else None

    async def list_excluding(self, user_id: UserId) -> list[User]:
        """Get every user except ``user_id``, newest first."""
        records = await guarded(
            "user.list_excluding",
            self._prisma.user.find_many(
                where={"id": {"not": user_id.value}},
                order={"created_at": "desc"},
            ),
        )
        return [self._to_entity(record) for record in records]

    async def save(self, user: User) -> None:
        """Save (create or update) user."""
        try:
            await guarded(
                "user.save",
                self._prisma.user.upsert(
                    where={"id": user.id.value},
                    data={
                        "create": {
                            "id": user.id.value,
                            "name": user.name,
                            "email": user.email.value,
                            "avatar": user.avatar,
                            "external_id": user.external_id,
                            "created_at": user.created_at,
                            "updated_at": user.updated_at,
                        },
                        "update": {
                            "name": user.name,
                            "email": user.email.value,
                            "avatar": user.avatar,
                            "updated_at": user.updated_at,
                        },
                    },
                ),
                passthrough=(UniqueViolationError,),
            )
        except UniqueViolationError as e:
            target = (getattr(e, "meta", None) or {}).get("target")
            field = "external_id" if "external_id" in f"{target} {e}" else "email"
            logger.info(f"[User] unique {field} taken, save of {user.id} rejected")
            raise DuplicateUserError(field) from e
