"""
Sync User Command.

Creates the local profile for an identity the first time it is verified, and
refreshes name, email and avatar on later syncs.

Concurrency:
    The email check and the first registration are read-then-write. When the
    store rejects the save (DuplicateUserError), the identity is re-read: if
    a concurrent sync registered it meanwhile, that record is updated instead;
    otherwise the email was taken by someone else and the sync fails with
    InvalidArgumentError.
"""

import logging
from dataclasses import dataclass

from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.entities.user import User
from messenger.domain.exceptions import DuplicateUserError, InvalidArgumentError
from messenger.domain.ports.repositories import UserRepository
from messenger.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email is already registered"


@dataclass(frozen=True)
class SyncUserCommand(Command[User]):
    external_id: str
    email: str
    name: str
    avatar: str = ""


class SyncUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: SyncUserCommand) -> User:
        if not command.external_id:
            raise InvalidArgumentError("External identity is required")
        if not command.name or not command.name.strip():
            raise InvalidArgumentError("Name is required")
        try:
            email = UserEmail(command.email)
        except ValueError as e:
            raise InvalidArgumentError("Invalid email") from e

        owner = await self._user_repository.get_by_email(email)
        if owner is not None and owner.external_id != command.external_id:
            raise InvalidArgumentError(EMAIL_TAKEN)

        user = await self._user_repository.get_by_external_id(command.external_id)
        if user is None:
            user = User.register(
                external_id=command.external_id,
                email=email,
                name=command.name,
                avatar=command.avatar,
            )
        else:
            user.update_profile(email=email, name=command.name, avatar=command.avatar)

        try:
            await self._user_repository.save(user)
        except DuplicateUserError as e:
            user = await self._retry_after_conflict(command, email, user, e)
        else:
            logger.info(f"Synced user {user.id}")
        return user

    async def _retry_after_conflict(
        self,
        command: SyncUserCommand,
        email: UserEmail,
        rejected: User,
        error: DuplicateUserError,
    ) -> User:
        existing = await self._user_repository.get_by_external_id(command.external_id)
        if existing is None or existing.id == rejected.id:
            raise InvalidArgumentError(EMAIL_TAKEN) from error

        logger.info(
            f"Identity {command.external_id} registered concurrently, "
            f"updating {existing.id}"
        )
        existing.update_profile(email=email, name=command.name, avatar=command.avatar)
        try:
            await self._user_repository.save(existing)
        except DuplicateUserError as e:
            raise InvalidArgumentError(EMAIL_TAKEN) from e
        return existing
