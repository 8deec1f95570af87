"""Get User Query."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.user import User
from messenger.domain.exceptions import EntityNotFoundError
from messenger.domain.ports.repositories import UserRepository
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetUserQuery(Query[User]):
    user_id: UserId


class GetUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> User:
        user = await self._user_repository.get_by_id(query.user_id)
        if user is None:
            raise EntityNotFoundError(f"User {query.user_id.value} not found")
        return user
