"""List Users Query."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.user import User
from messenger.domain.ports.repositories import UserRepository
from messenger.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    excluding: UserId


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[User]:
        users = await self._user_repository.list_excluding(query.excluding)
        return [user for user in users if user.id != query.excluding]
