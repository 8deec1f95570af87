"""
Tests for the Prisma repositories against a mocked client.

These check the queries sent to Prisma and the error translation; the
database itself is not involved.

Run with: pytest tests/test_prisma_repositories.py -v
"""

import asyncio
from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from prisma.errors import ClientNotConnectedError, PrismaError, UniqueViolationError

from conftest import BASE_TIME
from messenger.config.settings import Config
from messenger.domain.entities.chat import Chat
from messenger.domain.entities.user import User
from messenger.domain.exceptions import (
    DuplicateChatError,
    DuplicateUserError,
    StoreFailureError,
    StoreUnavailableError,
)
from messenger.domain.value_objects.chat_id import ChatId
from messenger.domain.value_objects.participant_pair import ParticipantPair
from messenger.domain.value_objects.user_email import UserEmail
from messenger.domain.value_objects.user_id import UserId
from messenger.infrastructure.persistence import (
    PrismaChatRepository,
    PrismaMessageRepository,
    PrismaUserRepository,
    guarded,
)

LOWER = "11111111-1111-1111-1111-111111111111"
HIGHER = "99999999-9999-9999-9999-999999999999"


@pytest.fixture()
def prisma():
    client = MagicMock()
    for model in ("user", "chat", "message"):
        delegate = getattr(client, model)
        for method in ("find_unique", "find_first", "find_many", "create", "upsert"):
            setattr(delegate, method, AsyncMock(return_value=None))
        delegate.update_many = AsyncMock(return_value=1)
    return client


def _chat_record(**overrides):
    fields = {
        "id": str(uuid4()),
        "user_lower_id": LOWER,
        "user_higher_id": HIGHER,
        "last_message_id": None,
        "last_message_at": BASE_TIME,
        "created_at": BASE_TIME,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _unique_violation(*fields):
    target = list(fields) or ["user_lower_id", "user_higher_id"]
    return UniqueViolationError(
        {
            "user_facing_error": {
                "error_code": "P2002",
                "message": f"Unique constraint failed on the fields: {target}",
                "meta": {"target": target},
            }
        }
    )


class TestPrismaChatRepository:
    def test_get_by_pair_queries_canonical_columns(self, prisma):
        prisma.chat.find_first.return_value = _chat_record()
        repository = PrismaChatRepository(prisma)

        pair = ParticipantPair.of(UserId(HIGHER), UserId(LOWER))
        chat = asyncio.run(repository.get_by_pair(pair))

        prisma.chat.find_first.assert_awaited_once_with(
            where={"user_lower_id": LOWER, "user_higher_id": HIGHER}
        )
        assert chat.participants == pair
        assert chat.last_message_id is None

    def test_get_for_participant_checks_membership_in_one_query(self, prisma):
        repository = PrismaChatRepository(prisma)
        chat_id = str(uuid4())

        result = asyncio.run(
            repository.get_for_participant(ChatId(chat_id), UserId(LOWER))
        )

        assert result is None
        prisma.chat.find_first.assert_awaited_once_with(
            where={
                "id": chat_id,
                "OR": [{"user_lower_id": LOWER}, {"user_higher_id": LOWER}],
            }
        )

    def test_get_by_user_orders_by_latest_message(self, prisma):
        prisma.chat.find_many.return_value = [_chat_record(), _chat_record()]
        repository = PrismaChatRepository(prisma)

        chats = asyncio.run(repository.get_by_user(UserId(HIGHER)))

        assert len(chats) == 2
        _, kwargs = prisma.chat.find_many.call_args
        assert kwargs["order"] == [{"last_message_at": "desc"}, {"created_at": "desc"}]

    def test_create_translates_unique_violation(self, prisma):
        prisma.chat.create.side_effect = _unique_violation()
        repository = PrismaChatRepository(prisma)
        chat = Chat.start(ParticipantPair.of(UserId(LOWER), UserId(HIGHER)))

        with pytest.raises(DuplicateChatError) as exc_info:
            asyncio.run(repository.create(chat))

        assert exc_info.value.pair_key == f"{LOWER}:{HIGHER}"
        _, kwargs = prisma.chat.create.call_args
        assert kwargs["data"]["user_lower_id"] == LOWER
        assert kwargs["data"]["user_higher_id"] == HIGHER

    def test_save_is_conditional_on_stored_pointer(self, prisma):
        repository = PrismaChatRepository(prisma)
        chat = Chat.start(ParticipantPair.of(UserId(LOWER), UserId(HIGHER)))

        assert asyncio.run(repository.save(chat)) is True

        _, kwargs = prisma.chat.update_many.call_args
        assert kwargs["where"] == {
            "id": chat.id.value,
            "OR": [
                {"last_message_id": None},
                {"last_message_at": {"lte": chat.last_message_at}},
            ],
        }
        assert kwargs["data"]["last_message_at"] == chat.last_message_at

    def test_save_reports_newer_stored_pointer(self, prisma):
        prisma.chat.update_many.return_value = 0
        repository = PrismaChatRepository(prisma)
        chat = Chat.start(ParticipantPair.of(UserId(LOWER), UserId(HIGHER)))

        assert asyncio.run(repository.save(chat)) is False

class TestPrismaMessageRepository:
    def test_get_by_chat_oldest_first(self, prisma):
        chat_id = str(uuid4())
        prisma.message.find_many.return_value = [
            SimpleNamespace(
                id=str(uuid4()),
                chat_id=chat_id,
                sender_id=LOWER,
                body=body,
                created_at=BASE_TIME + timedelta(minutes=minute),
            )
            for minute, body in enumerate(["one", "two"])
        ]
        repository = PrismaMessageRepository(prisma)

        messages = asyncio.run(repository.get_by_chat(ChatId(chat_id)))

        assert [m.body for m in messages] == ["one", "two"]
        prisma.message.find_many.assert_awaited_once_with(
            where={"chat_id": chat_id},
            order=[{"created_at": "asc"}, {"id": "asc"}],
        )

    def test_get_many_skips_query_for_no_ids(self, prisma):
        repository = PrismaMessageRepository(prisma)

        assert asyncio.run(repository.get_many([])) == []
        prisma.message.find_many.assert_not_awaited()


class TestPrismaUserRepository:
    def test_list_excluding(self, prisma):
        prisma.user.find_many.return_value = [
            SimpleNamespace(
                id=HIGHER,
                name="Bob",
                email="bob@x.com",
                avatar=None,
                external_id="user_bob",
                created_at=BASE_TIME,
                updated_at=BASE_TIME,
            )
        ]
        repository = PrismaUserRepository(prisma)

        users = asyncio.run(repository.list_excluding(UserId(LOWER)))

        assert [u.name for u in users] == ["Bob"]
        assert users[0].avatar == ""
        prisma.user.find_many.assert_awaited_once_with(
            where={"id": {"not": LOWER}},
            order={"created_at": "desc"},
        )

    @pytest.mark.parametrize("field", ["email", "external_id"])
    def test_save_translates_unique_violation(self, prisma, field):
        prisma.user.upsert.side_effect = _unique_violation(field)
        repository = PrismaUserRepository(prisma)
        user = User.register(
            external_id="user_dave", email=UserEmail("dave@x.com"), name="Dave"
        )

        with pytest.raises(DuplicateUserError) as exc_info:
            asyncio.run(repository.save(user))

        assert exc_info.value.field == field


class TestGuarded:
    def test_timeout_is_unavailable(self, monkeypatch):
        monkeypatch.setattr(Config, "STORE_TIMEOUT_SECONDS", 0.01)

        with pytest.raises(StoreUnavailableError) as exc_info:
            asyncio.run(guarded("chat.get_by_user", asyncio.sleep(1)))

        assert exc_info.value.retryable is True

    def test_lost_connection_is_unavailable(self):
        async def disconnected():
            raise ClientNotConnectedError()

        with pytest.raises(StoreUnavailableError):
            asyncio.run(guarded("user.get_by_id", disconnected()))

    def test_other_prisma_errors_are_failures(self):
        async def failing():
            raise PrismaError("relation does not exist")

        with pytest.raises(StoreFailureError) as exc_info:
            asyncio.run(guarded("message.save", failing()))

        assert not isinstance(exc_info.value, StoreUnavailableError)
        assert exc_info.value.retryable is False
        assert "relation" not in str(exc_info.value)

    def test_passthrough_errors_reach_caller(self):
        async def violating():
            raise _unique_violation()

        with pytest.raises(UniqueViolationError):
            asyncio.run(
                guarded("chat.create", violating(), passthrough=(UniqueViolationError,))
            )

    def test_result_returned(self):
        async def value():
            return 42

        assert asyncio.run(guarded("noop", value(), timeout=1)) == 42
