import os
from datetime import datetime, timedelta, timezone

# Auth settings are read once at import time; set them before importing the app
os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret")
os.environ.setdefault("SERVICE_AUTH_AUDIENCE", "your_service_audience")
os.environ.setdefault("SERVICE_AUTH_ISSUER", "your_service_name")

import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from in_memory_repositories import (
    InMemoryChatRepository,
    InMemoryMessageRepository,
    InMemoryProvider,
    InMemoryStore,
    InMemoryUserRepository,
)
from jwt_generation import generate_jwt_token
from messenger.application.services.chat_summaries import ChatSummaryService
from messenger.domain.entities.user import User
from messenger.domain.value_objects.user_email import UserEmail
from messenger.fastapi_app import create_fastapi_app
from messenger.setup.ioc.providers import HandlerProvider

BASE_TIME = datetime(2025, 1, 27, 12, 0, tzinfo=timezone.utc)


def make_user(store: InMemoryStore, name: str, email: str, minutes: int = 0) -> User:
    user = User.register(
        external_id=f"user_{name.lower()}",
        email=UserEmail(email),
        name=name,
        avatar=f"https://img.example.com/{name.lower()}.png",
    )
    user.created_at = user.updated_at = BASE_TIME + timedelta(minutes=minutes)
    return store.add_user(user)


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def alice(store):
    return make_user(store, "Alice", "alice@x.com", minutes=0)


@pytest.fixture()
def bob(store):
    return make_user(store, "Bob", "bob@x.com", minutes=1)


@pytest.fixture()
def carol(store):
    return make_user(store, "Carol", "carol@x.com", minutes=2)


@pytest.fixture()
def user_repository(store):
    return InMemoryUserRepository(store)


@pytest.fixture()
def chat_repository(store):
    return InMemoryChatRepository(store)


@pytest.fixture()
def message_repository(store):
    return InMemoryMessageRepository(store)


@pytest.fixture()
def summaries(user_repository, message_repository):
    return ChatSummaryService(user_repository, message_repository)


@pytest.fixture()
def app(store):
    """A FastAPI app wired to the in-memory store."""
    container = make_async_container(InMemoryProvider(store), HandlerProvider())
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Build authentication headers for a user."""

    def _headers(user: User) -> dict:
        token = generate_jwt_token(
            sub=user.external_id, email=user.email.value, name=user.name
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers
