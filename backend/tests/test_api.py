"""
HTTP tests for the FastAPI app wired to in-memory repositories.

Run with: pytest tests/test_api.py -v
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from in_memory_repositories import InMemoryChatRepository, InMemoryUserRepository
from jwt_generation import generate_jwt_token
from messenger.domain.exceptions import StoreFailureError, StoreUnavailableError


def _open_chat(client, headers, participant) -> dict:
    response = client.get(f"/chats/{participant.id.value}", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestHealth:
    def test_root_and_health(self, client):
        assert client.get("/").json() == {"message": "OK"}
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"message": "OK"}

    def test_correlation_id_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_correlation_id_generated(self, client):
        assert client.get("/health").headers.get("X-Correlation-ID")


class TestAuthentication:
    @pytest.mark.parametrize(
        "path", ["/chats", f"/chats/{uuid4()}", f"/messages/{uuid4()}", "/users"]
    )
    def test_missing_token(self, client, path):
        response = client.get(path)
        assert response.status_code in (401, 403)

    def test_invalid_token(self, client):
        response = client.get("/chats", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_wrong_secret(self, client, alice):
        token = generate_jwt_token(sub=alice.external_id, secret="someone-else")
        response = client.get("/chats", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_expired_token(self, client, alice):
        token = generate_jwt_token(
            sub=alice.external_id, expires_in=timedelta(minutes=-5)
        )
        response = client.get("/chats", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"error": "Token has expired"}

    def test_unregistered_subject(self, client, store):
        token = generate_jwt_token(sub="user_nobody")
        response = client.get("/chats", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"error": "User is not registered"}

    def test_message_routes_check_auth_before_chat_id(self, client):
        response = client.post("/messages/not-an-id", json={"body": "hi"})
        assert response.status_code in (401, 403)


class TestChatsApi:
    def test_get_or_create_and_list(self, client, auth_headers, alice, bob):
        chat = _open_chat(client, auth_headers(alice), bob)

        assert chat["participant"]["id"] == bob.id.value
        assert chat["participant"]["name"] == "Bob"
        assert chat["participant"]["email"] == "bob@x.com"
        assert chat["last_message"] is None

        again = _open_chat(client, auth_headers(bob), alice)
        assert again["id"] == chat["id"]
        assert again["participant"]["id"] == alice.id.value

        listed = client.get("/chats", headers=auth_headers(alice)).json()
        assert [c["id"] for c in listed] == [chat["id"]]

    def test_list_empty(self, client, auth_headers, alice):
        response = client.get("/chats", headers=auth_headers(alice))
        assert response.status_code == 200
        assert response.json() == []

    def test_self_chat(self, client, auth_headers, alice, store):
        response = client.get(f"/chats/{alice.id.value}", headers=auth_headers(alice))
        assert response.status_code == 400
        assert "yourself" in response.json()["error"]
        assert store.chats == {}

    def test_malformed_participant_id(self, client, auth_headers, alice):
        response = client.get("/chats/12345", headers=auth_headers(alice))
        assert response.status_code == 400

    def test_unknown_participant(self, client, auth_headers, alice, store):
        response = client.get(f"/chats/{uuid4()}", headers=auth_headers(alice))
        assert response.status_code == 404
        assert store.chats == {}

    def test_list_ordered_by_latest_message(
        self, client, auth_headers, alice, bob, carol
    ):
        with_bob = _open_chat(client, auth_headers(alice), bob)
        with_carol = _open_chat(client, auth_headers(alice), carol)

        client.post(
            f"/messages/{with_bob['id']}",
            json={"body": "ping"},
            headers=auth_headers(bob),
        )

        listed = client.get("/chats", headers=auth_headers(alice)).json()
        assert [c["id"] for c in listed] == [with_bob["id"], with_carol["id"]]
        assert listed[0]["last_message"]["body"] == "ping"
        assert listed[0]["last_message"]["sender_id"] == bob.id.value
        assert listed[1]["last_message"] is None


class TestMessagesApi:
    def test_send_and_list(self, client, auth_headers, alice, bob):
        chat = _open_chat(client, auth_headers(alice), bob)

        first = client.post(
            f"/messages/{chat['id']}", json={"body": "hi bob"}, headers=auth_headers(alice)
        )
        second = client.post(
            f"/messages/{chat['id']}", json={"body": "hi alice"}, headers=auth_headers(bob)
        )
        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["sender"]["name"] == "Alice"

        listed = client.get(f"/messages/{chat['id']}", headers=auth_headers(bob))
        assert listed.status_code == 200
        body = listed.json()
        assert [m["body"] for m in body] == ["hi bob", "hi alice"]
        assert [m["sender"]["id"] for m in body] == [alice.id.value, bob.id.value]
        assert all(m["chat_id"] == chat["id"] for m in body)

    def test_empty_chat(self, client, auth_headers, alice, bob):
        chat = _open_chat(client, auth_headers(alice), bob)
        response = client.get(f"/messages/{chat['id']}", headers=auth_headers(alice))
        assert response.status_code == 200
        assert response.json() == []

    def test_non_member_gets_not_found(self, client, auth_headers, alice, bob, carol):
        chat = _open_chat(client, auth_headers(alice), bob)

        as_carol = client.get(f"/messages/{chat['id']}", headers=auth_headers(carol))
        missing = client.get(f"/messages/{uuid4()}", headers=auth_headers(carol))

        assert as_carol.status_code == missing.status_code == 404
        assert as_carol.json() == missing.json() == {"error": "Chat not found"}

    def test_non_member_cannot_post(self, client, auth_headers, alice, bob, carol, store):
        chat = _open_chat(client, auth_headers(alice), bob)
        response = client.post(
            f"/messages/{chat['id']}", json={"body": "hi"}, headers=auth_headers(carol)
        )
        assert response.status_code == 404
        assert store.messages == {}

    def test_malformed_chat_id(self, client, auth_headers, alice):
        response = client.get("/messages/not-an-id", headers=auth_headers(alice))
        assert response.status_code == 400

    def test_blank_body(self, client, auth_headers, alice, bob):
        chat = _open_chat(client, auth_headers(alice), bob)
        response = client.post(
            f"/messages/{chat['id']}", json={"body": "   "}, headers=auth_headers(alice)
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Message body is required"}

    def test_missing_body_field(self, client, auth_headers, alice, bob):
        chat = _open_chat(client, auth_headers(alice), bob)
        response = client.post(
            f"/messages/{chat['id']}", json={}, headers=auth_headers(alice)
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"


class TestUsersApi:
    def test_lists_others_newest_first(self, client, auth_headers, alice, bob, carol):
        response = client.get("/users", headers=auth_headers(bob))
        assert response.status_code == 200
        users = response.json()
        assert [u["name"] for u in users] == ["Carol", "Alice"]
        assert set(users[0]) == {"id", "name", "email", "avatar"}


class TestAuthApi:
    def test_sync_registers_from_token_claims(self, client, store):
        token = generate_jwt_token(sub="user_dave", email="dave@x.com", name="Dave")
        headers = {"Authorization": f"Bearer {token}"}

        response = client.post("/auth/sync", headers=headers)

        assert response.status_code == 200, response.text
        assert response.json()["email"] == "dave@x.com"
        assert len(store.users) == 1

        me = client.get("/auth/me", headers=headers)
        assert me.status_code == 200
        assert me.json()["id"] == response.json()["id"]

    def test_sync_body_overrides_claims(self, client, auth_headers, alice):
        response = client.post(
            "/auth/sync",
            json={"name": "Alice L.", "avatar": ""},
            headers=auth_headers(alice),
        )
        assert response.status_code == 200
        assert response.json()["id"] == alice.id.value
        assert response.json()["name"] == "Alice L."
        assert response.json()["avatar"] == ""

    def test_sync_email_conflict(self, client, alice):
        token = generate_jwt_token(sub="user_eve", email="alice@x.com", name="Eve")
        response = client.post(
            "/auth/sync", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Email is already registered"}

    def test_sync_without_email(self, client):
        token = generate_jwt_token(sub="user_frank", email=None, name="Frank")
        response = client.post(
            "/auth/sync", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 400


class TestStoreErrors:
    def test_unavailable_store_is_retryable(
        self, client, auth_headers, alice, monkeypatch
    ):
        async def unavailable(self, user_id):
            raise StoreUnavailableError("chat.get_by_user")

        monkeypatch.setattr(InMemoryChatRepository, "get_by_user", unavailable)

        response = client.get("/chats", headers=auth_headers(alice))

        assert response.status_code == 503
        assert response.json() == {
            "error": "Service temporarily unavailable",
            "retryable": True,
        }
        assert response.headers["Retry-After"] == "1"

    def test_store_failure_hides_detail(self, client, auth_headers, alice, monkeypatch):
        async def broken(self, user_id):
            raise StoreFailureError("user.list_excluding", "relation users is missing")

        monkeypatch.setattr(InMemoryUserRepository, "list_excluding", broken)

        response = client.get("/users", headers=auth_headers(alice))

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unexpected_error_is_generic(self, app, auth_headers, alice, monkeypatch):
        async def boom(self, user_id):
            raise RuntimeError("secret stack detail")

        monkeypatch.setattr(InMemoryChatRepository, "get_by_user", boom)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/chats", headers=auth_headers(alice))

        assert response.status_code == 500
        assert "secret" not in response.text
