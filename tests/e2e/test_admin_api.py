"""End-to-end tests for the moderation endpoints."""

from datetime import datetime, timezone

import pytest

from board.adapter.store import MockStoreIdentityProvider
from board.domain.model import Comment, Thread
from board.domain.value import CommentId, ThreadId
from board.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_client_fixture, resolve, sign_in

client = create_client_fixture()

NOW = datetime(2025, 4, 1, tzinfo=timezone.utc)


@pytest.fixture
def store(client) -> InMemoryStore:
    store = resolve(client, InMemoryStore)
    store.threads[5] = Thread(id=ThreadId(5), title="T", body="B", created_at=NOW)
    store.comments[8] = Comment(
        id=CommentId(8), thread_id=ThreadId(5), body="C", created_at=NOW
    )
    return store


@pytest.fixture
def identity_provider(client) -> MockStoreIdentityProvider:
    return resolve(client, MockStoreIdentityProvider)


@pytest.fixture
def admin_headers(store, identity_provider) -> dict[str, str]:
    user, headers = sign_in(identity_provider)
    store.admins.add(user.id)
    return headers


class TestRemoveThreadEndpoint:
    """End-to-end tests for POST /api/admin/threads/remove."""

    def test_non_admin_is_forbidden(self, client, store, identity_provider):
        # Arrange
        _, headers = sign_in(identity_provider)

        # Act
        response = client.post(
            "/api/admin/threads/remove", json={"threadId": 5}, headers=headers
        )

        # Assert
        assert response.status_code == 403
        assert response.json() == {
            "error": "You are not allowed to perform this action."
        }
        assert not store.threads[5].is_deleted

    def test_admin_removes_thread(self, client, store, admin_headers):
        response = client.post(
            "/api/admin/threads/remove",
            json={"threadId": "5", "reason": "  duplicate  "},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert store.threads[5].is_deleted
        assert store.removal_reasons[("thread", 5)] == "duplicate"

    def test_blank_reason_is_null(self, client, store, admin_headers):
        client.post(
            "/api/admin/threads/remove",
            json={"threadId": 5, "reason": "   "},
            headers=admin_headers,
        )

        assert store.removal_reasons[("thread", 5)] is None

    @pytest.mark.parametrize("body", [{}, {"threadId": 0}, {"threadId": "abc"}, []])
    def test_bad_thread_id(self, client, admin_headers, body):
        response = client.post(
            "/api/admin/threads/remove", json=body, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "threadId is required and must be a number."
        }

    def test_invalid_json(self, client, admin_headers):
        response = client.post(
            "/api/admin/threads/remove",
            content=b"{not json",
            headers={**admin_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body."}

    def test_header_checked_before_body(self, client, store):
        response = client.post("/api/admin/threads/remove", content=b"{not json")

        assert response.status_code == 401
        assert response.json() == {"error": "Missing Authorization header."}

    def test_rpc_failure(self, client, store, admin_headers):
        store.failing.add("admin_soft_delete_thread")

        response = client.post(
            "/api/admin/threads/remove", json={"threadId": 5}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Failed to remove thread."}

    def test_store_not_configured(self, client, identity_provider, admin_headers):
        identity_provider.configured = False

        response = client.post(
            "/api/admin/threads/remove", json={"threadId": 5}, headers=admin_headers
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Server is not configured correctly."}


class TestRemoveCommentEndpoint:
    """End-to-end tests for POST /api/admin/comments/remove."""

    def test_admin_removes_comment(self, client, store, admin_headers):
        response = client.post(
            "/api/admin/comments/remove", json={"commentId": 8}, headers=admin_headers
        )

        assert response.status_code == 200
        assert store.comments[8].is_deleted
        assert store.removal_reasons[("comment", 8)] is None

    def test_bad_comment_id(self, client, admin_headers):
        response = client.post(
            "/api/admin/comments/remove", json={"reason": "x"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "commentId is required and must be a number."
        }

    def test_unknown_comment(self, client, admin_headers):
        response = client.post(
            "/api/admin/comments/remove", json={"commentId": 99}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Failed to remove comment."}

    def test_non_admin_is_forbidden(self, client, store, identity_provider):
        _, headers = sign_in(identity_provider)

        response = client.post(
            "/api/admin/comments/remove", json={"commentId": 8}, headers=headers
        )

        assert response.status_code == 403
        assert not store.comments[8].is_deleted


class TestRecentActivityEndpoint:
    def test_admin_sees_recent_content(self, client, store, admin_headers):
        response = client.get("/api/admin/recent", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert [t["id"] for t in body["threads"]] == [5]
        assert [c["id"] for c in body["comments"]] == [8]
