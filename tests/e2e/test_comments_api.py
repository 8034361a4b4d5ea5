"""End-to-end tests for comment and vote endpoints."""

import pytest
from fastapi.testclient import TestClient

from bookofmemes.config import Settings
from bookofmemes.domain.value import Collection
from bookofmemes.interface.api.app import create_app
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from bookofmemes.util.di.container import setup_di
from tests.conftest import make_comment, make_token
from tests.di import build_test_container


@pytest.fixture
def test_container():
    return build_test_container()


@pytest.fixture
def client(test_container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, test_container)
    with TestClient(app_instance) as client:
        yield client


@pytest.fixture
def store(client, test_container) -> InMemoryRecordStore:
    """The record store behind the test client."""
    return client.portal.call(test_container.get, InMemoryRecordStore)


def bearer(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, Settings().auth)}"}


class TestCommentEndpoints:
    """End-to-end tests for /comments."""

    def test_get_comments_threads_replies(self, client, store):
        """Should return root comments with nested replies."""
        # Arrange
        store.seed(
            Collection.COMMENTS,
            make_comment("c1", item_id="I"),
            make_comment("r1", item_id="I", parent_id="c1", minutes=1),
            make_comment("x", item_id="other", minutes=2),
        )

        # Act
        response = client.get("/comments", params={"itemId": "I"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert [c["id"] for c in data] == ["c1"]
        assert data[0]["replies"][0]["id"] == "r1"
        assert data[0]["profiles"]["full_name"] == "Unknown"
        assert data[0]["liked_users"] == []

    def test_post_comment_on_missing_item(self, client):
        """Should return 404 when the item does not exist."""
        # Act
        response = client.post(
            "/comments",
            json={"content": "hi", "user_id": "U", "item_id": "I", "item_type": "stories"},
        )

        # Assert
        assert response.status_code == 404
        assert response.json() == {"error": "Item not found"}

    def test_post_comment(self, client, store):
        """Should store the comment addressed to the item owner."""
        # Arrange
        store.seed(Collection.STORIES, {"id": "I", "author_id": "owner"})

        # Act
        response = client.post(
            "/comments",
            json={"content": "hi", "user_id": "U", "item_id": "I", "item_type": "stories"},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["author_id"] == "owner"
        assert data["profiles"] == {
            "full_name": "Unknown",
            "avatar_url": "https://via.placeholder.com/36",
        }
        assert len(store.rows(Collection.COMMENTS)) == 1

    def test_post_comment_missing_fields(self, client):
        """Should name the missing fields."""
        # Act
        response = client.post("/comments", json={"content": "hi"})

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "Missing user_id, item_id"}

    def test_delete_without_token(self, client, store):
        """Should return 401 and keep the comment."""
        # Arrange
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act
        response = client.delete("/comments/c1")

        # Assert
        assert response.status_code == 401
        assert "error" in response.json()
        assert len(store.rows(Collection.COMMENTS)) == 1

    def test_delete_with_invalid_token(self, client, store):
        """Should return 401 for a token that does not verify."""
        # Act
        response = client.delete(
            "/comments/c1", headers={"Authorization": "Bearer not-a-jwt"}
        )

        # Assert
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_delete_as_owner(self, client, store):
        """Should delete a comment addressed to the token's subject."""
        # Arrange
        store.seed(Collection.COMMENTS, make_comment("c1", author_id="owner-1"))

        # Act
        response = client.delete("/comments/c1", headers=bearer("owner-1"))

        # Assert
        assert response.status_code == 200
        assert response.json() == {"message": "Comment deleted successfully"}
        assert store.rows(Collection.COMMENTS) == []

    def test_delete_as_someone_else(self, client, store):
        """Should not delete a comment addressed to another owner."""
        # Arrange
        store.seed(Collection.COMMENTS, make_comment("c1", author_id="owner-1"))

        # Act
        response = client.delete("/comments/c1", headers=bearer("intruder"))

        # Assert
        assert response.status_code == 404
        assert response.json() == {"error": "Comment not found"}
        assert len(store.rows(Collection.COMMENTS)) == 1


class TestVoteEndpoints:
    """End-to-end tests for /comments/{id}/vote."""

    def test_vote(self, client, store):
        """Should record the vote and echo the caller's choice."""
        # Arrange
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act
        response = client.post(
            "/comments/c1/vote", json={"user_id": "u1", "vote_type": "like"}
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "c1"
        assert data["current_user_vote"] == "like"
        assert len(store.rows(Collection.COMMENT_VOTES)) == 1

    def test_invalid_vote_type(self, client, store):
        """Should reject vote types other than like and dislike."""
        # Arrange
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act
        response = client.post(
            "/comments/c1/vote", json={"user_id": "u1", "vote_type": "love"}
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid vote_type"}

    def test_vote_on_missing_comment(self, client):
        """Should return 404 for an unknown comment."""
        # Act
        response = client.post(
            "/comments/nope/vote", json={"user_id": "u1", "vote_type": "dislike"}
        )

        # Assert
        assert response.status_code == 404
        assert response.json() == {"error": "Comment not found"}

    def test_remove_vote(self, client, store):
        """Should withdraw the caller's vote."""
        # Arrange
        store.seed(Collection.COMMENTS, make_comment("c1"))
        store.seed(
            Collection.COMMENT_VOTES,
            {"user_id": "u1", "comment_id": "c1", "vote_type": "like"},
        )

        # Act
        response = client.request(
            "DELETE", "/comments/c1/vote", json={"user_id": "u1"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["current_user_vote"] is None
        assert store.rows(Collection.COMMENT_VOTES) == []
