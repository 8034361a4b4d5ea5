"""Unit tests for comment use cases."""

import pytest

from bookofmemes.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from bookofmemes.config import AuthSettings
from bookofmemes.domain.error import AuthError
from bookofmemes.domain.value import Collection
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import make_comment, make_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_response_nests_replies(self, unit_env):
        """Should serialise the thread with profiles and voter lists."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(
            Collection.COMMENTS,
            make_comment("c1"),
            make_comment("r1", parent_id="c1", minutes=1),
            make_comment("r2", parent_id="r1", minutes=2),
        )

        # Act
        result = await use_case.execute(GetCommentsRequest(item_id="item-1"))

        # Assert
        data = [item.model_dump() for item in result]
        assert len(data) == 1
        assert data[0]["profiles"] == {
            "full_name": "Unknown",
            "avatar_url": "https://via.placeholder.com/36",
        }
        assert data[0]["liked_users"] == []
        assert data[0]["replies"][0]["id"] == "r1"
        assert data[0]["replies"][0]["replies"][0]["id"] == "r2"


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_stored_comment(self, unit_env):
        """Should return the comment with the resolved owner and profile."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.STORIES, {"id": "I", "author_id": "owner"})
        store.seed(Collection.PROFILES, {"id": "U", "full_name": "Ursula"})

        # Act
        response = await use_case.execute(
            CreateCommentRequest(content="hi", user_id="U", item_id="I", item_type="stories")
        )

        # Assert
        assert response.author_id == "owner"
        assert response.item_type == "stories"
        assert response.profiles.full_name == "Ursula"
        assert response.likes == 0 and response.dislikes == 0


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_requires_bearer_token(self, unit_env):
        """Should refuse to delete without credentials."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act & Assert
        with pytest.raises(AuthError):
            await use_case.execute(DeleteCommentRequest(comment_id="c1"))
        assert len(store.rows(Collection.COMMENTS)) == 1

    @pytest.mark.asyncio
    async def test_owner_token_deletes(self, unit_env):
        """Should delete on behalf of the token's subject."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1", author_id="owner-1"))
        token = make_token("owner-1", auth_settings)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id="c1", authorization=f"Bearer {token}")
        )

        # Assert
        assert response.message == "Comment deleted successfully"
        assert store.rows(Collection.COMMENTS) == []
