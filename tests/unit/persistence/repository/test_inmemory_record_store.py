"""Unit tests for InMemoryRecordStore."""

import pytest

from bookofmemes.domain.repository import Query, eq, gte, ilike, in_, is_null, neq
from bookofmemes.domain.value import Collection, VoteType
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import make_comment


@pytest.fixture
def store() -> InMemoryRecordStore:
    store = InMemoryRecordStore()
    store.seed(
        Collection.COMMENTS,
        make_comment("a", user_id="u1", likes=3, minutes=2, content="Hi @Bob"),
        make_comment("b", user_id="u2", likes=7, minutes=0, parent_id="a"),
        make_comment("c", user_id="u1", likes=5, minutes=1, content="100% sure"),
    )
    return store


async def ids(store: InMemoryRecordStore, query: Query) -> list[str]:
    return [row["id"] for row in await store.find(Collection.COMMENTS, query)]


class TestPredicates:
    """Tests for predicate matching."""

    @pytest.mark.asyncio
    async def test_operators(self, store):
        """Should evaluate each operator like SQL does."""
        assert await ids(store, Query.where(eq("user_id", "u1"))) == ["a", "c"]
        assert await ids(store, Query.where(neq("user_id", "u1"))) == ["b"]
        assert await ids(store, Query.where(in_("id", ["a", "b"]))) == ["a", "b"]
        assert await ids(store, Query.where(gte("likes", 5))) == ["b", "c"]
        assert await ids(store, Query.where(is_null("parent_id"))) == ["a", "c"]

    @pytest.mark.asyncio
    async def test_null_never_matches_comparisons(self, store):
        """Should not match NULL columns with eq or neq."""
        assert await ids(store, Query.where(neq("parent_id", "a"))) == []
        assert await ids(store, Query.where(eq("parent_id", None))) == []

    @pytest.mark.asyncio
    async def test_ilike(self, store):
        """Should match LIKE patterns case-insensitively."""
        assert await ids(store, Query.where(ilike("content", "%@bob%"))) == ["a"]
        assert await ids(store, Query.where(ilike("content", "hi%"))) == ["a"]
        assert await ids(store, Query.where(ilike("content", "%\\%%"))) == ["c"]

    @pytest.mark.asyncio
    async def test_order_limit_and_columns(self, store):
        """Should sort, cut and project the result."""
        # Act
        rows = await store.find(
            Collection.COMMENTS,
            Query().order("likes", descending=True).take(2).select("id", "likes"),
        )

        # Assert
        assert rows == [{"id": "b", "likes": 7}, {"id": "c", "likes": 5}]


class TestWrites:
    """Tests for insert, upsert, update and delete."""

    @pytest.mark.asyncio
    async def test_insert_fills_defaults(self):
        """Should assign an ID and creation time."""
        store = InMemoryRecordStore()

        row = await store.insert(Collection.FOLLOWS, {"follower_id": "a", "following_id": "b"})

        assert row["id"]
        assert row["created_at"] is not None

    @pytest.mark.asyncio
    async def test_upsert_updates_on_conflict(self):
        """Should update the row sharing the conflict key."""
        # Arrange
        store = InMemoryRecordStore()
        key = ("user_id", "comment_id")
        first = await store.upsert(
            Collection.COMMENT_VOTES,
            {"user_id": "u", "comment_id": "c", "vote_type": VoteType.LIKE},
            on_conflict=key,
        )

        # Act
        second = await store.upsert(
            Collection.COMMENT_VOTES,
            {"user_id": "u", "comment_id": "c", "vote_type": VoteType.DISLIKE},
            on_conflict=key,
        )

        # Assert
        assert second["id"] == first["id"]
        assert store.rows(Collection.COMMENT_VOTES) == [second]
        assert second["vote_type"] == "dislike"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, store):
        """Should report the rows touched."""
        updated = await store.update(
            Collection.COMMENTS, Query.where(eq("user_id", "u1")), {"likes": 0}
        )
        assert sorted(r["id"] for r in updated) == ["a", "c"]

        deleted = await store.delete(Collection.COMMENTS, Query.where(eq("likes", 0)))
        assert deleted == 2
        assert await store.count(Collection.COMMENTS, Query()) == 1
