"""Bookmark domain service."""

import logfire

from bookofmemes.domain.model import Bookmark, Profile
from bookofmemes.domain.repository import Query, RecordStore, eq
from bookofmemes.domain.value import Collection, ItemId, UserId

from .base import Service
from .profile_service import ProfileService


class BookmarkService(Service):
    """Domain service for saved items."""

    def __init__(
        self, record_store: RecordStore, profile_service: ProfileService
    ) -> None:
        self.record_store = record_store
        self.profile_service = profile_service

    async def list_bookmarks(
        self, user_id: UserId, item_type: str | None = None
    ) -> list[Bookmark]:
        """A user's bookmarks, newest first, optionally of one item type."""
        query = Query.where(eq("user_id", user_id)).order(
            "created_at", descending=True
        )
        if item_type:
            query = query.and_(eq("item_type", item_type))
        rows = await self.record_store.find(Collection.BOOKMARKS, query)
        return [Bookmark.model_validate(row) for row in rows]

    async def add_bookmark(
        self, user_id: UserId, item_id: ItemId, item_type: str
    ) -> Bookmark:
        """Bookmark an item. Bookmarking it again leaves a single row."""
        with logfire.span(
            "bookmark_service.add_bookmark", user_id=user_id, item_id=item_id
        ):
            row = await self.record_store.upsert(
                Collection.BOOKMARKS,
                {"user_id": user_id, "item_id": item_id, "item_type": item_type},
                on_conflict=("user_id", "item_id", "item_type"),
            )
            logfire.info("Bookmark saved", user_id=user_id, item_id=item_id)
            return Bookmark.model_validate(row)

    async def remove_bookmark(
        self, user_id: UserId, item_id: ItemId, item_type: str
    ) -> int:
        """Remove a bookmark. Returns the number of rows removed."""
        with logfire.span(
            "bookmark_service.remove_bookmark", user_id=user_id, item_id=item_id
        ):
            return await self.record_store.delete(
                Collection.BOOKMARKS,
                Query.where(
                    eq("user_id", user_id),
                    eq("item_id", item_id),
                    eq("item_type", item_type),
                ),
            )

    async def list_users(
        self, item_id: ItemId, item_type: str
    ) -> list[tuple[Bookmark, Profile | None]]:
        """Users who bookmarked an item, newest first."""
        rows = await self.record_store.find(
            Collection.BOOKMARKS,
            Query.where(eq("item_id", item_id), eq("item_type", item_type)).order(
                "created_at", descending=True
            ),
        )
        bookmarks = [Bookmark.model_validate(row) for row in rows]
        profiles = await self.profile_service.get_profiles(
            b.user_id for b in bookmarks
        )
        return [(b, profiles.get(b.user_id)) for b in bookmarks]
