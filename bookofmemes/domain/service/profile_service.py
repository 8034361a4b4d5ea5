"""Profile domain service."""

from typing import Iterable

import logfire

from bookofmemes.domain.model import Profile
from bookofmemes.domain.repository import Query, RecordStore, eq, in_
from bookofmemes.domain.value import Collection, UserId

from .base import Service


class ProfileService(Service):
    """Domain service for reading user profiles."""

    def __init__(self, record_store: RecordStore) -> None:
        """Initialize profile service.

        Args:
            record_store: Record store
        """
        self.record_store = record_store

    async def get_profile(self, user_id: UserId) -> Profile | None:
        """Get a single profile.

        Args:
            user_id: User ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_profile", user_id=user_id):
            row = await self.record_store.find_one(
                Collection.PROFILES, Query.where(eq("id", user_id))
            )
            if row is None:
                logfire.warn("Profile not found", user_id=user_id)
                return None
            return Profile.model_validate(row)

    async def get_profiles(self, user_ids: Iterable[UserId]) -> dict[UserId, Profile]:
        """Batch-load profiles for a set of users (avoids N+1).

        Args:
            user_ids: User IDs, duplicates allowed

        Returns:
            Mapping of user ID to profile for every user that has one
        """
        unique_ids = sorted({uid for uid in user_ids if uid})
        if not unique_ids:
            return {}

        rows = await self.record_store.find(
            Collection.PROFILES, Query.where(in_("id", unique_ids))
        )
        return {UserId(row["id"]): Profile.model_validate(row) for row in rows}
