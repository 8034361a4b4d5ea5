"""Interaction domain service."""

import logfire

from bookofmemes.domain.model import Interaction, Profile
from bookofmemes.domain.repository import Query, RecordStore, eq
from bookofmemes.domain.value import Collection, InteractionType, ItemId, UserId

from .base import Service
from .profile_service import ProfileService

_INTERACTION_KEY = ("user_id", "item_id", "item_type", "interaction_type")


class InteractionService(Service):
    """Domain service for likes, views, shares and other item interactions."""

    def __init__(
        self, record_store: RecordStore, profile_service: ProfileService
    ) -> None:
        """Initialize interaction service.

        Args:
            record_store: Record store
            profile_service: Profile domain service
        """
        self.record_store = record_store
        self.profile_service = profile_service

    async def list_interactions(
        self,
        user_id: UserId | None = None,
        item_id: ItemId | None = None,
        item_type: str | None = None,
        interaction_type: InteractionType | None = None,
    ) -> list[Interaction]:
        """List interactions matching every given filter, newest first."""
        query = Query().order("created_at", descending=True)
        for column, value in (
            ("user_id", user_id),
            ("item_id", item_id),
            ("item_type", item_type),
            ("interaction_type", interaction_type),
        ):
            if value:
                query = query.and_(eq(column, value))

        rows = await self.record_store.find(Collection.INTERACTIONS, query)
        return [Interaction.model_validate(row) for row in rows]

    async def record_interaction(
        self,
        user_id: UserId,
        item_id: ItemId,
        item_type: str,
        interaction_type: InteractionType,
    ) -> Interaction:
        """Record an interaction. Recording it again leaves a single row."""
        with logfire.span(
            "interaction_service.record_interaction",
            user_id=user_id,
            item_id=item_id,
            interaction_type=interaction_type.value,
        ):
            row = await self.record_store.upsert(
                Collection.INTERACTIONS,
                {
                    "user_id": user_id,
                    "item_id": item_id,
                    "item_type": item_type,
                    "interaction_type": interaction_type,
                },
                on_conflict=_INTERACTION_KEY,
            )
            return Interaction.model_validate(row)

    async def remove_interaction(
        self,
        user_id: UserId,
        item_id: ItemId,
        item_type: str,
        interaction_type: InteractionType,
    ) -> int:
        """Remove an interaction.

        Returns:
            Number of rows removed
        """
        with logfire.span(
            "interaction_service.remove_interaction",
            user_id=user_id,
            item_id=item_id,
            interaction_type=interaction_type.value,
        ):
            return await self.record_store.delete(
                Collection.INTERACTIONS,
                Query.where(
                    eq("user_id", user_id),
                    eq("item_id", item_id),
                    eq("item_type", item_type),
                    eq("interaction_type", interaction_type),
                ),
            )

    async def count_by_kind(
        self, item_id: ItemId, item_type: str
    ) -> dict[InteractionType, int]:
        """Count an item's interactions per kind.

        One count query per kind; kinds with no rows count as zero.
        """
        with logfire.span(
            "interaction_service.count_by_kind", item_id=item_id, item_type=item_type
        ):
            counts: dict[InteractionType, int] = {}
            for kind in InteractionType:
                counts[kind] = await self.record_store.count(
                    Collection.INTERACTIONS,
                    Query.where(
                        eq("item_id", item_id),
                        eq("item_type", item_type),
                        eq("interaction_type", kind),
                    ),
                )
            return counts

    async def list_users(
        self, item_id: ItemId, item_type: str, interaction_type: InteractionType
    ) -> list[tuple[Interaction, Profile | None]]:
        """Users who had a given interaction with an item, newest first."""
        interactions = await self.list_interactions(
            item_id=item_id, item_type=item_type, interaction_type=interaction_type
        )
        profiles = await self.profile_service.get_profiles(
            i.user_id for i in interactions
        )
        return [(i, profiles.get(i.user_id)) for i in interactions]
