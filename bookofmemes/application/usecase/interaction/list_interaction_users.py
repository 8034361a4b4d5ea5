"""List interaction users use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from bookofmemes.domain.service import InteractionService
from bookofmemes.domain.value import InteractionType, ItemId


class InteractionUserItem(BaseModel):
    """A user who interacted with an item."""

    user_id: str
    full_name: str | None
    avatar_url: str | None
    created_at: datetime


class ListInteractionUsersRequest(BaseModel):
    """List interaction users request."""

    item_id: str = Field(min_length=1)
    item_type: str = Field(min_length=1)
    interaction_type: InteractionType


class ListInteractionUsersUseCase:
    """Use case for listing who liked, viewed or shared an item."""

    def __init__(self, interaction_service: InteractionService) -> None:
        self.interaction_service = interaction_service

    async def execute(
        self, request: ListInteractionUsersRequest
    ) -> list[InteractionUserItem]:
        users = await self.interaction_service.list_users(
            ItemId(request.item_id), request.item_type, request.interaction_type
        )
        return [
            InteractionUserItem(
                user_id=interaction.user_id,
                full_name=profile.full_name if profile else None,
                avatar_url=profile.avatar_url if profile else None,
                created_at=interaction.created_at,
            )
            for interaction, profile in users
        ]
