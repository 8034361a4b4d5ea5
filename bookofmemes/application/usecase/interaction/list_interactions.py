"""List interactions use case."""

from datetime import datetime

from pydantic import BaseModel

from bookofmemes.domain.model import Interaction
from bookofmemes.domain.service import InteractionService
from bookofmemes.domain.value import InteractionType, ItemId, UserId


class InteractionItem(BaseModel):
    """Interaction row in response."""

    id: str | None
    user_id: str
    item_id: str
    item_type: str
    interaction_type: InteractionType
    created_at: datetime

    @classmethod
    def from_domain(cls, interaction: Interaction) -> "InteractionItem":
        return cls(
            id=interaction.id,
            user_id=interaction.user_id,
            item_id=interaction.item_id,
            item_type=interaction.item_type,
            interaction_type=interaction.interaction_type,
            created_at=interaction.created_at,
        )


class ListInteractionsRequest(BaseModel):
    """List interactions request. Every filter is optional."""

    user_id: str | None = None
    item_id: str | None = None
    item_type: str | None = None
    interaction_type: InteractionType | None = None


class ListInteractionsUseCase:
    """Use case for listing interactions."""

    def __init__(self, interaction_service: InteractionService) -> None:
        self.interaction_service = interaction_service

    async def execute(self, request: ListInteractionsRequest) -> list[InteractionItem]:
        interactions = await self.interaction_service.list_interactions(
            user_id=UserId(request.user_id) if request.user_id else None,
            item_id=ItemId(request.item_id) if request.item_id else None,
            item_type=request.item_type,
            interaction_type=request.interaction_type,
        )
        return [InteractionItem.from_domain(i) for i in interactions]
