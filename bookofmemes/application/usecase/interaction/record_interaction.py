"""Record and remove interaction use cases."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import InteractionService
from bookofmemes.domain.value import InteractionType, ItemId, UserId

from .list_interactions import InteractionItem


class InteractionRequest(BaseModel):
    """Identifies one interaction."""

    user_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)
    item_type: str = Field(min_length=1)
    interaction_type: InteractionType


class RemoveInteractionResponse(BaseModel):
    """Remove interaction response."""

    message: str


class RecordInteractionUseCase:
    """Use case for recording an interaction (idempotent)."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize record interaction use case.

        Args:
            interaction_service: Interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: InteractionRequest) -> InteractionItem:
        interaction = await self.interaction_service.record_interaction(
            user_id=UserId(request.user_id),
            item_id=ItemId(request.item_id),
            item_type=request.item_type,
            interaction_type=request.interaction_type,
        )
        return InteractionItem.from_domain(interaction)


class RemoveInteractionUseCase:
    """Use case for removing an interaction."""

    def __init__(self, interaction_service: InteractionService) -> None:
        self.interaction_service = interaction_service

    async def execute(self, request: InteractionRequest) -> RemoveInteractionResponse:
        await self.interaction_service.remove_interaction(
            user_id=UserId(request.user_id),
            item_id=ItemId(request.item_id),
            item_type=request.item_type,
            interaction_type=request.interaction_type,
        )
        return RemoveInteractionResponse(message="Interaction removed")
