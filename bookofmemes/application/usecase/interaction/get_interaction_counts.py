"""Get interaction counts use case."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import InteractionService
from bookofmemes.domain.value import InteractionType, ItemId


class GetInteractionCountsRequest(BaseModel):
    """Get interaction counts request."""

    item_id: str = Field(min_length=1)
    item_type: str = Field(min_length=1)


class InteractionCountsResponse(BaseModel):
    """Count per interaction kind. Every kind is present."""

    like: int = 0
    comment: int = 0
    view: int = 0
    bookmark: int = 0
    share: int = 0


class GetInteractionCountsUseCase:
    """Use case for an item's interaction counters."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize get interaction counts use case.

        Args:
            interaction_service: Interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(
        self, request: GetInteractionCountsRequest
    ) -> InteractionCountsResponse:
        """Execute get interaction counts flow.

        Returns:
            Zero-filled counts for like, comment, view, bookmark and share
        """
        counts = await self.interaction_service.count_by_kind(
            ItemId(request.item_id), request.item_type
        )
        return InteractionCountsResponse(
            **{kind.value: counts.get(kind, 0) for kind in InteractionType}
        )
