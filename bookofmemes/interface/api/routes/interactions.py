"""Interaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from bookofmemes.application.usecase.interaction import (
    GetInteractionCountsRequest,
    GetInteractionCountsUseCase,
    InteractionCountsResponse,
    InteractionItem,
    InteractionRequest,
    InteractionUserItem,
    ListInteractionsRequest,
    ListInteractionsUseCase,
    ListInteractionUsersRequest,
    ListInteractionUsersUseCase,
    RecordInteractionUseCase,
    RemoveInteractionResponse,
    RemoveInteractionUseCase,
)
from bookofmemes.domain.value import InteractionType

router = APIRouter(prefix="/interactions", tags=["interactions"], route_class=DishkaRoute)


@router.get("", response_model=list[InteractionItem], summary="Fetch interactions")
async def list_interactions(
    list_interactions_use_case: FromDishka[ListInteractionsUseCase],
    user_id: str | None = None,
    item_id: str | None = None,
    item_type: str | None = None,
    interaction_type: InteractionType | None = None,
) -> list[InteractionItem]:
    """List interactions matching every given filter."""
    return await list_interactions_use_case.execute(
        ListInteractionsRequest(
            user_id=user_id,
            item_id=item_id,
            item_type=item_type,
            interaction_type=interaction_type,
        )
    )


@router.post("", response_model=InteractionItem, summary="Record interaction")
async def record_interaction(
    request: InteractionRequest,
    record_interaction_use_case: FromDishka[RecordInteractionUseCase],
) -> InteractionItem:
    """Record an interaction. Recording it twice keeps a single row."""
    return await record_interaction_use_case.execute(request)


@router.delete(
    "", response_model=RemoveInteractionResponse, summary="Remove interaction"
)
async def remove_interaction(
    request: InteractionRequest,
    remove_interaction_use_case: FromDishka[RemoveInteractionUseCase],
) -> RemoveInteractionResponse:
    """Remove an interaction."""
    return await remove_interaction_use_case.execute(request)


@router.get(
    "/counts",
    response_model=InteractionCountsResponse,
    summary="Fetch interaction counts",
)
async def get_interaction_counts(
    get_interaction_counts_use_case: FromDishka[GetInteractionCountsUseCase],
    item_id: str = Query(min_length=1),
    item_type: str = Query(min_length=1),
) -> InteractionCountsResponse:
    """Count an item's likes, comments, views, bookmarks and shares."""
    return await get_interaction_counts_use_case.execute(
        GetInteractionCountsRequest(item_id=item_id, item_type=item_type)
    )


@router.get(
    "/users",
    response_model=list[InteractionUserItem],
    summary="Fetch interaction users",
)
async def list_interaction_users(
    list_interaction_users_use_case: FromDishka[ListInteractionUsersUseCase],
    item_id: str = Query(min_length=1),
    item_type: str = Query(min_length=1),
    interaction_type: InteractionType = Query(),
) -> list[InteractionUserItem]:
    """Users who had a given interaction with an item, newest first."""
    return await list_interaction_users_use_case.execute(
        ListInteractionUsersRequest(
            item_id=item_id, item_type=item_type, interaction_type=interaction_type
        )
    )
