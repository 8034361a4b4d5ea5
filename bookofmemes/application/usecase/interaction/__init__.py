"""Interaction use cases."""

from .get_interaction_counts import (
    GetInteractionCountsRequest,
    GetInteractionCountsUseCase,
    InteractionCountsResponse,
)
from .list_interaction_users import (
    InteractionUserItem,
    ListInteractionUsersRequest,
    ListInteractionUsersUseCase,
)
from .list_interactions import (
    InteractionItem,
    ListInteractionsRequest,
    ListInteractionsUseCase,
)
from .record_interaction import (
    InteractionRequest,
    RecordInteractionUseCase,
    RemoveInteractionResponse,
    RemoveInteractionUseCase,
)

__all__ = [
    "GetInteractionCountsRequest",
    "GetInteractionCountsUseCase",
    "InteractionCountsResponse",
    "InteractionItem",
    "InteractionRequest",
    "InteractionUserItem",
    "ListInteractionUsersRequest",
    "ListInteractionUsersUseCase",
    "ListInteractionsRequest",
    "ListInteractionsUseCase",
    "RecordInteractionUseCase",
    "RemoveInteractionResponse",
    "RemoveInteractionUseCase",
]
