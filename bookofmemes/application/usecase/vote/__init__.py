"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteResponse
from .remove_vote import RemoveVoteRequest, RemoveVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "RemoveVoteRequest",
    "RemoveVoteUseCase",
    "VoteResponse",
]
