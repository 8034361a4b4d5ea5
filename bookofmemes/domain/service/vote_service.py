"""Comment vote domain service."""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import logfire

from bookofmemes.config import CommentSettings
from bookofmemes.domain.error import NotFoundError
from bookofmemes.domain.model import CommentVote
from bookofmemes.domain.repository import Query, RecordStore, eq, in_
from bookofmemes.domain.value import Collection, CommentId, UserId, VoteType

from .base import Service
from .profile_service import ProfileService


@dataclass
class Voter:
    """A user who voted on a comment, with display details."""

    user_id: UserId
    full_name: str
    avatar_url: str


@dataclass
class VoteRollUp:
    """Likers and dislikers of one comment."""

    liked_users: list[Voter] = field(default_factory=list)
    disliked_users: list[Voter] = field(default_factory=list)


@dataclass
class VoteTally:
    """A comment's vote counters and the caller's own vote."""

    comment_id: CommentId
    likes: int
    dislikes: int
    current_user_vote: Optional[VoteType]


class VoteService(Service):
    """Domain service for comment votes.

    The ``likes`` and ``dislikes`` counters on a comment are maintained by
    the record store; this service only writes vote rows and reads the
    counters back.
    """

    def __init__(
        self,
        record_store: RecordStore,
        profile_service: ProfileService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            record_store: Record store
            profile_service: Profile domain service
            comment_settings: Display defaults for voters without a profile
        """
        self.record_store = record_store
        self.profile_service = profile_service
        self.comment_settings = comment_settings

    async def roll_up(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteRollUp]:
        """Group the votes on a set of comments into likers and dislikers.

        Args:
            comment_ids: Comments to roll up

        Returns:
            Roll-up for every requested comment (empty lists when unvoted)
        """
        roll_ups = {comment_id: VoteRollUp() for comment_id in comment_ids}
        if not roll_ups:
            return roll_ups

        rows = await self.record_store.find(
            Collection.COMMENT_VOTES,
            Query.where(in_("comment_id", list(roll_ups))),
        )
        votes = [CommentVote.model_validate(row) for row in rows]
        profiles = await self.profile_service.get_profiles(v.user_id for v in votes)

        for vote in votes:
            profile = profiles.get(vote.user_id)
            voter = Voter(
                user_id=vote.user_id,
                full_name=(profile and profile.full_name)
                or self.comment_settings.unknown_author_name,
                avatar_url=(profile and profile.avatar_url)
                or self.comment_settings.placeholder_avatar_url,
            )
            roll_up = roll_ups.get(vote.comment_id)
            if roll_up is None:
                continue
            if vote.vote_type == VoteType.LIKE:
                roll_up.liked_users.append(voter)
            else:
                roll_up.disliked_users.append(voter)

        return roll_ups

    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: VoteType
    ) -> VoteTally:
        """Like or dislike a comment.

        Voting again replaces the user's previous vote on the comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            comment_id=comment_id,
            user_id=user_id,
            vote_type=vote_type.value,
        ):
            await self._require_comment(comment_id)
            await self.record_store.upsert(
                Collection.COMMENT_VOTES,
                {
                    "user_id": user_id,
                    "comment_id": comment_id,
                    "vote_type": vote_type,
                },
                on_conflict=("user_id", "comment_id"),
            )
            logfire.info("Vote recorded", comment_id=comment_id, user_id=user_id)
            return await self._tally(comment_id, user_id)

    async def remove_vote(self, comment_id: CommentId, user_id: UserId) -> VoteTally:
        """Withdraw the user's vote on a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "vote_service.remove_vote", comment_id=comment_id, user_id=user_id
        ):
            await self._require_comment(comment_id)
            removed = await self.record_store.delete(
                Collection.COMMENT_VOTES,
                Query.where(eq("user_id", user_id), eq("comment_id", comment_id)),
            )
            logfire.info(
                "Vote removed", comment_id=comment_id, user_id=user_id, removed=removed
            )
            return await self._tally(comment_id, user_id)

    async def _require_comment(self, comment_id: CommentId) -> None:
        exists = await self.record_store.count(
            Collection.COMMENTS, Query.where(eq("id", comment_id))
        )
        if not exists:
            logfire.warn("Vote on non-existent comment", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)

    async def _tally(self, comment_id: CommentId, user_id: UserId) -> VoteTally:
        # Counters are refreshed by the record store after each vote write
        row = await self.record_store.find_one(
            Collection.COMMENTS,
            Query.where(eq("id", comment_id)).select("id", "likes", "dislikes"),
        )
        if row is None:
            raise NotFoundError("Comment", comment_id)
        vote = await self.record_store.find_one(
            Collection.COMMENT_VOTES,
            Query.where(eq("comment_id", comment_id), eq("user_id", user_id)).select(
                "vote_type"
            ),
        )
        return VoteTally(
            comment_id=comment_id,
            likes=row["likes"] or 0,
            dislikes=row["dislikes"] or 0,
            current_user_vote=VoteType(vote["vote_type"]) if vote else None,
        )
