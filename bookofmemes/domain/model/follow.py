"""Follow entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from bookofmemes.domain.model.common import DomainModel
from bookofmemes.domain.value import UserId


class Follow(DomainModel):
    """Directed follow edge from ``follower_id`` to ``following_id``."""

    id: Optional[str] = None
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
