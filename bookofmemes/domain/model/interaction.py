"""Interaction and bookmark entities."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from bookofmemes.domain.model.common import DomainModel
from bookofmemes.domain.value import InteractionType, ItemId, UserId


class Interaction(DomainModel):
    """A user's interaction with an item.

    Unique per ``(user_id, item_id, item_type, interaction_type)``.
    """

    id: Optional[str] = None
    user_id: UserId
    item_id: ItemId
    item_type: str
    interaction_type: InteractionType
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Bookmark(DomainModel):
    """A saved item. Unique per ``(user_id, item_id, item_type)``."""

    id: Optional[str] = None
    user_id: UserId
    item_id: ItemId
    item_type: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
