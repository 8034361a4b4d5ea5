"""Profile entity."""

from typing import Optional

from bookofmemes.domain.model.common import DomainModel
from bookofmemes.domain.value import UserId


class Profile(DomainModel):
    """Public profile of a user.

    Profiles are owned by the hosted auth service and keyed by the
    auth user ID.
    """

    id: UserId
    full_name: Optional[str] = None
    username: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
