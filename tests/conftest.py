"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from bookofmemes.config import AuthSettings

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time (keeps ordering explicit)."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_comment(
    comment_id: str,
    item_id: str = "item-1",
    user_id: str = "writer-1",
    author_id: str = "owner-1",
    parent_id: str | None = None,
    content: str | None = None,
    likes: int = 0,
    minutes: int = 0,
    item_type: str = "stories",
) -> dict[str, Any]:
    """Build a comment row for seeding the in-memory record store."""
    return {
        "id": comment_id,
        "content": content or f"comment {comment_id}",
        "user_id": user_id,
        "author_id": author_id,
        "item_id": item_id,
        "item_type": item_type,
        "parent_id": parent_id,
        "likes": likes,
        "dislikes": 0,
        "created_at": at(minutes),
    }


def make_token(
    user_id: str,
    settings: AuthSettings | None = None,
    expires_in: timedelta = timedelta(hours=1),
    audience: str | None = None,
) -> str:
    """Sign an access token the way the hosted auth service does."""
    settings = settings or AuthSettings()
    payload = {
        "sub": user_id,
        "aud": audience or settings.jwt_audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
