"""JWT token utilities.

Access tokens are issued by the hosted auth service; this module only
verifies them.
"""

from datetime import datetime
from typing import Optional

import jwt
from pydantic import BaseModel, ConfigDict

from bookofmemes.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    model_config = ConfigDict(extra="ignore")

    sub: str
    exp: datetime
    email: Optional[str] = None
    role: Optional[str] = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
