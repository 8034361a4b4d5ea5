"""JWT token domain service."""

import logfire

from bookofmemes.config import AuthSettings
from bookofmemes.domain.error import AuthError
from bookofmemes.domain.value import UserId
from bookofmemes.util.jwt import JWTError, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying bearer tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def authenticate(self, authorization: str | None) -> UserId:
        """Resolve the user behind an ``Authorization: Bearer`` header.

        Args:
            authorization: Raw header value

        Returns:
            The token's subject

        Raises:
            AuthError: If the header is missing or the token is invalid
        """
        with logfire.span("jwt_service.authenticate"):
            scheme, _, token = (authorization or "").partition(" ")
            if scheme.lower() != "bearer" or not token.strip():
                logfire.warn("Missing bearer token")
                raise AuthError("Missing or invalid authorization header")

            try:
                payload = verify_token(token.strip(), self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise AuthError(str(e))

            logfire.info("JWT token verified", user_id=payload.sub)
            return UserId(payload.sub)
