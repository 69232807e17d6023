"""
JWT token handler for session cookies.
Issues and verifies signed session tokens carrying the user's email.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt

from app.config import Settings, get_settings
from app.domain.models.base import (
    Email,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)


logger = logging.getLogger(__name__)

IDENTITY_CLAIM = "email"


class JWTHandler:
    """Handles JWT token issuing and validation."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.settings = settings or get_settings()
        self.jwt_secret = self.settings.access_token_secret
        self.jwt_algorithm = self.settings.jwt_algorithm
        self.default_ttl = timedelta(minutes=self.settings.jwt_expire_minutes)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue_token(self, identity: str, ttl: Optional[timedelta] = None) -> str:
        """
        Create a signed session token for an identity.

        Args:
            identity: Email address the token vouches for
            ttl: Lifetime of the token (defaults to the configured expiry)

        Returns:
            JWT token string
        """
        Email(identity)
        now = self._clock()
        expire = now + (ttl if ttl is not None else self.default_ttl)

        payload = {
            IDENTITY_CLAIM: Email.normalize(identity),
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }

        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the token payload.

        Raises:
            MalformedTokenError: If the token cannot be parsed
            InvalidSignatureError: If the signature does not match
            TokenExpiredError: If the token is past its expiry
        """
        if not token or not isinstance(token, str):
            raise MalformedTokenError("Token is empty")

        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": False, "verify_iat": False, "require": ["exp"]}
            )
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError(f"Invalid token signature: {e}")
        except jwt.PyJWTError as e:
            raise MalformedTokenError(f"Malformed token: {e}")

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            raise MalformedTokenError("Token expiration is not a timestamp")

        if self._clock().timestamp() > exp:
            raise TokenExpiredError()

        return payload

    def verify_token(self, token: str) -> str:
        """
        Verify a session token and return the identity it carries.

        Raises:
            AuthenticationError subclass describing why the token was rejected
        """
        payload = self.decode_token(token)

        identity = payload.get(IDENTITY_CLAIM)
        if not isinstance(identity, str) or not identity.strip():
            raise MalformedTokenError(f"Token missing {IDENTITY_CLAIM} claim")

        return identity
