"""
Authentication dependencies for FastAPI.
Reads the session cookie, verifies it and exposes the caller's identity.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from app.config import Settings
from app.domain.models.base import AuthenticationError
from app.domain.services.ownership_service import OwnershipPolicy
from app.infrastructure.auth.jwt_handler import JWTHandler
from app.infrastructure.web.middleware.error_handler import UnauthorizedException


logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "Unauthorized access: No token"
INVALID_TOKEN_MESSAGE = "Unauthorized access: Invalid token"


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the running application was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_jwt_handler(settings: AppSettings) -> JWTHandler:
    """Dependency to get JWT handler."""
    return JWTHandler(settings)


async def get_current_identity(
    request: Request,
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)],
    settings: AppSettings
) -> str:
    """
    FastAPI dependency returning the authenticated email.

    The verified identity is also stored on request.state.identity.

    Raises:
        UnauthorizedException: If the cookie is missing or fails verification
    """
    token: Optional[str] = request.cookies.get(settings.cookie_name)
    if not token:
        raise UnauthorizedException(NO_TOKEN_MESSAGE)

    try:
        identity = jwt_handler.verify_token(token)
    except AuthenticationError as e:
        logger.info("JWT verification error on %s: %s", request.url.path, e.message)
        raise UnauthorizedException(INVALID_TOKEN_MESSAGE)

    request.state.identity = identity
    return identity


CurrentIdentity = Annotated[str, Depends(get_current_identity)]


def get_ownership_policy(settings: AppSettings) -> OwnershipPolicy:
    """Dependency to get the ownership policy for the running configuration."""
    return OwnershipPolicy(distinguish_not_found=settings.distinguish_not_found)


Policy = Annotated[OwnershipPolicy, Depends(get_ownership_policy)]
