"""
Session router.
Issues and clears the JWT session cookie.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.config import Settings
from app.infrastructure.auth import AppSettings, JWTHandler, get_jwt_handler
from app.application.dto.auth_dto import TokenRequestDTO, SessionResponseDTO


logger = logging.getLogger(__name__)

router = APIRouter()


def cookie_flags(settings: Settings) -> dict:
    """Flags shared by setting and clearing the session cookie."""
    return {
        "httponly": True,
        "secure": settings.cookie_secure,
        "samesite": settings.cookie_samesite,
        "path": "/",
    }


@router.post("/jwt", response_model=SessionResponseDTO)
async def issue_session(
    request: TokenRequestDTO,
    response: Response,
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)],
    settings: AppSettings
):
    """
    Issue a session token for an email and store it in an httpOnly cookie.

    - **email**: Identity embedded in the token
    """
    token = jwt_handler.issue_token(request.email)
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.token_max_age_seconds,
        **cookie_flags(settings)
    )
    logger.info(f"Session issued for {request.email}")
    return SessionResponseDTO(message="Token set successfully")


@router.post("/logout", response_model=SessionResponseDTO)
async def logout(
    response: Response,
    settings: AppSettings
):
    """Clear the session cookie."""
    response.delete_cookie(key=settings.cookie_name, **cookie_flags(settings))
    return SessionResponseDTO(message="Logged out and token cleared")
