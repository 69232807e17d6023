"""
Session DTOs for the application layer.
"""

from pydantic import ConfigDict, EmailStr, Field, field_validator

from .base_dto import BaseDTO, RequestDTO, normalize_email


class TokenRequestDTO(RequestDTO):
    """DTO for requesting a session cookie."""

    # Clients post their whole user object; only the email matters
    model_config = ConfigDict(extra="ignore")

    email: EmailStr = Field(description="Identity to embed in the session token")

    normalize_email_field = field_validator("email")(normalize_email)


class SessionResponseDTO(BaseDTO):
    """DTO for login/logout responses."""

    success: bool = Field(default=True)
    message: str = Field(description="Human readable outcome")
