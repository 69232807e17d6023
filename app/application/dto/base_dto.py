"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.models.base import Email


class BaseDTO(BaseModel):
    """Base DTO with common configuration. Wire names are camelCase."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        alias_generator=to_camel,
        # Validate assignment
        validate_assignment=True,
        # Reject fields the API does not know about
        extra="forbid",
        str_strip_whitespace=True,
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(default=None, alias="_id")


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """Base class for update request DTOs."""
    pass


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    environment: str = Field(description="Deployment environment")
    version: Optional[str] = Field(default=None, description="Application version")
    database: str = Field(description="Database status")
    timestamp: datetime = Field(description="Check timestamp")


# Utility functions
def normalize_email(value: Optional[str]) -> Optional[str]:
    """Field validator body shared by DTOs carrying owner emails."""
    if value is None:
        return None
    return Email.normalize(value)
