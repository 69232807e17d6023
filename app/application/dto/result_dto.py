"""
Write result DTOs.
Mirror the acknowledgement documents returned by the MongoDB driver.
"""

from typing import Optional
from pydantic import Field

from .base_dto import BaseDTO


class InsertResultDTO(BaseDTO):
    """Result of an insert."""

    acknowledged: bool = Field(default=True)
    inserted_id: Optional[str] = Field(description="ID of the new document")


class UpdateResultDTO(BaseDTO):
    """Result of an update."""

    acknowledged: bool = Field(default=True)
    matched_count: int = Field(ge=0)
    modified_count: int = Field(ge=0)


class DeleteResultDTO(BaseDTO):
    """Result of a delete."""

    acknowledged: bool = Field(default=True)
    deleted_count: int = Field(ge=0)


class AlreadyAcceptedResponseDTO(BaseDTO):
    """No-op answer for a repeated accept request."""

    message: str = Field(default="Already accepted")
    inserted_id: Optional[str] = Field(default=None)
