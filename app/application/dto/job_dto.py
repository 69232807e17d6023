"""
Job DTOs for the application layer.
Data Transfer Objects for job posting operations.
"""

from typing import Optional, Dict, Any
from datetime import datetime
from pydantic import EmailStr, Field, field_validator, model_validator

from app.domain.models.job import JobPosting
from .base_dto import (
    CreateRequestDTO, UpdateRequestDTO, ResponseDTO, normalize_email
)


def _check_price_range(min_price: Optional[float], max_price: Optional[float]) -> None:
    if min_price is not None and max_price is not None and min_price > max_price:
        raise ValueError("minPrice cannot exceed maxPrice")


class CreateJobRequestDTO(CreateRequestDTO):
    """DTO for job creation requests."""

    employer_email: EmailStr = Field(description="Owner of the posting")
    job_title: str = Field(min_length=1, max_length=200, description="Job title")
    job_category: Optional[str] = Field(default=None, max_length=100, description="Job category")
    description: Optional[str] = Field(default=None, max_length=5000, description="Job description")
    cover_image: Optional[str] = Field(default=None, max_length=2048, description="Cover image URL")
    min_price: Optional[float] = Field(default=None, ge=0, description="Lowest budget")
    max_price: Optional[float] = Field(default=None, ge=0, description="Highest budget")
    deadline: Optional[str] = Field(default=None, max_length=64, description="Deadline as sent by the client")
    posting_date: Optional[datetime] = Field(default=None, description="Defaults to the time of creation")

    normalize_employer_email = field_validator("employer_email")(normalize_email)

    @model_validator(mode="after")
    def validate_price_range(self) -> "CreateJobRequestDTO":
        _check_price_range(self.min_price, self.max_price)
        return self


class UpdateJobRequestDTO(UpdateRequestDTO):
    """
    DTO for job update requests.

    Only the fields present in the body are changed. The employer and
    posting date cannot be edited.
    """

    job_title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    job_category: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=5000)
    cover_image: Optional[str] = Field(default=None, max_length=2048)
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)
    deadline: Optional[str] = Field(default=None, max_length=64)

    @model_validator(mode="after")
    def validate_price_range(self) -> "UpdateJobRequestDTO":
        _check_price_range(self.min_price, self.max_price)
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly sent by the client, keyed by domain attribute."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class JobResponseDTO(ResponseDTO):
    """DTO for job posting responses."""

    employer_email: str
    job_title: str
    job_category: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    deadline: Optional[str] = None
    posting_date: datetime

    @classmethod
    def from_domain(cls, job: JobPosting) -> "JobResponseDTO":
        return cls(
            id=job.id,
            employer_email=job.employer_email,
            job_title=job.job_title,
            job_category=job.job_category,
            description=job.description,
            cover_image=job.cover_image,
            min_price=job.min_price,
            max_price=job.max_price,
            deadline=job.deadline,
            posting_date=job.posting_date
        )
