"""
Accepted task DTOs for the application layer.
"""

from typing import Optional
from datetime import datetime
from pydantic import EmailStr, Field, field_validator

from app.domain.models.accepted_task import AcceptedTask
from .base_dto import CreateRequestDTO, ResponseDTO, normalize_email


class CreateAcceptedTaskRequestDTO(CreateRequestDTO):
    """DTO for accepting a job."""

    job_id: str = Field(min_length=1, max_length=64, description="Accepted job ID")
    job_taker_email: EmailStr = Field(description="Owner of the accepted task")
    job_title: Optional[str] = Field(default=None, max_length=200)
    job_category: Optional[str] = Field(default=None, max_length=100)
    employer_email: Optional[EmailStr] = Field(default=None)
    deadline: Optional[str] = Field(default=None, max_length=64)
    min_price: Optional[float] = Field(default=None, ge=0)
    max_price: Optional[float] = Field(default=None, ge=0)
    cover_image: Optional[str] = Field(default=None, max_length=2048)
    accepted_at: Optional[datetime] = Field(default=None, description="Defaults to the time of acceptance")

    normalize_emails = field_validator("job_taker_email", "employer_email")(normalize_email)


class AcceptedTaskResponseDTO(ResponseDTO):
    """DTO for accepted task responses."""

    job_id: str
    job_taker_email: str
    job_title: Optional[str] = None
    job_category: Optional[str] = None
    employer_email: Optional[str] = None
    deadline: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    cover_image: Optional[str] = None
    accepted_at: datetime

    @classmethod
    def from_domain(cls, task: AcceptedTask) -> "AcceptedTaskResponseDTO":
        return cls(
            id=task.id,
            job_id=task.job_id,
            job_taker_email=task.job_taker_email,
            job_title=task.job_title,
            job_category=task.job_category,
            employer_email=task.employer_email,
            deadline=task.deadline,
            min_price=task.min_price,
            max_price=task.max_price,
            cover_image=task.cover_image,
            accepted_at=task.accepted_at
        )
