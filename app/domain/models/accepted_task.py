"""
Accepted task domain model.
Records a job taker committing to a job posting.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.domain.models.base import BaseEntity, Email, ValidationError, utcnow


@dataclass(eq=False)
class AcceptedTask(BaseEntity):
    """
    A job taker's acceptance of a job posting.

    job_id references a JobPosting but is not enforced; the job fields are a
    snapshot taken when the task was accepted. At most one AcceptedTask
    exists per (job_id, job_taker_email).
    """

    job_id: str
    job_taker_email: str
    job_title: Optional[str] = None
    job_category: Optional[str] = None
    employer_email: Optional[str] = None
    deadline: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    cover_image: Optional[str] = None
    accepted_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.validate()

    @property
    def owner_email(self) -> str:
        return self.job_taker_email

    @property
    def acceptance_key(self) -> tuple:
        """Uniqueness key for accepted tasks."""
        return (self.job_id, Email.normalize(self.job_taker_email))

    def validate(self) -> None:
        if not self.job_id or not self.job_id.strip():
            raise ValidationError("Job id is required", "job_id")

        Email(self.job_taker_email)

        if self.employer_email:
            Email(self.employer_email)
