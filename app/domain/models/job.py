"""
Job posting domain model.
Represents a job offered by an employer on the marketplace.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any

from app.domain.models.base import BaseEntity, Email, ValidationError, utcnow


# Fields an owner may change after the posting exists. employer_email and
# posting_date are fixed at creation.
MUTABLE_JOB_FIELDS = (
    "job_title",
    "job_category",
    "description",
    "cover_image",
    "min_price",
    "max_price",
    "deadline",
)


@dataclass(eq=False)
class JobPosting(BaseEntity):
    """A job posting owned by the employer who created it."""

    employer_email: str
    job_title: str
    job_category: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    deadline: Optional[str] = None
    posting_date: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        self.validate()

    @property
    def owner_email(self) -> str:
        return self.employer_email

    def validate(self) -> None:
        """Validate job posting business rules."""
        Email(self.employer_email)

        if not self.job_title or not self.job_title.strip():
            raise ValidationError("Job title is required", "job_title")

        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValidationError(f"{name} cannot be negative", name)

        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValidationError("min_price cannot exceed max_price", "min_price")

    def apply_changes(self, changes: Dict[str, Any]) -> bool:
        """
        Apply owner edits to the mutable fields.

        Returns True when at least one stored value changed. Unknown or
        immutable field names raise ValidationError.
        """
        unknown = set(changes) - set(MUTABLE_JOB_FIELDS)
        if unknown:
            raise ValidationError(
                f"Cannot update fields: {', '.join(sorted(unknown))}",
                sorted(unknown)[0]
            )

        previous = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)

        try:
            self.validate()
        except ValidationError:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

        return any(previous[name] != changes[name] for name in changes)
