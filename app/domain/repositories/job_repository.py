"""
Job repository interface.
Defines the contract for job posting persistence operations.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from app.domain.models.job import JobPosting


class SortDirection(str, Enum):
    """Ordering applied to job listings by posting date."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        """Unrecognised or missing values fall back to newest first."""
        if value == cls.ASC.value:
            return cls.ASC
        return cls.DESC


class JobRepository(ABC):
    """
    Repository interface for JobPosting entities.
    """

    @abstractmethod
    async def save(self, job: JobPosting) -> JobPosting:
        """
        Insert a new job posting.
        Returns the job with its generated ID.
        """
        pass

    @abstractmethod
    async def find_by_id(self, job_id: str) -> Optional[JobPosting]:
        """
        Find a job posting by its ID.
        Returns None if not found or if the ID is not well formed.
        """
        pass

    @abstractmethod
    async def find_all(self, direction: SortDirection = SortDirection.DESC) -> List[JobPosting]:
        """
        List every job posting ordered by posting date.
        """
        pass

    @abstractmethod
    async def find_by_employer(self, employer_email: str) -> List[JobPosting]:
        """
        Find all job postings owned by an employer.
        """
        pass

    @abstractmethod
    async def update(self, job: JobPosting) -> bool:
        """
        Persist the mutable fields of an existing job posting.
        Returns True if the stored document changed.
        """
        pass

    @abstractmethod
    async def delete(self, job_id: str) -> bool:
        """
        Delete a job posting by ID.
        Returns True if deleted, False if not found.
        """
        pass
