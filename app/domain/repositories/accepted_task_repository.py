"""
Accepted task repository interface.
Defines the contract for accepted task persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.accepted_task import AcceptedTask


class AcceptedTaskRepository(ABC):
    """
    Repository interface for AcceptedTask entities.
    """

    @abstractmethod
    async def save(self, task: AcceptedTask) -> AcceptedTask:
        """
        Insert a new accepted task.
        Raises DuplicateEntityError if the (job_id, job_taker_email) pair already exists.
        """
        pass

    @abstractmethod
    async def find_by_id(self, task_id: str) -> Optional[AcceptedTask]:
        """
        Find an accepted task by its ID.
        Returns None if not found or if the ID is not well formed.
        """
        pass

    @abstractmethod
    async def find_by_job_and_taker(self, job_id: str, job_taker_email: str) -> Optional[AcceptedTask]:
        """
        Find the acceptance of a job by a specific taker.
        """
        pass

    @abstractmethod
    async def find_by_taker(self, job_taker_email: str) -> List[AcceptedTask]:
        """
        Find all tasks accepted by a job taker.
        """
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """
        Delete an accepted task by ID.
        Returns True if deleted, False if not found.
        """
        pass
