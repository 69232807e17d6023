"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .job_repository import JobRepository, SortDirection
from .accepted_task_repository import AcceptedTaskRepository

__all__ = [
    "JobRepository",
    "SortDirection",
    "AcceptedTaskRepository",
]
