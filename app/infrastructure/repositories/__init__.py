"""
Infrastructure repositories module.
Contains MongoDB implementations of domain repositories.
"""

from .job_repository import MongoJobRepository
from .accepted_task_repository import MongoAcceptedTaskRepository

__all__ = [
    "MongoJobRepository",
    "MongoAcceptedTaskRepository",
]
