"""
Application layer use cases.
Business logic for the freelance marketplace.
"""

from .base_use_case import *
from .job_use_cases import *
from .accepted_task_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "AuthorizedUseCase",

    # Job Use Cases
    "UpdateJobCommand",
    "ListJobsUseCase",
    "GetJobUseCase",
    "ListEmployerJobsUseCase",
    "CreateJobUseCase",
    "UpdateJobUseCase",
    "DeleteJobUseCase",

    # Accepted Task Use Cases
    "AcceptTaskUseCase",
    "ListTakerTasksUseCase",
    "DeleteAcceptedTaskUseCase",
]
