"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .result_dto import *
from .auth_dto import *
from .job_dto import *
from .accepted_task_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "HealthCheckResponseDTO",

    # Write results
    "InsertResultDTO",
    "UpdateResultDTO",
    "DeleteResultDTO",
    "AlreadyAcceptedResponseDTO",

    # Session DTOs
    "TokenRequestDTO",
    "SessionResponseDTO",

    # Job DTOs
    "CreateJobRequestDTO",
    "UpdateJobRequestDTO",
    "JobResponseDTO",

    # Accepted task DTOs
    "CreateAcceptedTaskRequestDTO",
    "AcceptedTaskResponseDTO",
]
