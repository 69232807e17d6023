"""
Job use cases for the application layer.
Implements the ownership rules around job posting operations.
"""

import logging
from dataclasses import dataclass
from typing import List

from app.application.use_cases.base_use_case import (
    AuthorizedUseCase, CommandUseCase, QueryUseCase
)
from app.application.dto.job_dto import (
    CreateJobRequestDTO, UpdateJobRequestDTO, JobResponseDTO
)
from app.application.dto.result_dto import (
    InsertResultDTO, UpdateResultDTO, DeleteResultDTO
)
from app.domain.models.base import EntityNotFoundError
from app.domain.models.job import JobPosting
from app.domain.repositories.job_repository import JobRepository, SortDirection


logger = logging.getLogger(__name__)


@dataclass
class UpdateJobCommand:
    job_id: str
    changes: UpdateJobRequestDTO


class ListJobsUseCase(QueryUseCase[SortDirection, List[JobResponseDTO]]):
    """Public listing of every job posting."""

    def __init__(self, job_repository: JobRepository):
        super().__init__()
        self.job_repository = job_repository

    async def _execute_business_logic(self, request: SortDirection) -> List[JobResponseDTO]:
        jobs = await self.job_repository.find_all(request)
        return [JobResponseDTO.from_domain(job) for job in jobs]


class GetJobUseCase(QueryUseCase[str, JobResponseDTO]):
    """Fetch one job posting for any authenticated user."""

    def __init__(self, job_repository: JobRepository):
        super().__init__()
        self.job_repository = job_repository

    async def _execute_business_logic(self, request: str) -> JobResponseDTO:
        job = await self.job_repository.find_by_id(request)
        if job is None:
            raise EntityNotFoundError("Job", request)
        return JobResponseDTO.from_domain(job)


class ListEmployerJobsUseCase(AuthorizedUseCase, QueryUseCase[str, List[JobResponseDTO]]):
    """List the postings of one employer, visible only to that employer."""

    def __init__(self, job_repository: JobRepository, policy=None):
        super().__init__(policy)
        self.job_repository = job_repository

    async def _check_authorization(self, request: str) -> None:
        self.policy.require_scope(
            self.current_identity, request, "Forbidden: Cannot access other user's jobs"
        )

    async def _execute_business_logic(self, request: str) -> List[JobResponseDTO]:
        jobs = await self.job_repository.find_by_employer(self.current_identity)
        return [JobResponseDTO.from_domain(job) for job in jobs]


class CreateJobUseCase(AuthorizedUseCase, CommandUseCase[CreateJobRequestDTO, InsertResultDTO]):
    """Use case for creating a new job posting."""

    def __init__(self, job_repository: JobRepository, policy=None):
        super().__init__(policy)
        self.job_repository = job_repository

    async def _check_authorization(self, request: CreateJobRequestDTO) -> None:
        self.policy.require_creator(self.current_identity, request.employer_email)

    async def _execute_command_logic(self, request: CreateJobRequestDTO) -> InsertResultDTO:
        fields = request.model_dump(exclude_none=True, by_alias=False)
        job = JobPosting(**fields)

        saved_job = await self.job_repository.save(job)
        logger.info(f"Job {saved_job.id} created by {self.current_identity}")

        return InsertResultDTO(inserted_id=saved_job.id)


class UpdateJobUseCase(AuthorizedUseCase, CommandUseCase[UpdateJobCommand, UpdateResultDTO]):
    """Use case for the owner editing a job posting."""

    def __init__(self, job_repository: JobRepository, policy=None):
        super().__init__(policy)
        self.job_repository = job_repository

    async def _execute_command_logic(self, request: UpdateJobCommand) -> UpdateResultDTO:
        job = self.policy.require_owner(
            self.current_identity,
            await self.job_repository.find_by_id(request.job_id),
            "Forbidden: You cannot update this job",
            "update",
            resource_type="Job",
            resource_id=request.job_id
        )

        changed = job.apply_changes(request.changes.changes())
        modified = await self.job_repository.update(job) if changed else False

        return UpdateResultDTO(matched_count=1, modified_count=int(modified))


class DeleteJobUseCase(AuthorizedUseCase, CommandUseCase[str, DeleteResultDTO]):
    """Use case for the owner deleting a job posting."""

    def __init__(self, job_repository: JobRepository, policy=None):
        super().__init__(policy)
        self.job_repository = job_repository

    async def _execute_command_logic(self, request: str) -> DeleteResultDTO:
        self.policy.require_owner(
            self.current_identity,
            await self.job_repository.find_by_id(request),
            "Forbidden: You cannot delete this job",
            "delete",
            resource_type="Job",
            resource_id=request
        )

        deleted = await self.job_repository.delete(request)
        if deleted:
            logger.info(f"Job {request} deleted by {self.current_identity}")

        return DeleteResultDTO(deleted_count=int(deleted))
