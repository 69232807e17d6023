"""
Job posting router.
Public listing plus owner-guarded CRUD for job postings.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.infrastructure.auth import CurrentIdentity, Policy
from app.infrastructure.db.database import get_database
from app.infrastructure.repositories.job_repository import MongoJobRepository
from app.domain.repositories.job_repository import JobRepository, SortDirection
from app.application.use_cases.job_use_cases import (
    ListJobsUseCase,
    GetJobUseCase,
    ListEmployerJobsUseCase,
    CreateJobUseCase,
    UpdateJobUseCase,
    UpdateJobCommand,
    DeleteJobUseCase
)
from app.application.dto.job_dto import (
    CreateJobRequestDTO,
    UpdateJobRequestDTO,
    JobResponseDTO
)
from app.application.dto.result_dto import (
    InsertResultDTO, UpdateResultDTO, DeleteResultDTO
)


router = APIRouter()


def get_job_repository(db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]) -> JobRepository:
    """Dependency to get job repository."""
    return MongoJobRepository(db)


Repository = Annotated[JobRepository, Depends(get_job_repository)]


@router.get("/jobs", response_model=List[JobResponseDTO])
async def list_jobs(
    repository: Repository,
    sort: Optional[str] = Query(None, description="Posting date order (asc/desc)")
):
    """
    List every job posting.

    - **sort**: `asc` for oldest first; anything else returns newest first
    """
    return await ListJobsUseCase(repository).execute(SortDirection.parse(sort))


@router.get("/job/{job_id}", response_model=JobResponseDTO)
async def get_job(job_id: str, identity: CurrentIdentity, repository: Repository):
    """Get one job posting by ID."""
    return await GetJobUseCase(repository).execute(job_id)


@router.get("/jobs/employer/{email}", response_model=List[JobResponseDTO])
async def list_employer_jobs(
    email: str,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """List the postings of the authenticated employer."""
    use_case = ListEmployerJobsUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(email)


@router.post("/jobs", response_model=InsertResultDTO)
async def create_job(
    request: CreateJobRequestDTO,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """
    Create a job posting.

    - **employerEmail**: Must match the session identity
    - **jobTitle**: Job title (required)
    - **minPrice** / **maxPrice**: Budget range
    """
    use_case = CreateJobUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(request)


@router.put("/job/{job_id}", response_model=UpdateResultDTO)
async def update_job(
    job_id: str,
    request: UpdateJobRequestDTO,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """Update the fields sent in the body. Only the owner may update."""
    use_case = UpdateJobUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(UpdateJobCommand(job_id=job_id, changes=request))


@router.delete("/job/{job_id}", response_model=DeleteResultDTO)
async def delete_job(
    job_id: str,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """Delete a job posting. Only the owner may delete."""
    use_case = DeleteJobUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(job_id)
