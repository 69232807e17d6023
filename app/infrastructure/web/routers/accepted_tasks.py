"""
Accepted task router.
"""

from typing import Annotated, List, Union

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.infrastructure.auth import CurrentIdentity, Policy
from app.infrastructure.db.database import get_database
from app.infrastructure.repositories.accepted_task_repository import MongoAcceptedTaskRepository
from app.domain.repositories.accepted_task_repository import AcceptedTaskRepository
from app.application.use_cases.accepted_task_use_cases import (
    AcceptTaskUseCase,
    ListTakerTasksUseCase,
    DeleteAcceptedTaskUseCase
)
from app.application.dto.accepted_task_dto import (
    CreateAcceptedTaskRequestDTO,
    AcceptedTaskResponseDTO
)
from app.application.dto.result_dto import (
    InsertResultDTO, DeleteResultDTO, AlreadyAcceptedResponseDTO
)


router = APIRouter(prefix="/accepted-tasks")


def get_accepted_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> AcceptedTaskRepository:
    """Dependency to get accepted task repository."""
    return MongoAcceptedTaskRepository(db)


Repository = Annotated[AcceptedTaskRepository, Depends(get_accepted_task_repository)]


@router.post("", response_model=Union[InsertResultDTO, AlreadyAcceptedResponseDTO])
async def accept_task(
    request: CreateAcceptedTaskRequestDTO,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """
    Accept a job.

    - **jobId**: Job being accepted
    - **jobTakerEmail**: Must match the session identity

    Accepting the same job again answers `{"message": "Already accepted", "insertedId": null}`.
    """
    use_case = AcceptTaskUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(request)


@router.get("/taker/{email}", response_model=List[AcceptedTaskResponseDTO])
async def list_taker_tasks(
    email: str,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """List the tasks accepted by the authenticated job taker."""
    use_case = ListTakerTasksUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(email)


@router.delete("/{task_id}", response_model=DeleteResultDTO)
async def delete_accepted_task(
    task_id: str,
    identity: CurrentIdentity,
    repository: Repository,
    policy: Policy
):
    """Withdraw from an accepted task. Only the job taker may delete it."""
    use_case = DeleteAcceptedTaskUseCase(repository, policy).set_current_user(identity)
    return await use_case.execute(task_id)
