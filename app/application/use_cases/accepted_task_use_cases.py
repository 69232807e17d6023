"""
Accepted task use cases for the application layer.
"""

import logging
from typing import List, Union

from app.application.use_cases.base_use_case import (
    AuthorizedUseCase, CommandUseCase, QueryUseCase
)
from app.application.dto.accepted_task_dto import (
    CreateAcceptedTaskRequestDTO, AcceptedTaskResponseDTO
)
from app.application.dto.result_dto import (
    InsertResultDTO, DeleteResultDTO, AlreadyAcceptedResponseDTO
)
from app.domain.models.accepted_task import AcceptedTask
from app.domain.models.base import DuplicateEntityError
from app.domain.repositories.accepted_task_repository import AcceptedTaskRepository


logger = logging.getLogger(__name__)

AcceptResult = Union[InsertResultDTO, AlreadyAcceptedResponseDTO]


class AcceptTaskUseCase(AuthorizedUseCase, CommandUseCase[CreateAcceptedTaskRequestDTO, AcceptResult]):
    """
    Use case for a job taker accepting a job.

    Accepting the same job twice is a no-op answered with
    AlreadyAcceptedResponseDTO. The storage layer rejects duplicates that
    slip past the lookup under concurrent requests; those get the same answer.
    """

    def __init__(self, task_repository: AcceptedTaskRepository, policy=None):
        super().__init__(policy)
        self.task_repository = task_repository

    async def _check_authorization(self, request: CreateAcceptedTaskRequestDTO) -> None:
        self.policy.require_creator(self.current_identity, request.job_taker_email)

    async def _execute_command_logic(self, request: CreateAcceptedTaskRequestDTO) -> AcceptResult:
        existing = await self.task_repository.find_by_job_and_taker(
            request.job_id, request.job_taker_email
        )
        if existing:
            return AlreadyAcceptedResponseDTO()

        task = AcceptedTask(**request.model_dump(exclude_none=True, by_alias=False))
        try:
            saved_task = await self.task_repository.save(task)
        except DuplicateEntityError:
            logger.info(f"Concurrent accept of job {request.job_id} by {request.job_taker_email}")
            return AlreadyAcceptedResponseDTO()

        return InsertResultDTO(inserted_id=saved_task.id)


class ListTakerTasksUseCase(AuthorizedUseCase, QueryUseCase[str, List[AcceptedTaskResponseDTO]]):
    """List the tasks a job taker accepted, visible only to that taker."""

    def __init__(self, task_repository: AcceptedTaskRepository, policy=None):
        super().__init__(policy)
        self.task_repository = task_repository

    async def _check_authorization(self, request: str) -> None:
        self.policy.require_scope(
            self.current_identity, request, "Forbidden: Cannot access other user's accepted tasks"
        )

    async def _execute_business_logic(self, request: str) -> List[AcceptedTaskResponseDTO]:
        tasks = await self.task_repository.find_by_taker(self.current_identity)
        return [AcceptedTaskResponseDTO.from_domain(task) for task in tasks]


class DeleteAcceptedTaskUseCase(AuthorizedUseCase, CommandUseCase[str, DeleteResultDTO]):
    """Use case for a job taker withdrawing from a task."""

    def __init__(self, task_repository: AcceptedTaskRepository, policy=None):
        super().__init__(policy)
        self.task_repository = task_repository

    async def _execute_command_logic(self, request: str) -> DeleteResultDTO:
        self.policy.require_owner(
            self.current_identity,
            await self.task_repository.find_by_id(request),
            "Forbidden: You cannot perform this action on this task",
            "delete",
            resource_type="Accepted task",
            resource_id=request
        )

        deleted = await self.task_repository.delete(request)
        return DeleteResultDTO(deleted_count=int(deleted))
