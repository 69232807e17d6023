"""
Unit tests for accepted task use cases.
"""

import pytest

from app.application.dto.accepted_task_dto import CreateAcceptedTaskRequestDTO
from app.application.dto.result_dto import AlreadyAcceptedResponseDTO, InsertResultDTO
from app.application.use_cases import (
    AcceptTaskUseCase,
    DeleteAcceptedTaskUseCase,
    ListTakerTasksUseCase,
)
from app.domain.models.accepted_task import AcceptedTask
from app.domain.models.base import DuplicateEntityError, ForbiddenError


def accept_request(job_id="J1", taker="t@x.com"):
    return CreateAcceptedTaskRequestDTO.model_validate({
        "jobId": job_id,
        "jobTakerEmail": taker,
        "jobTitle": "Logo design",
        "employerEmail": "a@x.com",
    })


class TestAcceptTaskUseCase:
    """Test cases for AcceptTaskUseCase."""

    @pytest.mark.asyncio
    async def test_accept_twice_is_a_no_op(self, task_repository):
        """Test the second accept of the same job returns the already-accepted signal."""
        use_case = AcceptTaskUseCase(task_repository).set_current_user("t@x.com")

        first = await use_case.execute(accept_request())
        second = await use_case.execute(accept_request())

        assert isinstance(first, InsertResultDTO)
        assert first.inserted_id is not None
        assert isinstance(second, AlreadyAcceptedResponseDTO)
        assert second.message == "Already accepted"
        assert second.inserted_id is None
        assert len(task_repository.tasks) == 1

    @pytest.mark.asyncio
    async def test_different_jobs_are_separate_tasks(self, task_repository):
        use_case = AcceptTaskUseCase(task_repository).set_current_user("t@x.com")

        await use_case.execute(accept_request("J1"))
        await use_case.execute(accept_request("J2"))

        assert len(task_repository.tasks) == 2

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_is_a_no_op(self, task_repository):
        """Test a unique index violation after the lookup maps to the same signal."""
        class RacingRepository(type(task_repository)):
            async def find_by_job_and_taker(self, job_id, job_taker_email):
                return None

            async def save(self, task):
                raise DuplicateEntityError("AcceptedTask", "jobId", task.job_id)

        use_case = AcceptTaskUseCase(RacingRepository()).set_current_user("t@x.com")

        result = await use_case.execute(accept_request())

        assert isinstance(result, AlreadyAcceptedResponseDTO)

    @pytest.mark.asyncio
    async def test_accept_for_someone_else_is_forbidden(self, task_repository):
        use_case = AcceptTaskUseCase(task_repository).set_current_user("x@x.com")

        with pytest.raises(ForbiddenError, match="Email mismatch"):
            await use_case.execute(accept_request())

        assert task_repository.tasks == {}


class TestListTakerTasksUseCase:
    """Test cases for ListTakerTasksUseCase."""

    @pytest.mark.asyncio
    async def test_lists_own_tasks(self, task_repository):
        await task_repository.save(AcceptedTask(job_id="J1", job_taker_email="t@x.com"))
        await task_repository.save(AcceptedTask(job_id="J1", job_taker_email="u@x.com"))

        tasks = await ListTakerTasksUseCase(task_repository).set_current_user("t@x.com").execute("t@x.com")

        assert [task.job_taker_email for task in tasks] == ["t@x.com"]

    @pytest.mark.asyncio
    async def test_other_taker_is_forbidden(self, task_repository):
        use_case = ListTakerTasksUseCase(task_repository).set_current_user("t@x.com")

        with pytest.raises(ForbiddenError, match="Cannot access other user's accepted tasks"):
            await use_case.execute("u@x.com")


class TestDeleteAcceptedTaskUseCase:
    """Test cases for DeleteAcceptedTaskUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes(self, task_repository):
        task = await task_repository.save(AcceptedTask(job_id="J1", job_taker_email="t@x.com"))

        result = await DeleteAcceptedTaskUseCase(task_repository).set_current_user("t@x.com").execute(task.id)

        assert result.deleted_count == 1
        assert task_repository.tasks == {}

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, task_repository):
        task = await task_repository.save(AcceptedTask(job_id="J1", job_taker_email="t@x.com"))

        use_case = DeleteAcceptedTaskUseCase(task_repository).set_current_user("u@x.com")
        with pytest.raises(ForbiddenError, match="You cannot perform this action on this task"):
            await use_case.execute(task.id)

        assert task.id in task_repository.tasks
