"""
Shared fixtures: test settings, in-memory repositories and an app wired to them.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.config import Settings
from app.domain.models.accepted_task import AcceptedTask
from app.domain.models.base import DuplicateEntityError, Email
from app.domain.models.job import JobPosting
from app.domain.repositories.accepted_task_repository import AcceptedTaskRepository
from app.domain.repositories.job_repository import JobRepository, SortDirection
from app.infrastructure.auth import JWTHandler
from app.infrastructure.web.routers.accepted_tasks import get_accepted_task_repository
from app.infrastructure.web.routers.jobs import get_job_repository
from app.main import create_application


TEST_SECRET = "test-secret"


class InMemoryJobRepository(JobRepository):
    """Dict backed job repository with the same semantics as the Mongo one."""

    def __init__(self):
        self.jobs: Dict[str, JobPosting] = {}

    async def save(self, job: JobPosting) -> JobPosting:
        job.id = str(ObjectId())
        self.jobs[job.id] = job
        return job

    async def find_by_id(self, job_id: str) -> Optional[JobPosting]:
        return self.jobs.get(job_id)

    async def find_all(self, direction: SortDirection = SortDirection.DESC) -> List[JobPosting]:
        return sorted(
            self.jobs.values(),
            key=lambda job: job.posting_date,
            reverse=direction is SortDirection.DESC
        )

    async def find_by_employer(self, employer_email: str) -> List[JobPosting]:
        return [job for job in self.jobs.values() if job.employer_email == employer_email]

    async def update(self, job: JobPosting) -> bool:
        if job.id not in self.jobs:
            return False
        self.jobs[job.id] = job
        return True

    async def delete(self, job_id: str) -> bool:
        return self.jobs.pop(job_id, None) is not None


class InMemoryAcceptedTaskRepository(AcceptedTaskRepository):
    """Dict backed accepted task repository enforcing the (jobId, taker) key."""

    def __init__(self):
        self.tasks: Dict[str, AcceptedTask] = {}

    async def save(self, task: AcceptedTask) -> AcceptedTask:
        if any(existing.acceptance_key == task.acceptance_key for existing in self.tasks.values()):
            raise DuplicateEntityError("AcceptedTask", "jobId", task.job_id)
        task.id = str(ObjectId())
        self.tasks[task.id] = task
        return task

    async def find_by_id(self, task_id: str) -> Optional[AcceptedTask]:
        return self.tasks.get(task_id)

    async def find_by_job_and_taker(self, job_id: str, job_taker_email: str) -> Optional[AcceptedTask]:
        key = (job_id, Email.normalize(job_taker_email))
        for task in self.tasks.values():
            if task.acceptance_key == key:
                return task
        return None

    async def find_by_taker(self, job_taker_email: str) -> List[AcceptedTask]:
        return [task for task in self.tasks.values() if task.job_taker_email == job_taker_email]

    async def delete(self, task_id: str) -> bool:
        return self.tasks.pop(task_id, None) is not None


def make_job(employer_email: str = "a@x.com", **overrides) -> JobPosting:
    values = {
        "employer_email": employer_email,
        "job_title": "Logo design",
        "job_category": "design",
        "description": "A logo for a bakery",
        "min_price": 50.0,
        "max_price": 150.0,
        "deadline": "2030-01-01",
    }
    values.update(overrides)
    return JobPosting(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="testing", access_token_secret=TEST_SECRET)


@pytest.fixture
def jwt_handler(settings) -> JWTHandler:
    return JWTHandler(settings)


@pytest.fixture
def job_repository() -> InMemoryJobRepository:
    return InMemoryJobRepository()


@pytest.fixture
def task_repository() -> InMemoryAcceptedTaskRepository:
    return InMemoryAcceptedTaskRepository()


@pytest.fixture
def app(settings, job_repository, task_repository):
    application = create_application(settings)
    application.dependency_overrides[get_job_repository] = lambda: job_repository
    application.dependency_overrides[get_accepted_task_repository] = lambda: task_repository
    return application


@pytest.fixture
def client(app) -> TestClient:
    # Not used as a context manager: the lifespan would connect to MongoDB
    return TestClient(app)


@pytest.fixture
def login(client):
    """Log the test client in as the given email through POST /jwt."""
    def _login(email: str):
        response = client.post("/jwt", json={"email": email})
        assert response.status_code == 200
        return response
    return _login


@pytest.fixture
def expired_token(settings) -> str:
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    return JWTHandler(settings, clock=lambda: two_hours_ago).issue_token("a@x.com")


@pytest.fixture
def job_factory():
    return make_job
