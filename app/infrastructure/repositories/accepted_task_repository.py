"""
Accepted task repository implementation using Motor.
"""

import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.domain.models.accepted_task import AcceptedTask
from app.domain.models.base import DuplicateEntityError
from app.domain.repositories.accepted_task_repository import AcceptedTaskRepository
from app.infrastructure.db.database import ACCEPTED_TASKS_COLLECTION
from app.infrastructure.mappers.accepted_task_mapper import AcceptedTaskMapper
from app.infrastructure.mappers.object_ids import from_object_id, to_object_id


logger = logging.getLogger(__name__)


class MongoAcceptedTaskRepository(AcceptedTaskRepository):
    """MongoDB implementation of accepted task repository."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[ACCEPTED_TASKS_COLLECTION]
        self.mapper = AcceptedTaskMapper()

    async def save(self, task: AcceptedTask) -> AcceptedTask:
        """Insert a new accepted task, relying on the unique (jobId, jobTakerEmail) index."""
        document = self.mapper.domain_to_document(task)
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            raise DuplicateEntityError("AcceptedTask", "jobId", task.job_id)

        task.id = from_object_id(result.inserted_id)
        return task

    async def find_by_id(self, task_id: str) -> Optional[AcceptedTask]:
        object_id = to_object_id(task_id)
        if object_id is None:
            return None

        document = await self.collection.find_one({"_id": object_id})
        if not document:
            return None

        return self.mapper.document_to_domain(document)

    async def find_by_job_and_taker(self, job_id: str, job_taker_email: str) -> Optional[AcceptedTask]:
        document = await self.collection.find_one({
            "jobId": job_id,
            "jobTakerEmail": job_taker_email
        })
        if not document:
            return None

        return self.mapper.document_to_domain(document)

    async def find_by_taker(self, job_taker_email: str) -> List[AcceptedTask]:
        cursor = self.collection.find({"jobTakerEmail": job_taker_email})
        return [self.mapper.document_to_domain(document) async for document in cursor]

    async def delete(self, task_id: str) -> bool:
        object_id = to_object_id(task_id)
        if object_id is None:
            return False

        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0
