"""
Job repository implementation using Motor.
"""

import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from app.domain.models.job import JobPosting
from app.domain.repositories.job_repository import JobRepository, SortDirection
from app.infrastructure.db.database import JOBS_COLLECTION
from app.infrastructure.mappers.job_mapper import JobMapper
from app.infrastructure.mappers.object_ids import from_object_id, to_object_id


logger = logging.getLogger(__name__)


class MongoJobRepository(JobRepository):
    """MongoDB implementation of job repository."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[JOBS_COLLECTION]
        self.mapper = JobMapper()

    async def save(self, job: JobPosting) -> JobPosting:
        """Insert a new job posting."""
        document = self.mapper.domain_to_document(job)
        result = await self.collection.insert_one(document)
        job.id = from_object_id(result.inserted_id)
        logger.debug(f"Inserted job {job.id} for {job.employer_email}")
        return job

    async def find_by_id(self, job_id: str) -> Optional[JobPosting]:
        """Get job by ID."""
        object_id = to_object_id(job_id)
        if object_id is None:
            return None

        document = await self.collection.find_one({"_id": object_id})
        if not document:
            return None

        return self.mapper.document_to_domain(document)

    async def find_all(self, direction: SortDirection = SortDirection.DESC) -> List[JobPosting]:
        """List all jobs ordered by posting date."""
        order = ASCENDING if direction is SortDirection.ASC else DESCENDING
        cursor = self.collection.find().sort("postingDate", order)
        return [self.mapper.document_to_domain(document) async for document in cursor]

    async def find_by_employer(self, employer_email: str) -> List[JobPosting]:
        """Get jobs by employer."""
        cursor = self.collection.find({"employerEmail": employer_email})
        return [self.mapper.document_to_domain(document) async for document in cursor]

    async def update(self, job: JobPosting) -> bool:
        """Write the owner-editable fields back to the document."""
        result = await self.collection.update_one(
            {"_id": to_object_id(job.id)},
            {"$set": self.mapper.mutable_fields_to_document(job)}
        )
        return result.modified_count > 0

    async def delete(self, job_id: str) -> bool:
        """Delete job by ID."""
        object_id = to_object_id(job_id)
        if object_id is None:
            return False

        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0
