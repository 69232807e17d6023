"""
Database configuration and connection management.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, IndexModel
from pymongo.errors import PyMongoError

from app.config import Settings


logger = logging.getLogger(__name__)

JOBS_COLLECTION = "jobs"
ACCEPTED_TASKS_COLLECTION = "acceptedTasks"

INDEXES = {
    JOBS_COLLECTION: [
        IndexModel([("employerEmail", ASCENDING)], name="employerEmail_1"),
        IndexModel([("postingDate", DESCENDING)], name="postingDate_-1"),
    ],
    ACCEPTED_TASKS_COLLECTION: [
        IndexModel(
            [("jobId", ASCENDING), ("jobTakerEmail", ASCENDING)],
            name="jobId_1_jobTakerEmail_1",
            unique=True,
        ),
        IndexModel([("jobTakerEmail", ASCENDING)], name="jobTakerEmail_1"),
    ],
}


class DatabaseConnectionError(RuntimeError):
    """Raised when the MongoDB deployment cannot be reached."""


class MongoDatabase:
    """
    Owns the Motor client for the process.

    Created once at startup and held on app.state; repositories get the
    database handle through get_database().
    """

    def __init__(self, settings: Settings, client: Optional[AsyncIOMotorClient] = None):
        self.settings = settings
        self.client = client or AsyncIOMotorClient(settings.db_uri, **self.client_options(settings))
        self.db: AsyncIOMotorDatabase = self.client[settings.db_name]

    @staticmethod
    def client_options(settings: Settings) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "serverSelectionTimeoutMS": settings.db_timeout_ms,
            "connectTimeoutMS": settings.db_timeout_ms,
            "socketTimeoutMS": settings.db_timeout_ms,
            "tz_aware": True,
        }
        if settings.db_tls_allow_invalid_certificates:
            options["tlsAllowInvalidCertificates"] = True
        return options

    async def connect(self) -> None:
        """
        Ping the deployment, make sure indexes exist and convert string
        posting dates.

        Raises:
            DatabaseConnectionError: If the server does not answer in time
        """
        try:
            await self.ping()
            await self.ensure_indexes()
            await self.convert_legacy_posting_dates()
        except PyMongoError as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            raise DatabaseConnectionError(str(e)) from e
        logger.info("Pinged your deployment. Successfully connected to MongoDB!")

    async def ping(self) -> Dict[str, Any]:
        return await self.client.admin.command("ping")

    async def ensure_indexes(self) -> None:
        for collection, indexes in INDEXES.items():
            await self.db[collection].create_indexes(indexes)
            logger.debug(f"Ensured {len(indexes)} indexes on {collection}")

    async def convert_legacy_posting_dates(self) -> int:
        """
        Rewrite string postingDate values as BSON dates.

        MongoDB orders strings before dates regardless of value, so mixed
        collections do not sort by posting date until this has run.

        Returns:
            Number of job documents converted
        """
        result = await self.db[JOBS_COLLECTION].update_many(
            {"postingDate": {"$type": "string"}},
            [{"$set": {"postingDate": {"$toDate": "$postingDate"}}}]
        )
        logger.info(f"Converted {result.modified_count} string posting dates")
        return result.modified_count

    async def is_healthy(self) -> bool:
        try:
            await self.ping()
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    async def collection_stats(self) -> Dict[str, int]:
        return {
            name: await self.db[name].count_documents({})
            for name in INDEXES
        }

    def close(self) -> None:
        self.client.close()


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    Dependency function to get the database handle of the running app.
    """
    return request.app.state.mongo.db
