"""
Database infrastructure for the Freelance Hub API.
"""

from .database import (
    ACCEPTED_TASKS_COLLECTION,
    JOBS_COLLECTION,
    DatabaseConnectionError,
    MongoDatabase,
    get_database,
)

__all__ = [
    "ACCEPTED_TASKS_COLLECTION",
    "JOBS_COLLECTION",
    "DatabaseConnectionError",
    "MongoDatabase",
    "get_database",
]
