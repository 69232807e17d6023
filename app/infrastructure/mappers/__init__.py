"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and MongoDB documents.
"""

from .job_mapper import JobMapper
from .accepted_task_mapper import AcceptedTaskMapper
from .object_ids import to_object_id, from_object_id

__all__ = [
    "JobMapper",
    "AcceptedTaskMapper",
    "to_object_id",
    "from_object_id",
]
