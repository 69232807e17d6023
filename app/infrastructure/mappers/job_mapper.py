"""
Job mapper for converting between domain entities and MongoDB documents.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import TypeAdapter

from app.domain.models.job import JobPosting, MUTABLE_JOB_FIELDS
from app.infrastructure.mappers.object_ids import from_object_id


# Accepts ISO-8601 strings including a trailing "Z"
DATETIME_ADAPTER = TypeAdapter(datetime)

# Domain attribute -> document field
FIELD_NAMES = {
    "employer_email": "employerEmail",
    "job_title": "jobTitle",
    "job_category": "jobCategory",
    "description": "description",
    "cover_image": "coverImage",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "deadline": "deadline",
    "posting_date": "postingDate",
}


class JobMapper:
    """Maps between JobPosting domain entity and its MongoDB document."""

    def domain_to_document(self, job: JobPosting) -> Dict[str, Any]:
        """Convert JobPosting to a document. The _id is left to the driver."""
        return {
            document_field: getattr(job, attr)
            for attr, document_field in FIELD_NAMES.items()
        }

    def mutable_fields_to_document(self, job: JobPosting) -> Dict[str, Any]:
        """Build the $set body for an owner update."""
        return {FIELD_NAMES[attr]: getattr(job, attr) for attr in MUTABLE_JOB_FIELDS}

    def document_to_domain(self, document: Dict[str, Any]) -> JobPosting:
        """Convert a MongoDB document to JobPosting."""
        values = {
            attr: document.get(document_field)
            for attr, document_field in FIELD_NAMES.items()
            if document.get(document_field) is not None
        }

        posting_date = values.get("posting_date")
        if isinstance(posting_date, str):
            # Older documents stored the posting date as an ISO string;
            # manage_db.py dates converts them
            posting_date = values["posting_date"] = DATETIME_ADAPTER.validate_python(posting_date)
        if posting_date is not None and posting_date.tzinfo is None:
            values["posting_date"] = posting_date.replace(tzinfo=timezone.utc)

        job = JobPosting(**values)
        job.id = from_object_id(document.get("_id"))
        return job
