"""
Accepted task mapper for converting between domain entities and MongoDB documents.
"""

from datetime import timezone
from typing import Any, Dict

from app.domain.models.accepted_task import AcceptedTask
from app.infrastructure.mappers.object_ids import from_object_id


FIELD_NAMES = {
    "job_id": "jobId",
    "job_taker_email": "jobTakerEmail",
    "job_title": "jobTitle",
    "job_category": "jobCategory",
    "employer_email": "employerEmail",
    "deadline": "deadline",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "cover_image": "coverImage",
    "accepted_at": "acceptedAt",
}


class AcceptedTaskMapper:
    """Maps between AcceptedTask domain entity and its MongoDB document."""

    def domain_to_document(self, task: AcceptedTask) -> Dict[str, Any]:
        return {
            document_field: getattr(task, attr)
            for attr, document_field in FIELD_NAMES.items()
        }

    def document_to_domain(self, document: Dict[str, Any]) -> AcceptedTask:
        values = {
            attr: document.get(document_field)
            for attr, document_field in FIELD_NAMES.items()
            if document.get(document_field) is not None
        }

        accepted_at = values.get("accepted_at")
        if accepted_at is not None and accepted_at.tzinfo is None:
            values["accepted_at"] = accepted_at.replace(tzinfo=timezone.utc)

        task = AcceptedTask(**values)
        task.id = from_object_id(document.get("_id"))
        return task
