"""
Unit tests for request and response DTOs.
"""

import pytest
from pydantic import ValidationError

from app.application.dto import (
    AlreadyAcceptedResponseDTO,
    CreateJobRequestDTO,
    InsertResultDTO,
    JobResponseDTO,
    TokenRequestDTO,
    UpdateJobRequestDTO,
)


class TestCreateJobRequestDTO:
    """Test cases for CreateJobRequestDTO."""

    def test_accepts_camel_case_and_normalizes_email(self):
        dto = CreateJobRequestDTO.model_validate({"employerEmail": " A@X.com ", "jobTitle": "Logo"})

        assert dto.employer_email == "a@x.com"
        assert dto.posting_date is None

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            CreateJobRequestDTO.model_validate({"employerEmail": "a@x.com", "jobTitle": "Logo", "owner": "x"})

    def test_rejects_inverted_price_range(self):
        with pytest.raises(ValidationError, match="minPrice cannot exceed maxPrice"):
            CreateJobRequestDTO.model_validate({
                "employerEmail": "a@x.com", "jobTitle": "Logo", "minPrice": 5, "maxPrice": 1
            })


class TestUpdateJobRequestDTO:
    """Test cases for UpdateJobRequestDTO."""

    def test_changes_contain_only_sent_fields(self):
        dto = UpdateJobRequestDTO.model_validate({"jobTitle": "New", "coverImage": None})

        assert dto.changes() == {"job_title": "New", "cover_image": None}

    def test_owner_cannot_be_sent(self):
        with pytest.raises(ValidationError):
            UpdateJobRequestDTO.model_validate({"employerEmail": "b@x.com"})


class TestResponseDTOs:
    """Test cases for wire shapes of responses."""

    def test_job_response_uses_mongo_id_key(self, job_factory):
        job = job_factory()
        job.id = "64b7f0c2a1b2c3d4e5f60718"

        body = JobResponseDTO.from_domain(job).model_dump(by_alias=True)

        assert body["_id"] == job.id
        assert body["employerEmail"] == "a@x.com"
        assert "postingDate" in body

    def test_result_shapes(self):
        assert InsertResultDTO(inserted_id="abc").model_dump(by_alias=True) == {
            "acknowledged": True, "insertedId": "abc"
        }
        assert AlreadyAcceptedResponseDTO().model_dump(by_alias=True) == {
            "message": "Already accepted", "insertedId": None
        }

    def test_token_request_ignores_extra_user_fields(self):
        dto = TokenRequestDTO.model_validate({"email": "A@x.com", "displayName": "A"})

        assert dto.email == "a@x.com"
