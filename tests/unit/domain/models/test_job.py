"""
Unit tests for JobPosting domain model.
"""

import pytest
from datetime import datetime

from app.domain.models.base import ValidationError
from app.domain.models.job import JobPosting


class TestJobPosting:
    """Test cases for JobPosting domain model."""

    def test_create_job_success(self, job_factory):
        """Test successful job creation with a default posting date."""
        job = job_factory()

        assert job.employer_email == "a@x.com"
        assert job.owner_email == "a@x.com"
        assert job.job_title == "Logo design"
        assert isinstance(job.posting_date, datetime)
        assert job.posting_date.tzinfo is not None

    def test_create_job_requires_title(self):
        """Test job creation with an empty title."""
        with pytest.raises(ValidationError, match="Job title is required"):
            JobPosting(employer_email="a@x.com", job_title="   ")

    def test_create_job_invalid_email(self):
        """Test job creation with an invalid employer email."""
        with pytest.raises(ValidationError, match="Invalid email format"):
            JobPosting(employer_email="not-an-email", job_title="Logo")

    def test_create_job_invalid_price_range(self):
        """Test that min_price may not exceed max_price."""
        with pytest.raises(ValidationError, match="cannot exceed"):
            JobPosting(employer_email="a@x.com", job_title="Logo", min_price=200, max_price=100)

    def test_create_job_negative_price(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            JobPosting(employer_email="a@x.com", job_title="Logo", min_price=-1)

    def test_apply_changes(self, job_factory):
        """Test owner edits are applied and reported."""
        job = job_factory()

        changed = job.apply_changes({"job_title": "Brand kit", "max_price": 300.0})

        assert changed is True
        assert job.job_title == "Brand kit"
        assert job.max_price == 300.0

    def test_apply_same_values_reports_no_change(self, job_factory):
        job = job_factory()

        assert job.apply_changes({"job_title": "Logo design"}) is False
        assert job.apply_changes({}) is False

    def test_apply_changes_rejects_owner_field(self, job_factory):
        """Test that the owner cannot be reassigned."""
        job = job_factory()

        with pytest.raises(ValidationError, match="employer_email"):
            job.apply_changes({"employer_email": "b@x.com"})

        assert job.employer_email == "a@x.com"

    def test_apply_invalid_changes_rolls_back(self, job_factory):
        """Test that a rejected edit leaves the posting untouched."""
        job = job_factory()

        with pytest.raises(ValidationError):
            job.apply_changes({"job_title": "New", "min_price": 500.0})

        assert job.job_title == "Logo design"
        assert job.min_price == 50.0

    def test_equality_by_id(self, job_factory):
        first = job_factory()
        second = job_factory(job_title="Other")
        first.id = second.id = "64b7f0c2a1b2c3d4e5f60718"

        assert first == second
        assert job_factory() != job_factory()
