"""
Unit tests for domain exception to HTTP status mapping.
"""

import pytest
from fastapi import status

from app.domain.models.base import (
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
    TokenExpiredError,
    ValidationError,
)
from app.infrastructure.web.middleware.error_handler import (
    BusinessException,
    UnauthorizedException,
    status_for_domain_exception,
)


class TestStatusForDomainException:
    """Test cases for status_for_domain_exception."""

    @pytest.mark.parametrize("exc, expected", [
        (TokenExpiredError(), 401),
        (ForbiddenError("Forbidden"), 403),
        (EntityNotFoundError("Job", "J1"), 404),
        (DuplicateEntityError("AcceptedTask", "jobId", "J1"), 409),
        (ValidationError("bad"), 422),
        (DomainException("other"), 400),
    ])
    def test_mapping(self, exc, expected):
        assert status_for_domain_exception(exc) == expected

    def test_validation_error_is_unprocessable_content(self):
        """Validation failures use the current 422 status constant."""
        assert status_for_domain_exception(ValidationError("bad")) == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestWebExceptions:
    """Test cases for exceptions raised directly by the web layer."""

    def test_business_exception_defaults_to_bad_request(self):
        exc = BusinessException("Bad input")

        assert exc.message == "Bad input"
        assert exc.status_code == 400
        assert str(exc) == "Bad input"

    def test_unauthorized_exception(self):
        exc = UnauthorizedException("No token")

        assert exc.message == "No token"
        assert exc.status_code == 401
