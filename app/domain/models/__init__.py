"""
Domain models for the freelance marketplace.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    ForbiddenError,
    AuthenticationError,
    MalformedTokenError,
    InvalidSignatureError,
    TokenExpiredError,
    ValueObject,
    Email,
    utcnow,
)

# Domain entities
from .job import JobPosting, MUTABLE_JOB_FIELDS
from .accepted_task import AcceptedTask

__all__ = [
    # Base
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ForbiddenError",
    "AuthenticationError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "TokenExpiredError",
    "ValueObject",
    "Email",
    "utcnow",

    # Entities
    "JobPosting",
    "MUTABLE_JOB_FIELDS",
    "AcceptedTask",
]
