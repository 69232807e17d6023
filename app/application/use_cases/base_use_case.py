"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic
from datetime import datetime, timezone

from app.domain.models.base import ValidationError
from app.domain.services.ownership_service import OwnershipPolicy


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Domain exceptions propagate to the web layer unchanged.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T) -> R:
        """
        Execute the use case with request validation and timing logs.
        """
        self.execution_start = datetime.now(timezone.utc)
        try:
            await self._validate_request(request)
            return await self._execute_business_logic(request)
        finally:
            self.execution_end = datetime.now(timezone.utc)
            execution_time = (self.execution_end - self.execution_start).total_seconds()
            logger.debug(f"{type(self).__name__} finished in {execution_time:.4f}s")

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    """

    async def _execute_business_logic(self, request: T) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


# Authorization mixin
class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Mixin for use cases that act on behalf of an authenticated identity.
    """

    def __init__(self, policy: Optional[OwnershipPolicy] = None):
        super().__init__()
        self.current_identity: Optional[str] = None
        self.policy = policy or OwnershipPolicy()

    def set_current_user(self, identity: str) -> "AuthorizedUseCase[T, R]":
        """Set the current user context."""
        self.current_identity = identity
        return self

    async def _validate_request(self, request: T) -> None:
        """Validate request with authorization check."""
        await super()._validate_request(request)

        if not self.current_identity:
            raise ValidationError("User authentication required")

        await self._check_authorization(request)

    async def _check_authorization(self, request: T) -> None:
        """Check if the current user is authorized. Override in subclasses."""
        pass
