"""
Ownership authorization rules.
Decides whether an authenticated identity may act on an owned resource.
"""

import logging
from enum import Enum
from typing import Optional, TypeVar

from app.domain.models.base import Email, EntityNotFoundError, ForbiddenError


logger = logging.getLogger(__name__)

R = TypeVar("R")


class Decision(str, Enum):
    """Outcome of an ownership check."""
    ALLOW = "allow"
    DENY = "deny"


class OwnershipPolicy:
    """
    Domain service comparing a session identity with a resource owner field.

    Identities are compared after trimming and lowercasing. When
    distinguish_not_found is False, a missing resource is reported exactly
    like a foreign one (ForbiddenError), so callers cannot discover which ids
    exist.
    """

    def __init__(self, distinguish_not_found: bool = False):
        self.distinguish_not_found = distinguish_not_found

    def authorize(self, identity: Optional[str], owner: Optional[str]) -> Decision:
        if not identity or not owner:
            return Decision.DENY
        if Email.normalize(identity) != Email.normalize(owner):
            return Decision.DENY
        return Decision.ALLOW

    def require_creator(self, identity: str, owner: str, message: str = "Forbidden: Email mismatch") -> None:
        """Creation guard: the session identity must match the owner field in the body."""
        self._enforce(identity, owner, message, "create")

    def require_scope(self, identity: str, owner: str, message: str) -> None:
        """Scoped-list guard: the session identity must match the path owner."""
        self._enforce(identity, owner, message, "list")

    def require_owner(
        self,
        identity: str,
        resource: Optional[R],
        message: str,
        action: str,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None
    ) -> R:
        """
        Mutation guard for a resource loaded by id.

        Returns the resource when the identity owns it.
        """
        if resource is None:
            logger.info("%s %s on missing %s %s", identity, action, resource_type, resource_id)
            if self.distinguish_not_found:
                raise EntityNotFoundError(resource_type, resource_id)
            raise ForbiddenError(message, action)

        self._enforce(identity, resource.owner_email, message, action)
        return resource

    def _enforce(self, identity: str, owner: str, message: str, action: str) -> None:
        if self.authorize(identity, owner) is Decision.DENY:
            logger.warning("Ownership check denied %s for %s (owner %s)", action, identity, owner)
            raise ForbiddenError(message, action)
