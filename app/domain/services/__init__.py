"""
Domain services for the freelance marketplace.
This module exports all domain services for cross-entity rules.
"""

from .ownership_service import OwnershipPolicy, Decision

__all__ = [
    "OwnershipPolicy",
    "Decision",
]
