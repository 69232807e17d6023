"""
Authentication infrastructure module.
Handles JWT session tokens and the cookie authentication gate.
"""

from .jwt_handler import JWTHandler
from .dependencies import (
    AppSettings,
    CurrentIdentity,
    Policy,
    get_app_settings,
    get_current_identity,
    get_jwt_handler,
    get_ownership_policy,
)

__all__ = [
    "JWTHandler",
    "AppSettings",
    "CurrentIdentity",
    "Policy",
    "get_app_settings",
    "get_current_identity",
    "get_jwt_handler",
    "get_ownership_policy",
]
