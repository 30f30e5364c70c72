"""
Shared infrastructure for Tubeline backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Wire base model and the sanitized account

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    TubelineError,
    ValidationError,
    AuthenticationError,
    NotFoundError,
    ConflictError,
    ExternalServiceError,
)
from .models import ApiModel, UserProfile, UserSummary

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "TubelineError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "ExternalServiceError",
    "ApiModel",
    "UserProfile",
    "UserSummary",
]
