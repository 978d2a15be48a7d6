# vibespecs/core/__init__.py
"""
Core module - configuration, logging and the error taxonomy.
"""
from .config import settings, Settings
from .exceptions import (
    VibeSpecsError,
    ConfigurationError,
    UpstreamError,
    RateLimitError,
    ValidationError,
    EmptyIdeaError,
    GenerationInProgressError,
    NotFoundError,
    ForbiddenError,
    StorageError,
    AuthError,
    MissingCredentialError,
    SessionExpiredError,
    MalformedCredentialError,
    UnknownSubjectError,
    InvalidCredentialsError,
    DuplicateAccountError,
)
from .logging import log, log_section

__all__ = [
    "settings",
    "Settings",
    "VibeSpecsError",
    "ConfigurationError",
    "UpstreamError",
    "RateLimitError",
    "ValidationError",
    "EmptyIdeaError",
    "GenerationInProgressError",
    "NotFoundError",
    "ForbiddenError",
    "StorageError",
    "AuthError",
    "MissingCredentialError",
    "SessionExpiredError",
    "MalformedCredentialError",
    "UnknownSubjectError",
    "InvalidCredentialsError",
    "DuplicateAccountError",
    "log",
    "log_section",
]
