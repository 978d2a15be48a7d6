# vibespecs/core/exceptions.py
"""
Custom exceptions for the application.

Every error carries the HTTP status it surfaces as, so the API layer
maps them with a single handler.
"""
from typing import Optional, Dict, Any, List


class VibeSpecsError(Exception):
    """Base exception for all VibeSpecs errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ─── Generation ──────────────────────────────────────────────────────────────

class ConfigurationError(VibeSpecsError):
    """Required credential or capability is missing. Never retried."""
    status_code = 503


class UpstreamError(VibeSpecsError):
    """The external generation capability failed."""
    status_code = 502

    def __init__(self, provider: str, message: str):
        super().__init__(
            f"Upstream error ({provider}): {message}",
            {"provider": provider}
        )
        self.provider = provider


class RateLimitError(UpstreamError):
    """Provider answered 429."""
    def __init__(self, provider: str):
        super().__init__(provider, "Rate limited (429)")


class ValidationError(VibeSpecsError):
    """Structured output that fails the document rule set."""
    status_code = 502

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, {"errors": errors or []})
        self.errors = errors or []


class EmptyIdeaError(VibeSpecsError):
    """Idea text is empty or whitespace only."""
    status_code = 400

    def __init__(self):
        super().__init__("Idea text must not be empty")


class GenerationInProgressError(VibeSpecsError):
    """A second submission arrived while a generation is in flight."""
    status_code = 409

    def __init__(self):
        super().__init__("A generation is already in progress")


# ─── Persistence ─────────────────────────────────────────────────────────────

class NotFoundError(VibeSpecsError):
    status_code = 404

    def __init__(self, kind: str, item_id: str):
        super().__init__(f"{kind} not found", {"id": item_id})
        self.item_id = item_id


class ForbiddenError(VibeSpecsError):
    status_code = 403

    def __init__(self, kind: str, item_id: str):
        super().__init__("Forbidden", {"kind": kind, "id": item_id})
        self.item_id = item_id


class StorageError(VibeSpecsError):
    """Underlying storage failed or returned corrupt data."""
    status_code = 500


# ─── Identity ────────────────────────────────────────────────────────────────

class AuthError(VibeSpecsError):
    """Request must re-authenticate."""
    status_code = 401


class MissingCredentialError(AuthError):
    def __init__(self):
        super().__init__("Missing credential")


class SessionExpiredError(AuthError):
    def __init__(self):
        super().__init__("Session expired")


class MalformedCredentialError(AuthError):
    def __init__(self, reason: str = "Malformed credential"):
        super().__init__(reason)


class UnknownSubjectError(AuthError):
    def __init__(self, subject: str):
        super().__init__("Unknown subject", {"subject": subject})


class InvalidCredentialsError(VibeSpecsError):
    status_code = 401

    def __init__(self):
        super().__init__("Invalid credentials")


class DuplicateAccountError(VibeSpecsError):
    status_code = 400

    def __init__(self, email: str):
        super().__init__("User already exists", {"email": email})
