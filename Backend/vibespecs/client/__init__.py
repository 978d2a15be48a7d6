"""
Client-side coordination of the generation lifecycle.
"""
from .session import GenerationSession, SessionState, describe_error

__all__ = ["GenerationSession", "SessionState", "describe_error"]
