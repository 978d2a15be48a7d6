"""
Generation module - idea text to validated PRD documents.
"""
from .generator import GenerationRequest, PRDGenerator, parse_document
from .retry import RetryPolicy

__all__ = ["GenerationRequest", "PRDGenerator", "parse_document", "RetryPolicy"]
