"""
LLM module - Unified interface for all LLM providers.
"""
from .adapter import LLMAdapter

__all__ = ["LLMAdapter"]
