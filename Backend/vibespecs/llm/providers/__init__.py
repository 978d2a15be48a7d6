# vibespecs/llm/providers/__init__.py
"""
LLM Providers - Individual provider implementations.
"""
from . import gemini, openai, ollama

__all__ = ["gemini", "openai", "ollama"]
