"""
Stores - project, user and template persistence.
"""
from .base import ProjectStore, TemplateStore, UserStore
from .locks import KeyedLocks
from .memory import MemoryProjectStore, MemoryTemplateStore, MemoryUserStore

__all__ = [
    "ProjectStore",
    "TemplateStore",
    "UserStore",
    "KeyedLocks",
    "MemoryProjectStore",
    "MemoryTemplateStore",
    "MemoryUserStore",
]
