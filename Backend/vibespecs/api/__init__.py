"""
API routes.
"""
from . import auth, billing, health, prd, projects, templates

__all__ = ["auth", "billing", "health", "prd", "projects", "templates"]
