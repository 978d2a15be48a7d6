"""
Auth module - password hashing, session credentials, accounts.
"""
from .passwords import PasswordHasher
from .service import AccountService
from .session import SessionGate

__all__ = ["PasswordHasher", "AccountService", "SessionGate"]
