# vibespecs/auth/service.py
"""
Account operations behind /api/auth: register, login, me.
"""
from typing import Tuple

from vibespecs.core.exceptions import InvalidCredentialsError
from vibespecs.core.logging import log
from vibespecs.models import Identity
from vibespecs.stores.base import UserStore
from .passwords import PasswordHasher
from .session import SessionGate


class AccountService:

    def __init__(self, users: UserStore, gate: SessionGate, hasher: PasswordHasher):
        self.users = users
        self.gate = gate
        self.hasher = hasher

    async def register(self, email: str, password: str, name: str) -> Tuple[Identity, str]:
        user = await self.users.create(
            email=email,
            name=name,
            password_hash=self.hasher.hash(password),
        )
        identity = user.identity()
        return identity, self.gate.issue(identity)

    async def login(self, email: str, password: str) -> Tuple[Identity, str]:
        user = await self.users.get_by_email(email)
        # Same error for unknown email and wrong password
        if user is None or not self.hasher.verify(password, user.password_hash):
            log("AUTH", "Rejected login attempt")
            raise InvalidCredentialsError()
        identity = user.identity()
        log("AUTH", f"User {identity.id[:8]} logged in")
        return identity, self.gate.issue(identity)

    async def me(self, credential: str) -> Identity:
        return await self.gate.verify(credential)
