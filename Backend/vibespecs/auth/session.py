# vibespecs/auth/session.py
"""
Session / identity gate.

Issues signed JWT credentials bound to an Identity and verifies them.
The credential is opaque to every other component: they only ever call
verify() to learn who a request acts for.
"""
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from vibespecs.core.exceptions import (
    MalformedCredentialError,
    MissingCredentialError,
    SessionExpiredError,
    UnknownSubjectError,
)
from vibespecs.models import Identity
from vibespecs.stores.base import UserStore


class SessionGate:

    def __init__(
        self,
        users: UserStore,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
    ):
        self.users = users
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, identity: Identity) -> str:
        # Expiry is checked in verify(), never here
        now = datetime.now(timezone.utc)
        claims = {
            "sub": identity.id,
            "email": identity.email,
            "name": identity.name,
            "plan": identity.plan,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    async def verify(self, credential: str) -> Identity:
        """
        Resolve a credential to the Identity it was issued for.

        Raises:
            MissingCredentialError: empty credential
            SessionExpiredError: validity window has passed
            MalformedCredentialError: bad signature, bad encoding or missing claims
            UnknownSubjectError: the user no longer exists
        """
        if not credential:
            raise MissingCredentialError()

        try:
            claims = jwt.decode(credential, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise SessionExpiredError()
        except JWTError as e:
            raise MalformedCredentialError(f"Malformed credential: {e}")

        try:
            identity = Identity(
                id=claims["sub"],
                email=claims["email"],
                name=claims["name"],
                plan=claims["plan"],
            )
        except (KeyError, PydanticValidationError):
            raise MalformedCredentialError("Credential is missing identity claims")

        if await self.users.get_by_id(identity.id) is None:
            raise UnknownSubjectError(identity.id)

        return identity
