# vibespecs/api/deps.py
"""
Shared route dependencies.

The credential is always taken from the request explicitly and resolved
through the session gate; nothing reads ambient state.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vibespecs.core.exceptions import MissingCredentialError
from vibespecs.models import Identity
from vibespecs.services import ServiceContainer

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


async def get_credential(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None or not credentials.credentials:
        raise MissingCredentialError()
    return credentials.credentials


async def get_current_identity(
    credential: str = Depends(get_credential),
    container: ServiceContainer = Depends(get_container),
) -> Identity:
    return await container.gate.verify(credential)
