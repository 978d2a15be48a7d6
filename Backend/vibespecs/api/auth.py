# vibespecs/api/auth.py
"""
Authentication routes. Only register, login and me - no user CRUD.
"""
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from vibespecs.models import Identity
from vibespecs.services import ServiceContainer
from .deps import get_container, get_credential

router = APIRouter(prefix="/api/auth", tags=["Auth"])

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str


class AuthResponse(BaseModel):
    user: Identity
    token: str


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, container: ServiceContainer = Depends(get_container)):
    identity, token = await container.accounts.register(body.email, body.password, body.name)
    return AuthResponse(user=identity, token=token)


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, container: ServiceContainer = Depends(get_container)):
    identity, token = await container.accounts.login(body.email, body.password)
    return AuthResponse(user=identity, token=token)


@router.get("/me", response_model=Identity)
async def me(
    credential: str = Depends(get_credential),
    container: ServiceContainer = Depends(get_container),
):
    return await container.accounts.me(credential)
