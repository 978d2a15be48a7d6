# vibespecs/api/templates.py
"""
Template gallery routes. Reading is public, creating requires a session.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from vibespecs.models import Identity, Template
from vibespecs.services import ServiceContainer
from .deps import get_container, get_current_identity

router = APIRouter(prefix="/api/templates", tags=["Templates"])


class CreateTemplateRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str
    content: str = Field(min_length=1)
    category: str


@router.get("", response_model=List[Template])
async def list_templates(container: ServiceContainer = Depends(get_container)):
    return await container.templates.list()


@router.get("/{template_id}", response_model=Template)
async def get_template(template_id: str, container: ServiceContainer = Depends(get_container)):
    return await container.templates.get(template_id)


@router.post("", response_model=Template, status_code=status.HTTP_201_CREATED)
async def create_template(
    body: CreateTemplateRequest,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    return await container.templates.create(body.name, body.description, body.content, body.category)
