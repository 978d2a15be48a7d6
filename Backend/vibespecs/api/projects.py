# vibespecs/api/projects.py
"""
Project routes. Every route is owner-scoped through the bearer credential.

name/summary are accepted on writes for older clients but are always
derived from the document (appName/tagline) by the store.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from vibespecs.models import Identity, PRDDocument, Project
from vibespecs.services import ServiceContainer
from .deps import get_container, get_current_identity
from .responses import markdown_attachment

router = APIRouter(prefix="/api/projects", tags=["Projects"])


class ProjectWriteRequest(BaseModel):
    name: Optional[str] = None
    summary: Optional[str] = None
    data: PRDDocument


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectWriteRequest,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    return await container.projects.create(identity.id, body.data)


@router.get("", response_model=List[Project])
async def list_projects(
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    """Caller's projects, newest first."""
    return await container.projects.list(identity.id)


@router.get("/{project_id}", response_model=Project)
async def get_project(
    project_id: str,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    return await container.projects.get(identity.id, project_id)


@router.put("/{project_id}", response_model=Project)
async def update_project(
    project_id: str,
    body: ProjectWriteRequest,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    return await container.projects.update(identity.id, project_id, body.data)


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    await container.projects.delete(identity.id, project_id)
    return {"message": "Project deleted", "id": project_id}


@router.get("/{project_id}/export")
async def export_project(
    project_id: str,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    """Markdown download of a stored project."""
    project = await container.projects.get(identity.id, project_id)
    return markdown_attachment(project.data)
