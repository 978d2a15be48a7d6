# vibespecs/api/prd.py
"""
PRD routes - one-shot generation and stateless markdown rendering.
"""
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from vibespecs.core.exceptions import VibeSpecsError
from vibespecs.models import Identity, PRDDocument
from vibespecs.services import ServiceContainer
from .deps import get_container, get_current_identity
from .responses import markdown_attachment

router = APIRouter(prefix="/api/prd", tags=["PRD"])


class GenerateRequest(BaseModel):
    idea: str = Field(min_length=1)


@router.post("/generate", response_model=PRDDocument)
async def generate_prd(
    body: GenerateRequest,
    request: Request,
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
):
    """
    Generate a document from an idea. Nothing is persisted here;
    clients save it through POST /api/projects.
    """
    counter = request.app.state.generation_counter
    try:
        document = await container.retry_policy.run(container.generator.generate, body.idea)
    except VibeSpecsError as e:
        counter.labels(outcome=type(e).__name__).inc()
        raise
    counter.labels(outcome="success").inc()
    return document


@router.post("/render")
async def render_prd(document: PRDDocument):
    return markdown_attachment(document)
