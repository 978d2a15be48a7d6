# vibespecs/rendering/markdown.py
"""
Markdown export of a PRD document.

Pure and deterministic. The MVP section only carries the Must Have and
Should Have tiers; Could Have / Won't Have stay out of the export.
"""
import re
from typing import List

from vibespecs.models import PRDDocument

MARKDOWN_MEDIA_TYPE = "text/markdown"


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def render_markdown(doc: PRDDocument) -> str:
    features = "\n".join(
        f"### {f.name} ({f.priority})\n"
        f"{f.user_story}\n"
        f"**Acceptance Criteria:**\n"
        f"{_bullets(f.acceptance_criteria)}\n"
        for f in doc.features
    )
    data_models = "\n".join(
        f"### {dm.name}\n"
        f"{dm.description}\n"
        f"Attributes:\n"
        f"{_bullets(dm.attributes)}\n"
        for dm in doc.data_models
    )
    stack = doc.tech_stack

    return (
        f"# {doc.app_name}\n"
        f"> {doc.tagline}\n"
        f"\n"
        f"## Executive Summary\n"
        f"{doc.summary}\n"
        f"\n"
        f"## Target Users\n"
        f"{_bullets(doc.target_users)}\n"
        f"\n"
        f"## Features\n"
        f"{features}\n"
        f"\n"
        f"## Tech Stack\n"
        f"- Frontend: {stack.frontend}\n"
        f"- Backend: {stack.backend}\n"
        f"- Database: {stack.database}\n"
        f"- Auth: {stack.auth}\n"
        f"- Deployment: {stack.deployment}\n"
        f"\n"
        f"## Data Models\n"
        f"{data_models}\n"
        f"\n"
        f"## User Flow\n"
        f"{doc.user_flow}\n"
        f"\n"
        f"## MVP Scope\n"
        f"### Must Have\n"
        f"{_bullets(doc.mvp_scope.must_have)}\n"
        f"### Should Have\n"
        f"{_bullets(doc.mvp_scope.should_have)}\n"
    )


def export_filename(app_name: str) -> str:
    """'Task Flow' -> 'task-flow-prd.md'"""
    slug = re.sub(r"\s+", "-", app_name.lower())
    return f"{slug}-prd.md"
