# tests/conftest.py
"""
Shared pytest fixtures for VibeSpecs tests.

Provides:
- A sample TaskFlow document (wire form and model)
- A fake LLM whose call() returns canned JSON
- An in-memory service container and an httpx client over the app
- A registered user with a bearer header
"""
import copy
import json
from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from vibespecs.core.config import Settings
from vibespecs.main import create_app
from vibespecs.models import PRDDocument
from vibespecs.services import build_memory_container


# ═══════════════════════════════════════════════════════
# SAMPLE DATA
# ═══════════════════════════════════════════════════════

TASKFLOW: Dict[str, Any] = {
    "appName": "TaskFlow",
    "tagline": "Tasks that finish themselves",
    "summary": "A lightweight todo app for people who juggle many small tasks.",
    "targetUsers": ["Freelancers", "Students"],
    "features": [
        {
            "name": "Task Capture",
            "userStory": "As a user I want to add a task in one keystroke so that nothing slips.",
            "acceptanceCriteria": ["Task appears at the top of the list", "Empty titles are rejected"],
            "priority": "High",
        },
        {
            "name": "Completion",
            "userStory": "As a user I want to mark tasks complete so that I see progress.",
            "acceptanceCriteria": ["Completed tasks are struck through"],
            "priority": "Medium",
        },
    ],
    "techStack": {
        "frontend": "React + Vite",
        "backend": "FastAPI",
        "database": "MongoDB",
        "auth": "JWT",
        "deployment": "Docker",
    },
    "dataModels": [
        {
            "name": "Task",
            "description": "A single todo item",
            "attributes": ["title: string", "done: boolean", "createdAt: datetime"],
        },
    ],
    "userFlow": "Sign up, add a task, mark it complete.",
    "mvpScope": {
        "mustHave": ["create task", "mark complete"],
        "shouldHave": ["due dates"],
        "couldHave": ["tags"],
        "wontHave": ["team sharing"],
    },
    "cursorPrompt": "Build TaskFlow with React and FastAPI.",
    "replitPrompt": "Create a todo app called TaskFlow.",
}


def make_document_dict(**overrides) -> Dict[str, Any]:
    """Deep copy of the TaskFlow document with top-level overrides."""
    data = copy.deepcopy(TASKFLOW)
    data.update(overrides)
    return data


def make_document(**overrides) -> PRDDocument:
    return PRDDocument.model_validate(make_document_dict(**overrides))


# ═══════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════

@pytest.fixture
def document_dict() -> Dict[str, Any]:
    return make_document_dict()


@pytest.fixture
def document() -> PRDDocument:
    return make_document()


@pytest.fixture
def fake_llm():
    """LLM stand-in: call() returns the TaskFlow document as JSON."""
    llm = AsyncMock()
    llm.call = AsyncMock(return_value=json.dumps(TASKFLOW))
    return llm


@pytest.fixture
def test_settings() -> Settings:
    settings = Settings()
    settings.auth.secret_key = "test-secret"
    settings.rate_limit = "1000/minute"
    return settings


@pytest.fixture
def container(test_settings, fake_llm):
    return build_memory_container(test_settings, llm=fake_llm)


@pytest.fixture
def app(test_settings, container):
    return create_app(test_settings, container=container)


@pytest_asyncio.fixture
async def async_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def register_user(client: AsyncClient, email: str, name: str = "Test User", password: str = "secret123"):
    """Register through the API and return (user, auth headers)."""
    response = await client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return body["user"], {"Authorization": f"Bearer {body['token']}"}


@pytest_asyncio.fixture
async def auth_headers(async_client):
    _, headers = await register_user(async_client, "ada@example.com", "Ada")
    return headers
