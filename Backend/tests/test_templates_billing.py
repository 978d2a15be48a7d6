# tests/test_templates_billing.py
import pytest


@pytest.mark.asyncio
async def test_template_gallery(async_client, auth_headers):
    assert (await async_client.get("/api/templates")).json() == []

    payload = {
        "name": "Habit Tracker",
        "description": "Daily streaks",
        "content": "An app that tracks daily habits",
        "category": "Productivity",
    }
    created = await async_client.post("/api/templates", json=payload, headers=auth_headers)
    assert created.status_code == 201
    template = created.json()
    assert template["name"] == "Habit Tracker"
    assert "createdAt" in template

    listed = await async_client.get("/api/templates")
    assert [t["id"] for t in listed.json()] == [template["id"]]

    fetched = await async_client.get(f"/api/templates/{template['id']}")
    assert fetched.json() == template


@pytest.mark.asyncio
async def test_creating_template_requires_session(async_client):
    response = await async_client.post(
        "/api/templates",
        json={"name": "X", "description": "", "content": "Y", "category": "Z"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_missing_template_is_404(async_client):
    assert (await async_client.get("/api/templates/nope")).status_code == 404


@pytest.mark.asyncio
async def test_billing_plans(async_client):
    response = await async_client.get("/api/billing/plans")
    assert response.status_code == 200
    plans = response.json()
    assert [p["id"] for p in plans] == ["free", "pro", "team"]
    assert [p["price"] for p in plans] == [0, 19, 49]
    assert "AI Generation" in plans[1]["features"]
