# vibespecs/api/health.py
"""
Health check endpoints.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from vibespecs.db import get_connection_error, is_connected
from vibespecs.services import ServiceContainer
from .deps import get_container

router = APIRouter(tags=["Health"])


def _storage_status(backend: str) -> dict:
    if backend != "mongo":
        return {"backend": backend, "connected": True}
    status = {"backend": backend, "connected": is_connected()}
    error = get_connection_error()
    if error:
        status["error"] = error
    return status


@router.get("/healthz")
async def healthz():
    """Liveness only."""
    return {"ok": True, "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api/health")
async def api_health(container: ServiceContainer = Depends(get_container)):
    """Readiness: degraded while the configured storage is unreachable."""
    storage = _storage_status(container.backend)
    return {
        "status": "healthy" if storage["connected"] else "degraded",
        "storage": storage,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
