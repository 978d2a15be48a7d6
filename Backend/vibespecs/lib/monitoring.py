# vibespecs/lib/monitoring.py
from fastapi import FastAPI
from prometheus_client.registry import CollectorRegistry as Registry
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator
from vibespecs.core.logging import log


def register_monitoring(app: FastAPI) -> Registry:
    """
    Registers Prometheus monitoring on the FastAPI app and exposes /metrics.

    Each app gets its own registry so several apps can live in one process.
    The generation counter is published on app.state.generation_counter.
    """
    registry = Registry()

    app.state.generation_counter = Counter(
        "vibespecs_prd_generations_total",
        "PRD generation attempts by outcome",
        ["outcome"],
        registry=registry,
    )

    instrumentator = Instrumentator(
        excluded_handlers=["/metrics"],
        registry=registry,
    ).instrument(app)

    instrumentator.expose(app, include_in_schema=False, should_gzip=True)

    log("MONITORING", "Prometheus instrumentation registered at /metrics.")
    return registry
