# vibespecs/services.py
"""
Composition root - picks one implementation per capability.

Callers receive a ServiceContainer and never branch on which backend
is behind it.
"""
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Optional

from vibespecs.auth import AccountService, PasswordHasher, SessionGate
from vibespecs.client import GenerationSession
from vibespecs.core.config import GenerationSettings, Settings
from vibespecs.core.exceptions import ConfigurationError
from vibespecs.core.logging import log
from vibespecs.generation import PRDGenerator, RetryPolicy
from vibespecs.llm import LLMAdapter
from vibespecs.stores import (
    MemoryProjectStore,
    MemoryTemplateStore,
    MemoryUserStore,
    ProjectStore,
    TemplateStore,
    UserStore,
)


@dataclass
class ServiceContainer:
    projects: ProjectStore
    users: UserStore
    templates: TemplateStore
    gate: SessionGate
    accounts: AccountService
    generator: PRDGenerator
    retry_policy: RetryPolicy
    generation: GenerationSettings
    backend: str

    def open_session(self, credential: str) -> GenerationSession:
        """Client state machine acting for the holder of ``credential``."""
        return GenerationSession(
            self.generator,
            self.projects,
            self.gate,
            credential,
            timeout=self.generation.timeout_seconds,
            retry_policy=self.retry_policy,
        )


def build_container(settings: Settings, llm=None) -> ServiceContainer:
    """
    Build the services for ``settings.storage.backend``.

    Args:
        llm: object with the LLMAdapter.call signature; defaults to LLMAdapter
    """
    backend = settings.storage.backend
    if backend == "memory":
        projects, users, templates = MemoryProjectStore(), MemoryUserStore(), MemoryTemplateStore()
    elif backend == "mongo":
        from vibespecs.stores.mongo import MongoProjectStore, MongoTemplateStore, MongoUserStore
        projects, users, templates = MongoProjectStore(), MongoUserStore(), MongoTemplateStore()
    else:
        raise ConfigurationError(f"Unknown STORAGE_BACKEND: {backend}")

    if settings.auth.uses_default_secret and not settings.debug:
        log("AUTH", "⚠️ Using the development SECRET_KEY - set SECRET_KEY in production")

    gate = SessionGate(
        users,
        secret_key=settings.auth.secret_key,
        algorithm=settings.auth.algorithm,
        ttl=timedelta(minutes=settings.auth.access_token_expire_minutes),
    )
    generator = PRDGenerator(
        llm or LLMAdapter(settings.llm),
        temperature=settings.llm.temperature,
    )

    log("API", f"Services composed with '{backend}' storage")
    return ServiceContainer(
        projects=projects,
        users=users,
        templates=templates,
        gate=gate,
        accounts=AccountService(users, gate, PasswordHasher(settings.auth.password_scheme)),
        generator=generator,
        retry_policy=RetryPolicy(
            max_retries=settings.generation.max_retries,
            base_delay=settings.generation.retry_delay,
        ),
        generation=settings.generation,
        backend=backend,
    )


def build_memory_container(settings: Optional[Settings] = None, llm=None) -> ServiceContainer:
    """Local-only services regardless of STORAGE_BACKEND."""
    settings = settings or Settings()
    settings = replace(settings, storage=replace(settings.storage, backend="memory"))
    return build_container(settings, llm=llm)
