# vibespecs/client/session.py
"""
Client generation state machine.

    IDLE --submit--> GENERATING --ok--> COMPLETE
                                 `-err-> FAILED
    COMPLETE/FAILED --new_project--> IDLE
    any (not GENERATING) --load_project--> COMPLETE

Only one generation may be in flight per session. The session holds the
single "current" document plus the owner's project list, refreshed after
every mutation.
"""
import asyncio
from enum import Enum
from typing import List, Optional

from vibespecs.core.exceptions import (
    EmptyIdeaError,
    GenerationInProgressError,
    UpstreamError,
    VibeSpecsError,
)
from vibespecs.core.logging import log
from vibespecs.generation import PRDGenerator, RetryPolicy
from vibespecs.models import PRDDocument, Project
from vibespecs.auth import SessionGate
from vibespecs.stores.base import ProjectStore


class SessionState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    COMPLETE = "complete"
    FAILED = "failed"


def describe_error(error: BaseException) -> str:
    """Single human-readable line for an error."""
    if isinstance(error, VibeSpecsError):
        return error.message
    return f"Unexpected error: {error}"


class GenerationSession:

    def __init__(
        self,
        generator: PRDGenerator,
        projects: ProjectStore,
        gate: SessionGate,
        credential: str,
        timeout: float = 180,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.generator = generator
        self.store = projects
        self.gate = gate
        self.credential = credential
        self.timeout = timeout
        self.retry_policy = retry_policy or RetryPolicy()

        self.state = SessionState.IDLE
        self.document: Optional[PRDDocument] = None
        self.current_project_id: Optional[str] = None
        self.projects: List[Project] = []
        self.error: Optional[str] = None
        self.last_exception: Optional[BaseException] = None

    @property
    def is_generating(self) -> bool:
        return self.state is SessionState.GENERATING

    def _fail(self, error: BaseException) -> None:
        self.state = SessionState.FAILED
        self.document = None
        self.current_project_id = None
        self.error = describe_error(error)
        self.last_exception = error
        log("SESSION", f"-> FAILED: {self.error}")

    async def _owner_id(self) -> str:
        identity = await self.gate.verify(self.credential)
        return identity.id

    async def submit(self, idea: str) -> Optional[Project]:
        """
        Generate a document for ``idea`` and persist it.

        Returns the persisted Project, or None when the generation failed
        (the reason is on ``self.error``).

        Raises:
            EmptyIdeaError: blank idea, state untouched
            GenerationInProgressError: a generation is already running
        """
        if not (idea or "").strip():
            raise EmptyIdeaError()
        if self.is_generating:
            raise GenerationInProgressError()

        # Set synchronously so a concurrent submit sees it before our first await
        self.state = SessionState.GENERATING
        self.error = None
        self.last_exception = None
        log("SESSION", "-> GENERATING")

        try:
            document = await asyncio.wait_for(
                self.retry_policy.run(self.generator.generate, idea),
                timeout=self.timeout,
            )
            owner_id = await self._owner_id()
            project = await self.store.create(owner_id, document)
        except asyncio.TimeoutError:
            self._fail(UpstreamError("llm", f"Generation timed out after {self.timeout}s"))
            return None
        except asyncio.CancelledError as e:
            self._fail(e)
            self.error = "Generation was cancelled"
            raise
        except Exception as e:
            self._fail(e)
            return None

        self.document = project.data
        self.current_project_id = project.id
        self.state = SessionState.COMPLETE
        log("SESSION", f"-> COMPLETE: '{project.name}'", project_id=project.id)
        await self.refresh_projects()
        return project

    def new_project(self) -> None:
        """Drop the current document from view (not from storage)."""
        if self.is_generating:
            raise GenerationInProgressError()
        self.state = SessionState.IDLE
        self.document = None
        self.current_project_id = None
        self.error = None
        self.last_exception = None
        log("SESSION", "-> IDLE")

    def load_project(self, project: Project) -> None:
        """Show a persisted project without generating or re-persisting."""
        if self.is_generating:
            raise GenerationInProgressError()
        self.document = project.data
        self.current_project_id = project.id
        self.error = None
        self.last_exception = None
        self.state = SessionState.COMPLETE
        log("SESSION", f"-> COMPLETE (loaded '{project.name}')", project_id=project.id)

    async def delete_project(self, project_id: str) -> bool:
        """
        Delete a project and refresh the list.

        Deleting the project currently on view returns the session to IDLE.
        Failures are recorded on ``self.error``; returns False in that case.
        """
        try:
            owner_id = await self._owner_id()
            await self.store.delete(owner_id, project_id)
        except VibeSpecsError as e:
            self.error = describe_error(e)
            self.last_exception = e
            log("SESSION", f"Delete failed: {self.error}", project_id=project_id)
            return False

        if project_id == self.current_project_id and not self.is_generating:
            self.state = SessionState.IDLE
            self.document = None
            self.current_project_id = None
            log("SESSION", "-> IDLE (current project deleted)")

        await self.refresh_projects()
        return True

    async def refresh_projects(self) -> List[Project]:
        try:
            owner_id = await self._owner_id()
            self.projects = await self.store.list(owner_id)
        except VibeSpecsError as e:
            self.error = describe_error(e)
            self.last_exception = e
            log("SESSION", f"Project list refresh failed: {self.error}")
        return self.projects
