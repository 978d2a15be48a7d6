# vibespecs/stores/base.py
"""
Store interfaces.

Each interface has an in-memory (local-only) and a MongoDB (networked)
implementation, chosen once in services.build_container.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from vibespecs.models import PRDDocument, Plan, Project, StoredUser, Template


class ProjectStore(ABC):
    """
    Owner-scoped persistence of PRD documents.

    Every operation on a specific id distinguishes "does not exist"
    (NotFoundError) from "exists but belongs to someone else" (ForbiddenError).
    """

    @abstractmethod
    async def create(self, owner_id: str, document: PRDDocument) -> Project:
        ...

    @abstractmethod
    async def list(self, owner_id: str) -> List[Project]:
        """Owner's projects, newest first."""

    @abstractmethod
    async def get(self, owner_id: str, project_id: str) -> Project:
        ...

    @abstractmethod
    async def update(self, owner_id: str, project_id: str, document: PRDDocument) -> Project:
        ...

    @abstractmethod
    async def delete(self, owner_id: str, project_id: str) -> None:
        ...


class UserStore(ABC):

    @abstractmethod
    async def create(self, email: str, name: str, password_hash: str, plan: Plan = "free") -> StoredUser:
        """Raises DuplicateAccountError if the email is taken."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[StoredUser]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[StoredUser]:
        ...


class TemplateStore(ABC):

    @abstractmethod
    async def create(self, name: str, description: str, content: str, category: str) -> Template:
        ...

    @abstractmethod
    async def list(self) -> List[Template]:
        ...

    @abstractmethod
    async def get(self, template_id: str) -> Template:
        ...
