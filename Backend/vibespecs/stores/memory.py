# vibespecs/stores/memory.py
"""
In-memory stores - the local-only backend.

Documents are kept as plain JSON dicts and re-validated on every read,
so callers never share instances with the store and corrupt rows are
reported as StorageError.
"""
import asyncio
import itertools
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from vibespecs.core.exceptions import (
    DuplicateAccountError,
    ForbiddenError,
    NotFoundError,
    StorageError,
)
from vibespecs.core.logging import log
from vibespecs.models import PRDDocument, Plan, Project, StoredUser, Template
from .base import ProjectStore, TemplateStore, UserStore
from .locks import KeyedLocks


Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class MemoryProjectStore(ProjectStore):

    def __init__(self, clock: Optional[Clock] = None):
        self._rows: Dict[str, dict] = {}
        self._seq = itertools.count()
        self._locks = KeyedLocks()
        self._clock = clock or _utcnow

    def _load(self, row: dict) -> Project:
        try:
            return Project(
                id=row["id"],
                name=row["name"],
                summary=row["summary"],
                created_at=row["created_at"],
                owner_id=row["owner_id"],
                data=PRDDocument.model_validate(row["data"]),
            )
        except (PydanticValidationError, KeyError) as e:
            raise StorageError(f"Stored project {row.get('id')} is corrupt", {"reason": str(e)[:200]})

    def _owned_row(self, owner_id: str, project_id: str) -> dict:
        row = self._rows.get(project_id)
        if row is None:
            raise NotFoundError("Project", project_id)
        if row["owner_id"] != owner_id:
            raise ForbiddenError("Project", project_id)
        return row

    async def create(self, owner_id: str, document: PRDDocument) -> Project:
        project_id = _new_id()
        row = {
            "id": project_id,
            "owner_id": owner_id,
            "name": document.app_name,
            "summary": document.tagline,
            "created_at": self._clock(),
            "seq": next(self._seq),
            "data": document.to_wire(),
        }
        async with self._locks.hold(project_id):
            self._rows[project_id] = row
        log("STORE", f"Created project '{row['name']}'", project_id=project_id)
        return self._load(row)

    async def list(self, owner_id: str) -> List[Project]:
        rows = [row for row in self._rows.values() if row["owner_id"] == owner_id]
        rows.sort(key=lambda row: (row["created_at"], row["seq"]), reverse=True)
        return [self._load(row) for row in rows]

    async def get(self, owner_id: str, project_id: str) -> Project:
        async with self._locks.hold(project_id):
            return self._load(self._owned_row(owner_id, project_id))

    async def update(self, owner_id: str, project_id: str, document: PRDDocument) -> Project:
        async with self._locks.hold(project_id):
            row = self._owned_row(owner_id, project_id)
            updated = {
                **row,
                "name": document.app_name,
                "summary": document.tagline,
                "data": document.to_wire(),
            }
            self._rows[project_id] = updated
        log("STORE", f"Updated project '{updated['name']}'", project_id=project_id)
        return self._load(updated)

    async def delete(self, owner_id: str, project_id: str) -> None:
        async with self._locks.hold(project_id):
            self._owned_row(owner_id, project_id)
            del self._rows[project_id]
        log("STORE", "Deleted project", project_id=project_id)


class MemoryUserStore(UserStore):

    def __init__(self):
        self._users: Dict[str, StoredUser] = {}
        self._by_email: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def create(self, email: str, name: str, password_hash: str, plan: Plan = "free") -> StoredUser:
        key = email.lower()  # stored lowercased on every backend
        async with self._lock:
            if key in self._by_email:
                raise DuplicateAccountError(email)
            user = StoredUser(id=_new_id(), email=key, name=name, plan=plan, password_hash=password_hash)
            self._users[user.id] = user
            self._by_email[key] = user.id
        log("AUTH", f"Registered user {user.id[:8]}")
        return user.model_copy()

    async def get_by_id(self, user_id: str) -> Optional[StoredUser]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def get_by_email(self, email: str) -> Optional[StoredUser]:
        user_id = self._by_email.get(email.lower())
        return await self.get_by_id(user_id) if user_id else None


class MemoryTemplateStore(TemplateStore):

    def __init__(self, clock: Optional[Clock] = None):
        self._templates: Dict[str, Template] = {}
        self._order: List[str] = []
        self._clock = clock or _utcnow

    async def create(self, name: str, description: str, content: str, category: str) -> Template:
        template = Template(
            id=_new_id(),
            name=name,
            description=description,
            content=content,
            category=category,
            created_at=self._clock(),
        )
        self._templates[template.id] = template
        self._order.append(template.id)
        log("STORE", f"Created template '{name}'")
        return template.model_copy()

    async def list(self) -> List[Template]:
        return [self._templates[tid].model_copy() for tid in reversed(self._order)]

    async def get(self, template_id: str) -> Template:
        template = self._templates.get(template_id)
        if template is None:
            raise NotFoundError("Template", template_id)
        return template.model_copy()
