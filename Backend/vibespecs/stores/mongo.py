# vibespecs/stores/mongo.py
"""
MongoDB stores (Beanie ODM) - the networked backend.

Requires vibespecs.db.connect_db to have initialised Beanie.
"""
from contextlib import contextmanager
from typing import List, Optional

from beanie import PydanticObjectId
from beanie.exceptions import CollectionWasNotInitialized, DocumentNotFound
from bson import ObjectId
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from vibespecs.core.exceptions import (
    DuplicateAccountError,
    ForbiddenError,
    NotFoundError,
    StorageError,
)
from vibespecs.core.logging import log
from vibespecs.models import (
    PRDDocument,
    Plan,
    Project,
    ProjectRecord,
    StoredUser,
    Template,
    TemplateRecord,
    UserRecord,
)
from .base import ProjectStore, TemplateStore, UserStore
from .locks import KeyedLocks


def _object_id(value: str) -> Optional[PydanticObjectId]:
    if not ObjectId.is_valid(value):
        return None
    return PydanticObjectId(value)


@contextmanager
def storage_errors(operation: str):
    """Surface driver / ODM failures as StorageError."""
    try:
        yield
    except (PyMongoError, CollectionWasNotInitialized) as e:
        log("STORE", f"{operation} failed: {e}")
        raise StorageError(f"{operation} failed", {"reason": str(e)[:200]}) from e
    except PydanticValidationError as e:
        raise StorageError(f"{operation} read corrupt data", {"reason": str(e)[:200]}) from e


class MongoProjectStore(ProjectStore):

    def __init__(self):
        # Serialises same-id writes within this process
        self._locks = KeyedLocks()

    async def _owned(self, owner_id: str, project_id: str) -> ProjectRecord:
        oid = _object_id(project_id)
        if oid is None:
            raise NotFoundError("Project", project_id)
        record = await ProjectRecord.get(oid)
        if record is None:
            raise NotFoundError("Project", project_id)
        if record.owner_id != owner_id:
            raise ForbiddenError("Project", project_id)
        return record

    async def create(self, owner_id: str, document: PRDDocument) -> Project:
        record = ProjectRecord(
            owner_id=owner_id,
            name=document.app_name,
            summary=document.tagline,
            data=document.model_copy(deep=True),
        )
        with storage_errors("Create project"):
            await record.insert()
        log("STORE", f"Created project '{record.name}'", project_id=str(record.id))
        return record.to_project()

    async def list(self, owner_id: str) -> List[Project]:
        with storage_errors("List projects"):
            records = await (
                ProjectRecord.find(ProjectRecord.owner_id == owner_id)
                .sort("-created_at", "-_id")
                .to_list()
            )
        return [record.to_project() for record in records]

    async def get(self, owner_id: str, project_id: str) -> Project:
        async with self._locks.hold(project_id):
            with storage_errors("Get project"):
                record = await self._owned(owner_id, project_id)
        return record.to_project()

    async def update(self, owner_id: str, project_id: str, document: PRDDocument) -> Project:
        async with self._locks.hold(project_id):
            with storage_errors("Update project"):
                record = await self._owned(owner_id, project_id)
                record.name = document.app_name
                record.summary = document.tagline
                record.data = document.model_copy(deep=True)
                try:
                    await record.replace()
                except DocumentNotFound:
                    raise NotFoundError("Project", project_id)
        log("STORE", f"Updated project '{record.name}'", project_id=project_id)
        return record.to_project()

    async def delete(self, owner_id: str, project_id: str) -> None:
        async with self._locks.hold(project_id):
            with storage_errors("Delete project"):
                record = await self._owned(owner_id, project_id)
                await record.delete()
        log("STORE", "Deleted project", project_id=project_id)


class MongoUserStore(UserStore):

    async def create(self, email: str, name: str, password_hash: str, plan: Plan = "free") -> StoredUser:
        record = UserRecord(email=email.lower(), name=name, plan=plan, password_hash=password_hash)
        with storage_errors("Create user"):
            try:
                await record.insert()
            except DuplicateKeyError:
                raise DuplicateAccountError(email)
        log("AUTH", f"Registered user {str(record.id)[:8]}")
        return record.to_stored()

    async def get_by_id(self, user_id: str) -> Optional[StoredUser]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        with storage_errors("Get user"):
            record = await UserRecord.get(oid)
        return record.to_stored() if record else None

    async def get_by_email(self, email: str) -> Optional[StoredUser]:
        with storage_errors("Get user"):
            record = await UserRecord.find_one(UserRecord.email == email.lower())
        return record.to_stored() if record else None


class MongoTemplateStore(TemplateStore):

    async def create(self, name: str, description: str, content: str, category: str) -> Template:
        record = TemplateRecord(name=name, description=description, content=content, category=category)
        with storage_errors("Create template"):
            await record.insert()
        log("STORE", f"Created template '{name}'")
        return record.to_template()

    async def list(self) -> List[Template]:
        with storage_errors("List templates"):
            records = await TemplateRecord.find_all().sort("-created_at", "-_id").to_list()
        return [record.to_template() for record in records]

    async def get(self, template_id: str) -> Template:
        oid = _object_id(template_id)
        if oid is None:
            raise NotFoundError("Template", template_id)
        with storage_errors("Get template"):
            record = await TemplateRecord.get(oid)
        if record is None:
            raise NotFoundError("Template", template_id)
        return record.to_template()
