from datetime import datetime, timezone

from beanie import Document, Indexed
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .document import PRDDocument
from .timestamps import UTCDateTime


class Project(BaseModel):
    """A persisted, owned wrapper around exactly one document."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    summary: str
    created_at: UTCDateTime
    owner_id: str
    data: PRDDocument


class ProjectRecord(Document):
    owner_id: Indexed(str)
    name: str
    summary: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: PRDDocument

    class Settings:
        name = "projects"

    def to_project(self) -> Project:
        return Project(
            id=str(self.id),
            name=self.name,
            summary=self.summary,
            created_at=self.created_at,
            owner_id=self.owner_id,
            data=self.data,
        )
