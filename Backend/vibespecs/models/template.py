from datetime import datetime, timezone

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .timestamps import UTCDateTime


class Template(BaseModel):
    """Reusable starting idea shown in the template gallery."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    content: str
    category: str
    created_at: UTCDateTime


class TemplateRecord(Document):
    name: str
    description: str
    content: str
    category: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "templates"

    def to_template(self) -> Template:
        return Template(
            id=str(self.id),
            name=self.name,
            description=self.description,
            content=self.content,
            category=self.category,
            created_at=self.created_at,
        )
