# vibespecs/models/document.py
"""
Product Requirements Document (PRD) - the canonical generated artifact.

The schema is closed: unknown keys are rejected, every field is required,
and sequence order is preserved exactly as generated.
"""
from typing import Annotated, List, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Priority = Literal["High", "Medium", "Low"]


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Rejected when blank, stored verbatim otherwise
Text = Annotated[str, AfterValidator(_not_blank)]


class _DocumentPart(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class Feature(_DocumentPart):
    name: Text
    user_story: Text
    acceptance_criteria: List[str] = Field(min_length=1)
    priority: Priority


class TechStack(_DocumentPart):
    frontend: Text
    backend: Text
    database: Text
    auth: Text
    deployment: Text


class DataModelEntity(_DocumentPart):
    name: Text
    description: Text
    attributes: List[Text] = Field(min_length=1)  # "name: type"


class MVPScope(_DocumentPart):
    must_have: List[str] = Field(min_length=1)
    should_have: List[str] = Field(min_length=1)
    could_have: List[str]
    wont_have: List[str]


class PRDDocument(_DocumentPart):
    app_name: Text
    tagline: Text
    summary: Text
    target_users: List[str] = Field(min_length=1)
    features: List[Feature] = Field(min_length=1)
    tech_stack: TechStack
    data_models: List[DataModelEntity] = Field(min_length=1)
    user_flow: Text
    mvp_scope: MVPScope
    cursor_prompt: Text
    replit_prompt: Text

    def to_wire(self) -> dict:
        """JSON-ready dict using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True)


# Wire names of every top-level field, in declaration order
DOCUMENT_FIELDS = [f.alias for f in PRDDocument.model_fields.values()]
