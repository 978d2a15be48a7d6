# tests/test_document_model.py
"""
Document rule set: closed schema, required fields, non-empty sequences,
priority enum, order preservation.
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from vibespecs.models import DOCUMENT_FIELDS, PRDDocument, Project
from vibespecs.models.timestamps import as_utc
from conftest import make_document_dict


def test_valid_document_parses(document_dict):
    doc = PRDDocument.model_validate(document_dict)
    assert doc.app_name == "TaskFlow"
    assert doc.features[0].priority == "High"
    assert doc.mvp_scope.must_have == ["create task", "mark complete"]


def test_wire_form_uses_camel_case(document):
    wire = document.to_wire()
    assert list(wire.keys()) == DOCUMENT_FIELDS
    assert wire["techStack"]["frontend"] == "React + Vite"
    assert "acceptanceCriteria" in wire["features"][0]


def test_document_fields_cover_all_top_level_keys():
    assert DOCUMENT_FIELDS == [
        "appName", "tagline", "summary", "targetUsers", "features", "techStack",
        "dataModels", "userFlow", "mvpScope", "cursorPrompt", "replitPrompt",
    ]


@pytest.mark.parametrize("field", DOCUMENT_FIELDS)
def test_missing_top_level_field_is_rejected(field):
    data = make_document_dict()
    del data[field]
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(data)


def test_unknown_key_is_rejected():
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(make_document_dict(extra="nope"))


def test_unknown_nested_key_is_rejected():
    data = make_document_dict()
    data["techStack"]["cache"] = "Redis"
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(data)


@pytest.mark.parametrize("priority", ["Critical", "high", ""])
def test_priority_outside_enum_is_rejected(priority):
    data = make_document_dict()
    data["features"][0]["priority"] = priority
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(data)


@pytest.mark.parametrize("field", ["targetUsers", "features", "dataModels"])
def test_empty_required_sequence_is_rejected(field):
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(make_document_dict(**{field: []}))


def test_empty_acceptance_criteria_is_rejected():
    data = make_document_dict()
    data["features"][1]["acceptanceCriteria"] = []
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(data)


def test_empty_must_have_is_rejected_but_could_have_may_be_empty():
    data = make_document_dict()
    data["mvpScope"]["couldHave"] = []
    data["mvpScope"]["wontHave"] = []
    assert PRDDocument.model_validate(data).mvp_scope.could_have == []

    data["mvpScope"]["mustHave"] = []
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(data)


def test_blank_app_name_is_rejected():
    with pytest.raises(ValidationError):
        PRDDocument.model_validate(make_document_dict(appName="   "))


def test_sequence_order_is_preserved():
    users = ["Zed", "Amy", "Mo"]
    doc = PRDDocument.model_validate(make_document_dict(targetUsers=users))
    assert doc.target_users == users
    assert [f.name for f in doc.features] == ["Task Capture", "Completion"]


def test_naive_timestamps_are_read_as_utc():
    naive = datetime(2026, 3, 1, 12, 30)
    assert as_utc(naive) == datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)

    shifted = datetime(2026, 3, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
    assert as_utc(shifted).utcoffset() == timedelta(0)
    assert as_utc(shifted).hour == 12


def test_project_created_at_is_always_aware(document):
    project = Project(
        id="p1", name="TaskFlow", summary="s", created_at=datetime(2026, 3, 1), owner_id="u1", data=document,
    )
    assert project.created_at.tzinfo is timezone.utc
