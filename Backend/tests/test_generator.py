# tests/test_generator.py
import json
from unittest.mock import AsyncMock

import pytest

from vibespecs.core.exceptions import EmptyIdeaError, UpstreamError, ValidationError
from vibespecs.generation import PRDGenerator, parse_document
from vibespecs.llm.prompts import PRD_CONTRACT, SYSTEM_INSTRUCTION
from vibespecs.models import DOCUMENT_FIELDS
from conftest import TASKFLOW, make_document_dict


def _llm_returning(text):
    llm = AsyncMock()
    llm.call = AsyncMock(return_value=text)
    return llm


@pytest.mark.asyncio
async def test_generate_returns_validated_document(fake_llm):
    generator = PRDGenerator(fake_llm)
    doc = await generator.generate("a todo app")
    assert doc.app_name == "TaskFlow"
    assert len(doc.features) == 2


@pytest.mark.asyncio
async def test_generate_sends_contract_and_low_temperature(fake_llm):
    await PRDGenerator(fake_llm).generate("  a todo app  ")
    kwargs = fake_llm.call.await_args.kwargs
    assert kwargs["temperature"] == 0.4
    assert kwargs["response_schema"] is PRD_CONTRACT
    assert kwargs["system_prompt"] == SYSTEM_INSTRUCTION
    assert kwargs["prompt"].endswith("a todo app")


@pytest.mark.asyncio
@pytest.mark.parametrize("idea", ["", "   ", "\n\t"])
async def test_blank_idea_never_calls_llm(fake_llm, idea):
    with pytest.raises(EmptyIdeaError):
        await PRDGenerator(fake_llm).generate(idea)
    fake_llm.call.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("field", DOCUMENT_FIELDS)
async def test_missing_field_in_output_is_validation_error(field):
    data = make_document_dict()
    del data[field]
    generator = PRDGenerator(_llm_returning(json.dumps(data)))
    with pytest.raises(ValidationError) as exc_info:
        await generator.generate("a todo app")
    assert any(err["loc"] == field for err in exc_info.value.errors)


@pytest.mark.asyncio
async def test_non_json_output_is_upstream_error():
    generator = PRDGenerator(_llm_returning("Sure! Here is your PRD:"))
    with pytest.raises(UpstreamError):
        await generator.generate("a todo app")


@pytest.mark.asyncio
async def test_json_array_output_is_upstream_error():
    generator = PRDGenerator(_llm_returning(json.dumps([TASKFLOW])))
    with pytest.raises(UpstreamError):
        await generator.generate("a todo app")


@pytest.mark.asyncio
async def test_llm_errors_propagate_typed():
    llm = AsyncMock()
    llm.call = AsyncMock(side_effect=UpstreamError("gemini", "boom"))
    with pytest.raises(UpstreamError) as exc_info:
        await PRDGenerator(llm).generate("a todo app")
    assert exc_info.value.provider == "gemini"


def test_parse_document_reports_nested_location():
    data = make_document_dict()
    data["features"][0]["priority"] = "Urgent"
    with pytest.raises(ValidationError) as exc_info:
        parse_document(json.dumps(data))
    assert exc_info.value.errors[0]["loc"].startswith("features.0.priority")


def test_contract_requires_every_document_field():
    assert PRD_CONTRACT["type"] == "object"
    assert PRD_CONTRACT["required"] == DOCUMENT_FIELDS
    assert set(PRD_CONTRACT["properties"]) == set(DOCUMENT_FIELDS)
    assert PRD_CONTRACT["additionalProperties"] is False


def test_contract_priority_enum_and_nested_requirements():
    feature = PRD_CONTRACT["properties"]["features"]["items"]
    assert feature["properties"]["priority"]["enum"] == ["High", "Medium", "Low"]
    assert set(feature["required"]) == {"name", "userStory", "acceptanceCriteria", "priority"}
    mvp = PRD_CONTRACT["properties"]["mvpScope"]
    assert set(mvp["required"]) == {"mustHave", "shouldHave", "couldHave", "wontHave"}
