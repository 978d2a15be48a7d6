# vibespecs/generation/generator.py
"""
Schema-constrained PRD generator.

idea text -> request (idea + contract + policy) -> LLM -> strict JSON parse
-> document rule set -> PRDDocument. Nothing partial is ever returned.
"""
import json
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from vibespecs.core.exceptions import EmptyIdeaError, UpstreamError, ValidationError
from vibespecs.core.logging import log
from vibespecs.llm.prompts import PRD_CONTRACT, SYSTEM_INSTRUCTION, build_user_prompt
from vibespecs.models import PRDDocument


@dataclass(frozen=True)
class GenerationRequest:
    """Everything sent across the generator boundary."""
    idea: str
    prompt: str
    system_prompt: str
    contract: dict
    temperature: float


def parse_document(raw: str, provider: str = "llm") -> PRDDocument:
    """
    Parse raw model output into a validated document.

    Raises:
        UpstreamError: output is not JSON, or not a JSON object
        ValidationError: a JSON object that breaks the document rules
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise UpstreamError(provider, f"Response is not valid JSON: {e}")

    if not isinstance(payload, dict):
        raise UpstreamError(provider, f"Expected a JSON object, got {type(payload).__name__}")

    try:
        return PRDDocument.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        raise ValidationError(
            f"Generated document failed validation ({len(errors)} error(s))",
            errors,
        )


class PRDGenerator:
    """Turns free-text ideas into validated PRD documents."""

    def __init__(
        self,
        llm,
        temperature: float = 0.4,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ):
        self.llm = llm
        self.temperature = temperature
        self.provider = provider
        self.model = model

    def build_request(self, idea: str) -> GenerationRequest:
        idea = (idea or "").strip()
        if not idea:
            raise EmptyIdeaError()
        return GenerationRequest(
            idea=idea,
            prompt=build_user_prompt(idea),
            system_prompt=SYSTEM_INSTRUCTION,
            contract=PRD_CONTRACT,
            temperature=self.temperature,
        )

    async def generate(self, idea: str) -> PRDDocument:
        request = self.build_request(idea)
        log("GENERATOR", f"Generating PRD for idea ({len(request.idea)} chars)")

        raw = await self.llm.call(
            prompt=request.prompt,
            system_prompt=request.system_prompt,
            provider=self.provider,
            model=self.model,
            temperature=request.temperature,
            response_schema=request.contract,
        )

        document = parse_document(raw, self.provider or "llm")
        log("GENERATOR", f"Generated '{document.app_name}' with {len(document.features)} feature(s)")
        return document
