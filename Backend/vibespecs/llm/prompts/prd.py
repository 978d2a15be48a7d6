# vibespecs/llm/prompts/prd.py
"""
PRD generation prompt: the policy instruction and the structural contract.

The contract is a closed JSON Schema. Every provider receives the same
schema; each one translates it into its own structured-output option.
"""

SYSTEM_INSTRUCTION = """
You are an elite Senior Product Manager and Software Architect.
Your goal is to take a messy, unstructured app idea and transform it into a rigorous, professional Product Requirements Document (PRD) optimized for "Vibecoding" (building with AI IDEs).

STRICT RULES:
1. Focus on modern, scalable tech stacks (React, TypeScript, Tailwind, Supabase/Firebase, Node.js/Next.js).
2. The "cursorPrompt" must be EXTREMELY detailed. It should tell Cursor exactly which files to create, what libraries to use, and how to structure the project. It is a "One-Shot" prompt attempt.
3. The "replitPrompt" should be conversational and step-by-step for an Agent.
4. Be realistic about MVP scope. Don't overengineer the "Must Haves".
5. The Data Models should be relational and logical.
6. Respond with a single JSON object that matches the response schema exactly. No markdown, no commentary.
""".strip()


def _string(description: str = "") -> dict:
    schema = {"type": "string"}
    if description:
        schema["description"] = description
    return schema


def _string_list(description: str = "", min_items: int = 1) -> dict:
    schema = {"type": "array", "items": {"type": "string"}}
    if min_items:
        schema["minItems"] = min_items
    if description:
        schema["description"] = description
    return schema


def _object(properties: dict, description: str = "") -> dict:
    schema = {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }
    if description:
        schema["description"] = description
    return schema


FEATURE_CONTRACT = _object({
    "name": _string(),
    "userStory": _string("As a [user], I want to [action] so that [benefit]"),
    "acceptanceCriteria": _string_list("List of specific criteria to mark feature as done"),
    "priority": {"type": "string", "enum": ["High", "Medium", "Low"]},
})

TECH_STACK_CONTRACT = _object({
    "frontend": _string(),
    "backend": _string(),
    "database": _string(),
    "auth": _string(),
    "deployment": _string(),
})

DATA_MODEL_CONTRACT = _object({
    "name": _string("Entity name (e.g., User, Subscription)"),
    "description": _string(),
    "attributes": _string_list("List of fields/attributes like 'id: uuid', 'email: string'"),
})

MVP_SCOPE_CONTRACT = _object({
    "mustHave": _string_list(),
    "shouldHave": _string_list(),
    "couldHave": _string_list(min_items=0),
    "wontHave": _string_list(min_items=0),
})

PRD_CONTRACT = _object({
    "appName": _string("A catchy name for the SaaS"),
    "tagline": _string("A short, punchy tagline"),
    "summary": _string("A comprehensive project summary (2-3 sentences)"),
    "targetUsers": _string_list("List of target user personas"),
    "features": {"type": "array", "items": FEATURE_CONTRACT, "minItems": 1},
    "techStack": TECH_STACK_CONTRACT,
    "dataModels": {"type": "array", "items": DATA_MODEL_CONTRACT, "minItems": 1},
    "userFlow": _string("A step-by-step text description of the main user journey."),
    "mvpScope": MVP_SCOPE_CONTRACT,
    "cursorPrompt": _string(
        "A highly detailed, single-file prompt designed to be pasted into Cursor IDE's Composer "
        "to build the MVP. It should include file structure, dependencies, and core logic instructions."
    ),
    "replitPrompt": _string(
        "Step-by-step instructions for an Agent-based IDE like Replit or Lovable to build the app iteratively."
    ),
})


def build_user_prompt(idea: str) -> str:
    """Wrap the raw idea text for the user turn."""
    return f"Here is the raw idea: {idea}"
