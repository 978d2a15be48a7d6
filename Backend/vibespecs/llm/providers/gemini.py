# vibespecs/llm/providers/gemini.py
"""
Google Gemini provider implementation.
"""
import json
import aiohttp
from typing import Optional

from vibespecs.core.config import LLMSettings
from vibespecs.core.exceptions import ConfigurationError, RateLimitError, UpstreamError
from vibespecs.core.logging import log


DEFAULT_MODEL = "gemini-2.5-flash"
API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

# Keys Gemini's responseSchema understands; everything else is dropped
_SCHEMA_KEYS = {"type", "description", "enum", "properties", "required", "items", "minItems"}


def to_gemini_schema(schema: dict) -> dict:
    """Translate a JSON Schema into Gemini's OpenAPI-subset schema."""
    converted = {}
    for key, value in schema.items():
        if key not in _SCHEMA_KEYS:
            continue
        if key == "type":
            converted["type"] = value.upper()
        elif key == "properties":
            converted["properties"] = {name: to_gemini_schema(sub) for name, sub in value.items()}
        elif key == "items":
            converted["items"] = to_gemini_schema(value)
        elif key == "minItems":
            converted["minItems"] = str(value)
        else:
            converted[key] = value
    return converted


async def call(
    prompt: str,
    config: LLMSettings,
    system_prompt: str = "",
    model: Optional[str] = None,
    temperature: float = 0.4,
    max_tokens: int = 8000,
    response_schema: Optional[dict] = None,
) -> str:
    """
    Call Google Gemini API.

    Returns:
        The generated text

    Raises:
        ConfigurationError if no API key is configured
        UpstreamError on API errors
    """
    api_key = config.gemini_api_key
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY not configured", {"provider": "gemini"})

    model = model or DEFAULT_MODEL
    url = f"{API_URL}/{model}:generateContent?key={api_key}"

    generation_config = {
        "temperature": temperature,
        "maxOutputTokens": max_tokens,
    }
    if response_schema:
        generation_config["responseMimeType"] = "application/json"
        generation_config["responseSchema"] = to_gemini_schema(response_schema)

    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": generation_config,
    }

    if system_prompt:
        payload["systemInstruction"] = {"parts": [{"text": system_prompt}]}

    async with aiohttp.ClientSession() as session:
        async with session.post(
            url,
            json=payload,
            timeout=aiohttp.ClientTimeout(total=config.request_timeout)
        ) as response:
            text = await response.text()

            if response.status == 429:
                log("LLM", f"Gemini 429 rate limit: {text[:200]}")
                raise RateLimitError("gemini")

            if response.status == 403:
                raise UpstreamError("gemini", f"API key invalid or quota exceeded (403): {text[:200]}")

            if response.status != 200:
                raise UpstreamError("gemini", f"API error {response.status}: {text[:200]}")

            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise UpstreamError("gemini", f"Failed to parse response envelope: {e}")

            candidates = data.get("candidates") or []
            if not candidates:
                raise UpstreamError("gemini", "No candidates in response")

            parts = (candidates[0].get("content") or {}).get("parts") or []
            if not parts:
                raise UpstreamError("gemini", "No parts in response")

            usage = data.get("usageMetadata", {})
            log("LLM", f"Gemini tokens in={usage.get('promptTokenCount', 0)} out={usage.get('candidatesTokenCount', 0)}")

            return parts[0].get("text", "")
