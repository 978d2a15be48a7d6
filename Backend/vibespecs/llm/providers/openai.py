# vibespecs/llm/providers/openai.py
"""
OpenAI provider implementation.
"""
import aiohttp
from typing import Optional

from vibespecs.core.config import LLMSettings
from vibespecs.core.exceptions import ConfigurationError, RateLimitError, UpstreamError


DEFAULT_MODEL = "gpt-4o-mini"
API_URL = "https://api.openai.com/v1/chat/completions"


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
    Call OpenAI chat completions.

    Structured output uses response_format=json_schema (non-strict, so the
    contract's minItems constraints are accepted).
    """
    api_key = config.openai_api_key
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY not configured", {"provider": "openai"})

    model = model or DEFAULT_MODEL

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    payload = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if response_schema:
        payload["response_format"] = {
            "type": "json_schema",
            "json_schema": {"name": "prd", "schema": response_schema, "strict": False},
        }

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    async with aiohttp.ClientSession() as session:
        async with session.post(
            API_URL,
            json=payload,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=config.request_timeout)
        ) as response:
            if response.status == 429:
                raise RateLimitError("openai")

            if response.status != 200:
                text = await response.text()
                raise UpstreamError("openai", f"API error {response.status}: {text[:200]}")

            data = await response.json()

            try:
                return data["choices"][0]["message"]["content"] or ""
            except (KeyError, IndexError, TypeError) as e:
                raise UpstreamError("openai", f"Failed to parse response: {e}")
