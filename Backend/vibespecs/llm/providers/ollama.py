# vibespecs/llm/providers/ollama.py
"""
Ollama provider implementation.
"""
import aiohttp
from typing import Optional

from vibespecs.core.config import LLMSettings
from vibespecs.core.exceptions import UpstreamError


DEFAULT_MODEL = "qwen2.5:7b"


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
    Call Ollama API (local). No API key needed.
    """
    model = model or DEFAULT_MODEL
    api_url = f"{config.ollama_base_url}/api/chat"

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})

    payload = {
        "model": model,
        "messages": messages,
        "stream": False,
        "options": {
            "temperature": temperature,
            "num_predict": max_tokens,
        },
    }
    if response_schema:
        payload["format"] = response_schema

    async with aiohttp.ClientSession() as session:
        async with session.post(
            api_url,
            json=payload,
            # Ollama can be slower
            timeout=aiohttp.ClientTimeout(total=config.request_timeout * 2)
        ) as response:
            if response.status != 200:
                text = await response.text()
                raise UpstreamError("ollama", f"API error {response.status}: {text[:200]}")

            data = await response.json()

            try:
                return data["message"]["content"]
            except (KeyError, TypeError) as e:
                raise UpstreamError("ollama", f"Failed to parse response: {e}")
