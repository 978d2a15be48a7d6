# vibespecs/llm/adapter.py
"""
Unified LLM adapter - single interface for all providers.

NOTE: No fallback and no retry. One provider, one attempt; callers that
want retries wrap the generator with a RetryPolicy.
"""
from typing import Optional

from vibespecs.core.config import LLMSettings
from vibespecs.core.exceptions import ConfigurationError, UpstreamError
from vibespecs.core.logging import log


class LLMAdapter:
    """
    Unified adapter for LLM providers.

    Handles:
    - Provider selection
    - SINGLE EXECUTION
    - Error typing: ConfigurationError / UpstreamError only
    """

    def __init__(self, config: LLMSettings):
        self.config = config
        self.default_provider = config.default_provider
        self.default_model = config.default_model

    async def call(
        self,
        prompt: str,
        system_prompt: str = "",
        provider: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.4,
        max_tokens: Optional[int] = None,
        response_schema: Optional[dict] = None,
    ) -> str:
        """
        Call an LLM provider once.

        Args:
            prompt: The user prompt
            system_prompt: System instructions
            provider: Provider name (gemini, openai, ollama)
            model: Model name (provider default when omitted)
            temperature: Sampling temperature
            max_tokens: Maximum response tokens
            response_schema: JSON Schema the output must follow

        Returns:
            The raw response text

        Raises:
            ConfigurationError: provider unknown or not configured
            UpstreamError: provider call failed or returned nothing
        """
        provider = provider or self.default_provider
        model = model or self.default_model

        # Import here to avoid circular imports
        from .providers import gemini, openai, ollama

        provider_map = {
            "gemini": gemini.call,
            "openai": openai.call,
            "ollama": ollama.call,
        }

        if provider not in provider_map:
            raise ConfigurationError(f"Unknown LLM provider: {provider}", {"provider": provider})

        call_func = provider_map[provider]
        log("LLM", f"Calling {provider} ({model or 'default model'}) temperature={temperature}")

        try:
            text = await call_func(
                prompt=prompt,
                config=self.config,
                system_prompt=system_prompt,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens or self.config.max_tokens,
                response_schema=response_schema,
            )
        except (ConfigurationError, UpstreamError):
            raise
        except Exception as e:
            raise UpstreamError(provider, f"Provider error: {e!r}") from e

        if not text or not text.strip():
            raise UpstreamError(provider, "Empty response")

        return text
