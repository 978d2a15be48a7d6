# vibespecs/core/config.py
"""
Application configuration - single source of truth for all settings.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class LLMSettings:
    """LLM provider configuration."""
    default_provider: str = field(default_factory=lambda: os.getenv("DEFAULT_LLM_PROVIDER", "gemini"))
    default_model: Optional[str] = field(default_factory=lambda: os.getenv("DEFAULT_LLM_MODEL") or None)
    gemini_api_key: Optional[str] = field(default_factory=lambda: os.getenv("GEMINI_API_KEY"))
    openai_api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    ollama_base_url: str = field(default_factory=lambda: os.getenv("OLLAMA_BASE_URL", "http://localhost:11434"))
    # Low but non-zero: stable document shape, still readable prose in the prompts
    temperature: float = 0.4
    max_tokens: int = field(default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "16000")))
    request_timeout: int = field(default_factory=lambda: int(os.getenv("LLM_REQUEST_TIMEOUT", "120")))


@dataclass
class AuthSettings:
    """Session credential configuration."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "development_secret_key_change_me"))
    algorithm: str = field(default_factory=lambda: os.getenv("JWT_ALGORITHM", "HS256"))
    access_token_expire_minutes: int = field(
        default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    )
    password_scheme: str = "pbkdf2_sha256"

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == "development_secret_key_change_me"


@dataclass
class StorageSettings:
    """Persistence backend configuration."""
    backend: str = field(default_factory=lambda: os.getenv("STORAGE_BACKEND", "memory").lower())
    mongodb_url: str = field(default_factory=lambda: os.getenv("MONGODB_URL", "mongodb://localhost:27017"))
    mongodb_db: str = field(default_factory=lambda: os.getenv("MONGODB_DB", "vibespecs"))


@dataclass
class GenerationSettings:
    """Generation lifecycle configuration."""
    timeout_seconds: float = field(default_factory=lambda: float(os.getenv("GENERATION_TIMEOUT", "180")))
    # One-shot by default; callers opt in to retries
    max_retries: int = field(default_factory=lambda: int(os.getenv("GENERATION_MAX_RETRIES", "0")))
    retry_delay: float = field(default_factory=lambda: float(os.getenv("GENERATION_RETRY_DELAY", "2")))


@dataclass
class Settings:
    """Main application settings."""
    llm: LLMSettings = field(default_factory=LLMSettings)
    auth: AuthSettings = field(default_factory=AuthSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    generation: GenerationSettings = field(default_factory=GenerationSettings)
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 8000)))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    cors_origins: List[str] = field(default_factory=lambda: (
        ["*"] if os.getenv("CORS_ORIGINS", "*") == "*"
        else [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
    ))
    rate_limit: str = field(default_factory=lambda: os.getenv("RATE_LIMIT", "100/minute"))


# Singleton instance
settings = Settings()
