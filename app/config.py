"""
Configuration settings for the résumé pipeline.

This file contains configuration for the LLM provider used by the model
strategies. When no provider is usable every operation runs the rule-based
strategies, so nothing here raises at import time.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# LLM Provider Configuration
# Set to "openai", "ollama" or "none"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").strip().lower()

# Model Configuration
DEFAULT_MODEL = {
    "ollama": "llama3.1:8b",
    "openai": "gpt-4o-mini",
}
RESUME_MODEL = os.getenv("RESUME_MODEL", "").strip()

# OpenAI Configuration
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None
OPENAI_MODEL_PARAMS = {
    "max_tokens": 4096,
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Sampling temperature per task
TEMPERATURE = {
    "render": 0.4,
    "grade": 0.2,
    "apply": 0.3,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def get_provider() -> str:
    return (os.getenv("LLM_PROVIDER") or LLM_PROVIDER).strip().lower()


def get_model_for_provider(provider: str | None = None) -> str:
    """Get the model for the specified provider, honouring RESUME_MODEL."""
    provider = provider or get_provider()
    override = (os.getenv("RESUME_MODEL") or RESUME_MODEL).strip()
    if override:
        return override
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")


def get_timeout() -> float:
    return float(os.getenv("RESUME_LLM_TIMEOUT_S", "20"))


def llm_enabled() -> bool:
    """True when a model provider is switched on and plausibly configured."""
    if not _env_bool("RESUME_LLM_ENABLED", True):
        return False
    provider = get_provider()
    if provider == "ollama":
        return True
    if provider != "openai":
        return False
    api_key = os.getenv("OPENAI_API_KEY", OPENAI_API_KEY).strip()
    if not api_key or _looks_like_placeholder(api_key):
        return False
    return True


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
