"""
Labeler Manager — picks the labeler for a (provider, model) pair and runs it.

Provider ids and the models each one accepts:
  google-ai   → gemini-*                       (GOOGLE_API_KEY)
  openai      → gpt-*, o1*, o3*, o4*           (OPENAI_API_KEY)
  anthropic   → claude-*                       (ANTHROPIC_API_KEY)
  openrouter  → vendor/model, e.g. openai/gpt-4o  (OPENROUTER_API_KEY)

Labelers are built fresh on every call so key changes take effect at once.
"""
from __future__ import annotations

import logging
from typing import Callable

import key_store
from errors import ConfigurationError, LabelingError
from providers.base import ImageLabeler

logger = logging.getLogger(__name__)


def _is_gemini(model: str) -> bool:
    return model.startswith("gemini-")


def _is_openai(model: str) -> bool:
    return model.startswith(("gpt-", "o1", "o3", "o4"))


def _is_claude(model: str) -> bool:
    return model.startswith("claude-")


def _is_openrouter(model: str) -> bool:
    vendor, _, name = model.partition("/")
    return bool(vendor and name)


# provider id → (key name, model check, human description of accepted models)
PROVIDERS: dict[str, tuple[str, Callable[[str], bool], str]] = {
    "google-ai":  ("google_api_key",     _is_gemini,     "gemini-*"),
    "openai":     ("openai_api_key",     _is_openai,     "gpt-*, o1*, o3*, o4*"),
    "anthropic":  ("anthropic_api_key",  _is_claude,     "claude-*"),
    "openrouter": ("openrouter_api_key", _is_openrouter, "vendor/model"),
}


def check_combination(provider: str, model: str) -> None:
    """Raise ConfigurationError if provider is unknown or cannot serve model."""
    if provider not in PROVIDERS:
        available = ", ".join(PROVIDERS)
        raise ConfigurationError(f"Unsupported provider '{provider}'. Available: {available}")
    _, accepts, accepted_desc = PROVIDERS[provider]
    if not model or not accepts(model):
        raise ConfigurationError(
            f"Model '{model}' is not supported by provider '{provider}' (expected {accepted_desc})"
        )


def get_labeler(provider: str, model: str) -> ImageLabeler:
    """
    Build the labeler for provider/model.
    Raises ConfigurationError for a bad combination or a missing API key.
    """
    check_combination(provider, model)
    key_name = PROVIDERS[provider][0]
    api_key = key_store.require(key_name, ConfigurationError)

    if provider == "google-ai":
        from providers.gemini_provider import GeminiLabeler
        labeler: ImageLabeler = GeminiLabeler(api_key, model)
    elif provider == "openai":
        from providers.openai_provider import OpenAILabeler
        labeler = OpenAILabeler(api_key, model)
    elif provider == "anthropic":
        from providers.anthropic_provider import AnthropicLabeler
        labeler = AnthropicLabeler(api_key, model)
    else:
        from providers.openrouter_provider import OpenRouterLabeler
        labeler = OpenRouterLabeler(api_key, model)

    logger.info("Loaded labeler: %s", labeler.full_name)
    return labeler


# ── Core labeling function ────────────────────────────────────────────────────

async def label_images(images: list[bytes], provider: str, model: str) -> str:
    """
    Ask provider/model for the product name shown in images.

    Returns the raw (un-normalised) answer.
    Raises ConfigurationError or LabelingError.
    """
    labeler = get_labeler(provider, model)
    logger.info("Extracting product name from %d image(s) via %s", len(images), labeler.full_name)

    try:
        content = await labeler.label(images)
    except LabelingError:
        raise
    except Exception as exc:
        raise LabelingError(f"[{labeler.full_name}] failed: {exc}") from exc

    if not content or not content.strip():
        raise LabelingError("No content received from AI provider for image analysis")
    return content
