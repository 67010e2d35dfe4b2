"""
key_store.py — single source of truth for all API keys.

Keys live in the process environment (or .env, loaded by config.py).
Key names are lowercase; the env var is the uppercase equivalent:
  serpapi_api_key      →  SERPAPI_API_KEY
  google_api_key       →  GOOGLE_API_KEY
  openai_api_key       →  OPENAI_API_KEY
  anthropic_api_key    →  ANTHROPIC_API_KEY
  openrouter_api_key   →  OPENROUTER_API_KEY

Keys are read fresh on every call, never cached, and only ever logged
through mask().
"""
from __future__ import annotations

import logging
import os
from typing import Optional

import config  # noqa: F401  (loads .env before the first lookup)

logger = logging.getLogger(__name__)


def get(key_name: str) -> Optional[str]:
    """Return the value for key_name, or None if it is not set (or blank)."""
    value = os.getenv(key_name.upper(), "").strip()
    return value or None


def require(key_name: str, error_cls: type[Exception]) -> str:
    """
    Return the value for key_name or raise error_cls naming the missing env var.
    Callers pick the error type that fits their stage (SearchError, ConfigurationError).
    """
    env_name = key_name.upper()
    value = get(key_name)
    if not value:
        logger.warning("Missing credential: %s", env_name)
        raise error_cls(f"{env_name} not found in environment variables")
    logger.debug("Using %s=%s", env_name, mask(value))
    return value


def mask(value: Optional[str]) -> str:
    """Log-safe form of a secret: first and last 4 chars, or just '****' if short."""
    if not value:
        return "<unset>"
    if len(value) <= 8:
        return "****"
    return f"{value[:4]}…{value[-4:]}"
