"""
Shared pytest fixtures.

Every test runs with all API-key env vars removed so nothing can reach a
real provider by accident; tests that need a key set it via monkeypatch.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ── Make the project root importable without installing the package ────────────
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

API_KEY_ENV_VARS = (
    "SERPAPI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENROUTER_API_KEY",
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def image_dir(tmp_path):
    """A directory with one jpeg and one png product photo."""
    (tmp_path / "front.jpg").write_bytes(JPEG_BYTES)
    (tmp_path / "back.PNG").write_bytes(PNG_BYTES)
    return tmp_path
