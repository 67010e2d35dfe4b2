"""
Shared prompt, helpers and base class for all image labelers.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# ── Prompt (shared across all providers) ──────────────────────────────────────

LABEL_PROMPT = "Give the name of the product in single line"

MAX_OUTPUT_TOKENS = 256


def detect_mime(image_bytes: bytes) -> str:
    """Guess the image MIME type from magic bytes (default jpeg)."""
    if image_bytes[:8] == b"\x89PNG\r\n\x1a\n":
        return "image/png"
    if image_bytes[:4] == b"GIF8":
        return "image/gif"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:2] == b"BM":
        return "image/bmp"
    return "image/jpeg"


# ── Abstract base ──────────────────────────────────────────────────────────────

class ImageLabeler(ABC):
    """Base class all image labelers must implement."""

    name: str           # e.g. "google-ai"
    model_id: str       # e.g. "gemini-2.5-flash"

    @abstractmethod
    async def label(self, images: list[bytes]) -> str:
        """
        Send every image plus LABEL_PROMPT to the model in a single request.
        Returns the raw text answer. Raises LabelingError on failure.
        """
        ...

    @property
    def full_name(self) -> str:
        return f"{self.name}/{self.model_id}"
