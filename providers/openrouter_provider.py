"""
OpenRouter labeler — access hundreds of vision models through one API.

OpenRouter (https://openrouter.ai) is an OpenAI-compatible gateway.
Model IDs look like: "openai/gpt-4o", "anthropic/claude-3-haiku",
"google/gemini-2.5-flash", "meta-llama/llama-3.2-90b-vision-instruct".

Useful for models you can't access directly, or to try many models
with a single OPENROUTER_API_KEY.
"""
from __future__ import annotations

import logging
import time

import openai

from errors import LabelingError
from providers.base import MAX_OUTPUT_TOKENS, ImageLabeler
from providers.openai_provider import build_messages

logger = logging.getLogger(__name__)

_OR_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterLabeler(ImageLabeler):
    """Labeler that uses any OpenRouter-hosted multimodal model."""

    def __init__(self, api_key: str, model: str):
        self.name     = "openrouter"
        self.model_id = model
        self._client  = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=_OR_BASE_URL,
            default_headers={
                "HTTP-Referer": "https://product-price-finder",
                "X-Title":      "Product Price Finder",
            },
        )

    async def label(self, images: list[bytes]) -> str:
        t0 = time.monotonic()
        try:
            response = await self._client.chat.completions.create(
                model=self.model_id,
                max_tokens=MAX_OUTPUT_TOKENS,
                messages=build_messages(images),
            )
        except Exception as exc:
            raise LabelingError(f"[{self.full_name}] request failed: {exc}") from exc

        latency_ms = int((time.monotonic() - t0) * 1000)
        logger.info("[%s] labelled %d image(s) in %dms", self.full_name, len(images), latency_ms)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
