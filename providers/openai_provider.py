"""
OpenAI labeler — supports the gpt-4o family and the o-series vision models.
"""
from __future__ import annotations

import base64
import time
import logging

from openai import AsyncOpenAI

from errors import LabelingError
from providers.base import LABEL_PROMPT, MAX_OUTPUT_TOKENS, ImageLabeler, detect_mime

logger = logging.getLogger(__name__)


def build_messages(images: list[bytes]) -> list[dict]:
    """Chat-completions payload: every image as a data URL, then the prompt."""
    content: list[dict] = []
    for img in images:
        b64 = base64.b64encode(img).decode()
        content.append({
            "type": "image_url",
            "image_url": {"url": f"data:{detect_mime(img)};base64,{b64}"},
        })
    content.append({"type": "text", "text": LABEL_PROMPT})
    return [{"role": "user", "content": content}]


class OpenAILabeler(ImageLabeler):

    def __init__(self, api_key: str, model: str = "gpt-4o-mini"):
        self.name = "openai"
        self.model_id = model
        self._client = AsyncOpenAI(api_key=api_key)

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
