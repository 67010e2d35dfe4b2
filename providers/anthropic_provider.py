"""
Anthropic labeler — any vision-capable Claude model.

Claude is good at reading fine print on boxes and labels, which helps
when the model number is only printed on the packaging.
"""
from __future__ import annotations

import base64
import time
import logging

import anthropic

from errors import LabelingError
from providers.base import LABEL_PROMPT, MAX_OUTPUT_TOKENS, ImageLabeler, detect_mime

logger = logging.getLogger(__name__)


class AnthropicLabeler(ImageLabeler):

    def __init__(self, api_key: str, model: str = "claude-3-5-haiku-latest"):
        self.name = "anthropic"
        self.model_id = model
        self._client = anthropic.AsyncAnthropic(api_key=api_key)

    async def label(self, images: list[bytes]) -> str:
        content: list[dict] = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": detect_mime(img),
                    "data": base64.b64encode(img).decode(),
                },
            }
            for img in images
        ]
        content.append({"type": "text", "text": LABEL_PROMPT})

        t0 = time.monotonic()
        try:
            message = await self._client.messages.create(
                model=self.model_id,
                max_tokens=MAX_OUTPUT_TOKENS,
                messages=[{"role": "user", "content": content}],
            )
        except Exception as exc:
            raise LabelingError(f"[{self.full_name}] request failed: {exc}") from exc

        latency_ms = int((time.monotonic() - t0) * 1000)
        logger.info("[%s] labelled %d image(s) in %dms", self.full_name, len(images), latency_ms)
        # Claude may return several blocks; only text blocks carry the answer
        return " ".join(
            block.text for block in message.content if getattr(block, "type", "") == "text"
        )
