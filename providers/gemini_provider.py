"""
Google Gemini labeler — uses the google-genai SDK.

Default labeler for the project (provider id "google-ai").
gemini-2.5-flash is cheap and reads product packaging text well.
"""
from __future__ import annotations

import time
import logging

from google import genai
from google.genai import types as genai_types

from errors import LabelingError
from providers.base import LABEL_PROMPT, MAX_OUTPUT_TOKENS, ImageLabeler, detect_mime

logger = logging.getLogger(__name__)


class GeminiLabeler(ImageLabeler):

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash"):
        self.name     = "google-ai"
        self.model_id = model
        self._client  = genai.Client(api_key=api_key)

    async def label(self, images: list[bytes]) -> str:
        contents = [
            genai_types.Part.from_bytes(data=img, mime_type=detect_mime(img))
            for img in images
        ]
        contents.append(LABEL_PROMPT)

        gen_config = genai_types.GenerateContentConfig(
            temperature=0,
            max_output_tokens=MAX_OUTPUT_TOKENS,
            response_mime_type="text/plain",
        )

        t0 = time.monotonic()
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model_id,
                contents=contents,
                config=gen_config,
            )
        except Exception as exc:
            raise LabelingError(f"[{self.full_name}] request failed: {exc}") from exc

        latency_ms = int((time.monotonic() - t0) * 1000)
        logger.info("[%s] labelled %d image(s) in %dms", self.full_name, len(images), latency_ms)
        return response.text or ""
