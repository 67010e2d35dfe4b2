"""
Tests for providers/base.py and the individual labelers.

Covers:
  - detect_mime(): magic-byte sniffing
  - build_messages(): one data-URL part per image, prompt last
  - each labeler: sends every image + prompt, returns text,
    wraps SDK errors in LabelingError
"""
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from errors import LabelingError
from providers.base import LABEL_PROMPT, detect_mime
from providers.openai_provider import OpenAILabeler, build_messages
from providers.anthropic_provider import AnthropicLabeler
from providers.openrouter_provider import OpenRouterLabeler

PNG  = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8
GIF  = b"GIF89a" + b"\x00" * 8
WEBP = b"RIFF\x00\x00\x00\x00WEBPVP8 "
BMP  = b"BM" + b"\x00" * 8
JPEG = b"\xff\xd8\xff\xe0" + b"\x00" * 8


# ── detect_mime ───────────────────────────────────────────────────────────────

class TestDetectMime:
    @pytest.mark.parametrize("data, mime", [
        (PNG,  "image/png"),
        (GIF,  "image/gif"),
        (WEBP, "image/webp"),
        (BMP,  "image/bmp"),
        (JPEG, "image/jpeg"),
        (b"",  "image/jpeg"),
    ])
    def test_magic_bytes(self, data, mime):
        assert detect_mime(data) == mime


# ── build_messages ────────────────────────────────────────────────────────────

class TestBuildMessages:
    def test_images_then_prompt(self):
        messages = build_messages([PNG, JPEG])
        content = messages[0]["content"]
        assert messages[0]["role"] == "user"
        assert len(content) == 3
        assert content[0]["image_url"]["url"].startswith("data:image/png;base64,")
        assert content[1]["image_url"]["url"].startswith("data:image/jpeg;base64,")
        assert content[2] == {"type": "text", "text": LABEL_PROMPT}


def _chat_response(text):
    message = SimpleNamespace(content=text)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


# ── OpenAI / OpenRouter ───────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestOpenAILabeler:
    async def test_returns_message_content(self):
        labeler = OpenAILabeler("sk-test", "gpt-4o-mini")
        labeler._client = MagicMock()
        labeler._client.chat.completions.create = AsyncMock(return_value=_chat_response("Pixel 9"))

        assert await labeler.label([JPEG]) == "Pixel 9"
        kwargs = labeler._client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"

    async def test_none_content_gives_empty_string(self):
        labeler = OpenAILabeler("sk-test", "gpt-4o-mini")
        labeler._client = MagicMock()
        labeler._client.chat.completions.create = AsyncMock(return_value=_chat_response(None))
        assert await labeler.label([JPEG]) == ""

    async def test_sdk_error_wrapped(self):
        labeler = OpenAILabeler("sk-test", "gpt-4o-mini")
        labeler._client = MagicMock()
        labeler._client.chat.completions.create = AsyncMock(side_effect=RuntimeError("401"))
        with pytest.raises(LabelingError, match=r"openai/gpt-4o-mini.*401"):
            await labeler.label([JPEG])

    async def test_openrouter_full_name(self):
        labeler = OpenRouterLabeler("or-test", "openai/gpt-4o")
        labeler._client = MagicMock()
        labeler._client.chat.completions.create = AsyncMock(return_value=_chat_response("Kindle"))
        assert labeler.full_name == "openrouter/openai/gpt-4o"
        assert await labeler.label([PNG]) == "Kindle"


# ── Anthropic ─────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestAnthropicLabeler:
    async def test_joins_text_blocks(self):
        labeler = AnthropicLabeler("ak-test", "claude-3-5-haiku-latest")
        labeler._client = MagicMock()
        labeler._client.messages.create = AsyncMock(return_value=SimpleNamespace(content=[
            SimpleNamespace(type="text", text="Sony WH-1000XM5"),
        ]))

        assert await labeler.label([PNG, GIF]) == "Sony WH-1000XM5"
        content = labeler._client.messages.create.await_args.kwargs["messages"][0]["content"]
        assert [c["type"] for c in content] == ["image", "image", "text"]
        assert content[0]["source"]["media_type"] == "image/png"
        assert content[1]["source"]["media_type"] == "image/gif"

    async def test_sdk_error_wrapped(self):
        labeler = AnthropicLabeler("ak-test", "claude-3-5-haiku-latest")
        labeler._client = MagicMock()
        labeler._client.messages.create = AsyncMock(side_effect=RuntimeError("overloaded"))
        with pytest.raises(LabelingError, match="overloaded"):
            await labeler.label([PNG])


# ── Gemini ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestGeminiLabeler:
    async def test_sends_all_images_then_prompt(self):
        with patch("providers.gemini_provider.genai.Client"):
            from providers.gemini_provider import GeminiLabeler
            labeler = GeminiLabeler("g-test", "gemini-2.5-flash")

        generate = AsyncMock(return_value=SimpleNamespace(text="iQOO Neo 10R"))
        labeler._client = MagicMock()
        labeler._client.aio.models.generate_content = generate

        assert await labeler.label([JPEG, WEBP]) == "iQOO Neo 10R"
        kwargs = generate.await_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert len(kwargs["contents"]) == 3
        assert kwargs["contents"][-1] == LABEL_PROMPT

    async def test_none_text_gives_empty_string(self):
        with patch("providers.gemini_provider.genai.Client"):
            from providers.gemini_provider import GeminiLabeler
            labeler = GeminiLabeler("g-test")
        labeler._client = MagicMock()
        labeler._client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text=None))
        assert await labeler.label([JPEG]) == ""

    async def test_sdk_error_wrapped(self):
        with patch("providers.gemini_provider.genai.Client"):
            from providers.gemini_provider import GeminiLabeler
            labeler = GeminiLabeler("g-test")
        labeler._client = MagicMock()
        labeler._client.aio.models.generate_content = AsyncMock(side_effect=RuntimeError("PERMISSION_DENIED"))
        with pytest.raises(LabelingError, match="google-ai/gemini-2.5-flash"):
            await labeler.label([JPEG])
