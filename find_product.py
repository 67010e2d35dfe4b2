"""
find_product.py — turn user text and/or product photos into a search query.

Pipeline (strictly sequential):
  1. validate options          → AnalysisInput     (ValidationError)
  2. label images, if any      → product name text (ValidationError, ConfigurationError, LabelingError)
  3. build the search query    → query string      (pure, cannot fail)

find_product_features() never raises: every error above comes back as an
AnalysisFailure. Shopping search is a separate step (price_search.py).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional, Union

import config
from errors import ConfigurationError, LabelingError, ValidationError
from product_input import AnalysisInput, read_image_buffers
from query_builder import build_search_query, normalize_label

logger = logging.getLogger(__name__)

# (images, provider, model) → raw label text
Labeler = Callable[[list[bytes], str, str], Awaitable[str]]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ── Result types ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AnalysisMetadata:
    timestamp: str = field(default_factory=_now_iso)
    provider: Optional[str] = None
    model: Optional[str] = None
    user_text: Optional[str] = None
    image_product_name: Optional[str] = None
    image_count: Optional[int] = None


@dataclass(frozen=True)
class AnalysisSuccess:
    search_query: str
    metadata: AnalysisMetadata
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class AnalysisFailure:
    error: str
    metadata: AnalysisMetadata
    success: bool = field(default=False, init=False)


AnalysisResult = Union[AnalysisSuccess, AnalysisFailure]


# ── Steps ─────────────────────────────────────────────────────────────────────

async def _default_labeler(images: list[bytes], provider: str, model: str) -> str:
    from providers.manager import label_images
    return await label_images(images, provider, model)


async def _extract_product_name(
    inputs: AnalysisInput, provider: str, model: str, labeler: Labeler,
) -> str:
    if not inputs.images:
        return ""
    buffers = read_image_buffers(inputs.images)
    try:
        raw = await labeler(buffers, provider, model)
    except (ConfigurationError, LabelingError):
        raise
    except Exception as exc:
        raise LabelingError(f"Image analysis failed: {exc}") from exc
    if not raw or not raw.strip():
        raise LabelingError("No content received from AI provider for image analysis")
    return normalize_label(raw)


# ── Orchestrator ──────────────────────────────────────────────────────────────

async def find_product_features(
    options: Any = None,
    *,
    default_provider: str = config.DEFAULT_PROVIDER,
    default_model: str = config.DEFAULT_MODEL,
    labeler: Optional[Labeler] = None,
) -> AnalysisResult:
    """
    Build a product search query from user inputs and image analysis.

    Args:
        options:          loose mapping, see product_input.py. None → {}.
        default_provider: labeler provider when options has no config.provider.
        default_model:    labeler model when options has no config.model.
        labeler:          image-to-text function, defaults to providers.manager.

    Returns:
        AnalysisSuccess or AnalysisFailure — never raises.
    """
    inputs, error = AnalysisInput.from_options(options)
    if error is not None:
        return _failure(error)

    provider = inputs.provider or default_provider
    model = inputs.model or default_model
    user_text = inputs.user_text

    try:
        image_product_name = await _extract_product_name(
            inputs, provider, model, labeler or _default_labeler,
        )
    except (ValidationError, ConfigurationError, LabelingError) as exc:
        return _failure(exc)

    search_query = build_search_query(user_text, image_product_name)
    logger.info('Product search query built: "%s"', search_query)

    return AnalysisSuccess(
        search_query=search_query,
        metadata=AnalysisMetadata(
            provider=provider,
            model=model,
            user_text=user_text,
            image_product_name=image_product_name,
            image_count=len(inputs.images),
        ),
    )


def _failure(exc: Exception) -> AnalysisFailure:
    logger.error("Error in find_product_features: %s", exc)
    return AnalysisFailure(error=str(exc), metadata=AnalysisMetadata())
