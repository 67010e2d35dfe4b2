"""
Typed input for a product analysis + the checks that guard it.

Callers hand in a loose options mapping (e.g. parsed from CLI flags or JSON):

  {
    "product_name":  "IQOO neo 10r",      # optional
    "product_model": "",                  # optional
    "specification": "12 + 256",          # optional
    "images":        ["test/test1.jpeg"], # optional
    "config":        {"provider": "google-ai", "model": "gemini-2.5-flash"},
  }

Every field is optional — an empty mapping is a valid (if useless) input.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from errors import ValidationError

logger = logging.getLogger(__name__)

SUPPORTED_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

_TEXT_FIELDS = ("product_name", "product_model", "specification")


def validate_product_inputs(options: Any) -> None:
    """
    Raise ValidationError if options has the wrong shape.

    Touches the filesystem only to check that each image exists.
    """
    if options is None or not isinstance(options, Mapping):
        raise ValidationError("Options must be an object")

    for field_name in _TEXT_FIELDS:
        value = options.get(field_name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{field_name} must be a string if provided")

    images = options.get("images")
    if images is not None:
        if isinstance(images, (str, bytes)) or not isinstance(images, (list, tuple)):
            raise ValidationError("images must be a list of file paths if provided")
        for img_path in images:
            _validate_image_path(img_path)

    cfg = options.get("config")
    if cfg is not None:
        if not isinstance(cfg, Mapping):
            raise ValidationError("config must be an object if provided")
        for key in ("provider", "model"):
            value = cfg.get(key)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"config.{key} must be a string if provided")


def _validate_image_path(img_path: Any) -> None:
    if not isinstance(img_path, str):
        raise ValidationError("Image paths must be strings")
    try:
        resolved = Path(img_path).resolve()
        exists = resolved.exists()
    except (ValueError, OSError) as exc:
        # e.g. an embedded NUL byte or a name the OS refuses
        raise ValidationError(f"Image file not found: {img_path}") from exc
    if not exists:
        raise ValidationError(f"Image file not found: {img_path}")
    if resolved.suffix.lower() not in SUPPORTED_IMAGE_EXTENSIONS:
        supported = ", ".join(ext.lstrip(".") for ext in SUPPORTED_IMAGE_EXTENSIONS)
        raise ValidationError(
            f"Invalid image format: {img_path}. Supported formats: {supported}"
        )


@dataclass(frozen=True)
class AnalysisInput:
    """Validated, immutable input for one analysis run."""
    product_name: Optional[str] = None
    product_model: Optional[str] = None
    specification: Optional[str] = None
    images: tuple[str, ...] = ()
    provider: Optional[str] = None      # None → caller's default
    model: Optional[str] = None         # None → caller's default

    @classmethod
    def from_options(
        cls, options: Any = None,
    ) -> tuple[Optional["AnalysisInput"], Optional[ValidationError]]:
        """
        Validate options and build an AnalysisInput.

        Returns (input, None) on success or (None, error) on failure — never raises.
        None is treated as an empty mapping.
        """
        if options is None:
            options = {}
        try:
            validate_product_inputs(options)
        except ValidationError as exc:
            return None, exc

        cfg = options.get("config") or {}
        return cls(
            product_name=options.get("product_name"),
            product_model=options.get("product_model"),
            specification=options.get("specification"),
            images=tuple(options.get("images") or ()),
            provider=cfg.get("provider"),
            model=cfg.get("model"),
        ), None

    @property
    def user_text(self) -> str:
        """User-supplied text fields joined by single spaces, blanks skipped."""
        parts = (self.product_name, self.product_model, self.specification)
        return " ".join(p for p in parts if p)


def read_image_buffers(image_paths: tuple[str, ...] | list[str]) -> list[bytes]:
    """Read every image fully into memory, in order."""
    buffers: list[bytes] = []
    for img_path in image_paths:
        try:
            buffers.append(Path(os.path.abspath(img_path)).read_bytes())
        except (OSError, ValueError) as exc:
            raise ValidationError(f"Failed to read image file {img_path}: {exc}") from exc
    logger.debug("Read %d image(s), %d bytes total", len(buffers), sum(map(len, buffers)))
    return buffers
