"""
Search query construction.

The user's own words always come first and are kept as typed (lowercased).
The image label only contributes words the user did not already give,
and only if they carry some meaning (longer than 2 chars, not a stop-word).
"""
from __future__ import annotations

import re

# Words that add nothing to a shopping query when they come from the AI label
STOP_WORDS = frozenset({
    "the", "and", "for", "with", "from", "this", "that", "product", "model",
})

MIN_IMAGE_WORD_LENGTH = 3

_WHITESPACE = re.compile(r"\s+")


def _tokens(text: str) -> list[str]:
    return [word for word in text.lower().split() if word]


def build_search_query(user_text: str, image_text: str) -> str:
    """
    Combine user text with the unique words of the image label.

    >>> build_search_query("iqoo neo", "this iqoo neo 5g and model")
    'iqoo neo'
    >>> build_search_query("phone", "5g ai pro")
    'phone pro'
    """
    user_text = user_text or ""
    image_text = image_text or ""
    if not user_text and not image_text:
        return ""

    user_words = _tokens(user_text)
    image_words = _tokens(image_text)

    user_set = set(user_words)
    unique_image_words = [
        word for word in image_words
        if word not in user_set
        and len(word) >= MIN_IMAGE_WORD_LENGTH
        and word not in STOP_WORDS
    ]

    # dict keeps first-occurrence order
    combined = dict.fromkeys(user_words + unique_image_words)
    return " ".join(combined).strip()


def normalize_label(raw: str) -> str:
    """Flatten a multi-line model answer into a single trimmed line."""
    if not raw:
        return ""
    return _WHITESPACE.sub(" ", raw.replace("\n", " ")).strip()
