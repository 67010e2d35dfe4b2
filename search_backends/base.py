"""
Abstract base for all shopping search backends.
Every backend must return the same ShoppingListing list — the formatter
doesn't care which backend is active.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Optional

# Anything outside printable Basic Latin (space … tilde)
_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7E]")


def keep_english(text: Optional[str]) -> str:
    """
    Strip characters outside printable ASCII, then trim.
    Removes other scripts (Devanagari, Tamil, …) from seller names and titles.
    """
    if not text:
        return ""
    return _NON_PRINTABLE_ASCII.sub("", text).strip()


@dataclass(frozen=True)
class ShoppingListing:
    position: int
    title: str
    link: str
    source: str                         # seller / site name
    price: str                          # as shown by the provider, e.g. "₹24,999.00"
    extracted_price: Optional[float]    # numeric price, currency implied by locale
    rating: Optional[float] = None      # 0–5
    reviews: Optional[int] = None
    thumbnail: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class SearchBackend(ABC):
    """All backends must implement this interface."""

    @abstractmethod
    async def search(self, query: str) -> list[ShoppingListing]:
        """
        Search for shopping listings matching `query`, in provider rank order.
        An empty list is a valid result. Raises SearchError on failure.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name for logs/display."""
        ...
