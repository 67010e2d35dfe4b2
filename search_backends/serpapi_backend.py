"""
SerpAPI Google Shopping backend.

Sign up at: https://serpapi.com  (free tier: 100 searches/month)
API docs:   https://serpapi.com/google-shopping-api

We query the classic Google engine in shopping mode (tbm=shop) with a fixed
region so prices come back in one currency:
  location=India, gl=in, hl=en, device=desktop   (see config.py)

Response handling:
  • "shopping_results" missing → zero listings, not an error
  • "error" field present      → SearchError (bad key, quota exhausted, …)
  • title / source are run through keep_english() before leaving this module
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp

import config
from errors import SearchError
from search_backends.base import SearchBackend, ShoppingListing, keep_english

logger = logging.getLogger(__name__)

SEARCH_URL = "https://serpapi.com/search.json"


class SerpApiBackend(SearchBackend):

    def __init__(
        self,
        api_key: str,
        location: str = config.SEARCH_LOCATION,
        google_domain: str = config.SEARCH_GOOGLE_DOMAIN,
        country: str = config.SEARCH_COUNTRY,
        language: str = config.SEARCH_LANGUAGE,
        device: str = config.SEARCH_DEVICE,
    ) -> None:
        self._key = api_key
        self._locale = {
            "location":      location,
            "google_domain": google_domain,
            "gl":            country,
            "hl":            language,
            "device":        device,
        }

    @property
    def name(self) -> str:
        return "SerpAPI / Google Shopping"

    def build_params(self, query: str) -> dict:
        return {
            "api_key": self._key,
            "engine":  "google",
            "q":       query,
            "tbm":     "shop",
            **self._locale,
        }

    async def search(self, query: str) -> list[ShoppingListing]:
        data = await self._fetch(self.build_params(query))

        if not isinstance(data, dict):
            raise SearchError(f"SerpAPI search failed: unexpected response body ({type(data).__name__})")
        if data.get("error"):
            raise SearchError(f"SerpAPI search failed: {data['error']}")

        raw_results = data.get("shopping_results") or []
        logger.info("SerpAPI returned %d listings for query '%s'", len(raw_results), query)

        listings: list[ShoppingListing] = []
        for index, raw in enumerate(raw_results, start=1):
            listing = self._parse_listing(raw, index)
            if listing:
                listings.append(listing)
        return listings

    # ── HTTP helper ───────────────────────────────────────────────────────────

    async def _fetch(self, params: dict) -> Any:
        """
        Single HTTP call to the search endpoint. Returns the decoded JSON body.
        Transport errors, timeouts and non-JSON bodies all become SearchError.
        """
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(SEARCH_URL, params=params) as resp:
                    if resp.status != 200:
                        text = await resp.text()
                        raise SearchError(f"SerpAPI search failed: HTTP {resp.status}: {text[:200]}")
                    return await resp.json()
        except asyncio.TimeoutError as exc:
            raise SearchError("SerpAPI search failed: request timed out") from exc
        except (aiohttp.ClientError, ValueError) as exc:
            # ValueError covers json.JSONDecodeError on a malformed body
            raise SearchError(f"SerpAPI search failed: {exc}") from exc

    # ── Parser ────────────────────────────────────────────────────────────────

    def _parse_listing(self, raw: dict, index: int) -> Optional[ShoppingListing]:
        if not raw or not isinstance(raw, dict):
            return None

        try:
            position = int(raw.get("position") or index)
        except (ValueError, TypeError):
            position = index

        extracted_price: Optional[float] = None
        try:
            if raw.get("extracted_price") is not None:
                extracted_price = float(raw["extracted_price"])
        except (ValueError, TypeError):
            pass

        rating: Optional[float] = None
        reviews: Optional[int] = None
        try:
            rating = float(raw["rating"]) if raw.get("rating") is not None else None
        except (ValueError, TypeError):
            pass
        try:
            reviews = int(raw["reviews"]) if raw.get("reviews") is not None else None
        except (ValueError, TypeError):
            pass

        return ShoppingListing(
            position=position,
            title=keep_english(raw.get("title")),
            link=raw.get("link") or raw.get("product_link") or "",
            source=keep_english(raw.get("source")),
            price=str(raw.get("price") or ""),
            extracted_price=extracted_price,
            rating=rating,
            reviews=reviews,
            thumbnail=raw.get("thumbnail"),
        )
