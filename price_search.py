"""
price_search.py — public interface for shopping search.

The rest of the project imports only from here:
  from price_search import search_product_prices, ShoppingListing

The backend is built on every call from SERPAPI_API_KEY (env / .env).
Errors are NOT swallowed: SearchError propagates to the caller, who decides
whether to report and stop or carry on.
"""
from __future__ import annotations

import logging
from typing import Optional

import key_store
from errors import SearchError
from search_backends.base import SearchBackend, ShoppingListing

logger = logging.getLogger(__name__)

# Re-export ShoppingListing so callers need a single import
__all__ = ["ShoppingListing", "search_product_prices", "build_backend"]


def build_backend() -> SearchBackend:
    """Build the SerpAPI backend. Raises SearchError if the key is missing."""
    api_key = key_store.require("serpapi_api_key", SearchError)
    from search_backends.serpapi_backend import SerpApiBackend
    return SerpApiBackend(api_key=api_key)


async def search_product_prices(
    query: str,
    backend: Optional[SearchBackend] = None,
) -> list[ShoppingListing]:
    """
    Search shopping listings for query.

    Args:
        query:   search string from find_product_features().
        backend: override for the default SerpAPI backend.

    Returns:
        Listings in provider rank order (possibly empty).
    """
    backend = backend or build_backend()
    listings = await backend.search(query)
    logger.info("[%s] '%s' → %d listings", backend.name, query, len(listings))
    return listings
