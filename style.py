"""
style.py — console rendering of shopping listings.

Layout (fixed column widths, 111 chars wide):

  ===============================================================
  E-Commerce Name      | Price     | Title
  ===============================================================
  ---------------------------------------------------------------
  Flipkart             | ₹24,999   | iQOO Neo 10R 5G (12GB RAM, 256GB)
  ===============================================================

  Total results shown (Indian sites only): 1

All console output for listings should go through this module.
"""
from __future__ import annotations

from typing import Optional, Sequence

import config
from search_backends.base import ShoppingListing

# ── Visual constants ──────────────────────────────────────────────────────────

SOURCE_WIDTH = 30
PRICE_WIDTH  = 15
TITLE_WIDTH  = 60
SEPARATOR    = " | "
TABLE_WIDTH  = SOURCE_WIDTH + PRICE_WIDTH + TITLE_WIDTH + 2 * len(SEPARATOR)

DIV  = "=" * TABLE_WIDTH    # thick divider
SDIV = "-" * TABLE_WIDTH    # subtle divider

NO_RESULTS = "No results found!"
ELLIPSIS   = "..."


# ── Cell helpers ──────────────────────────────────────────────────────────────

def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length, ending in '...' when shortened."""
    if len(text) <= max_length:
        return text
    return text[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS[:max_length]


def pad(text: str, width: int) -> str:
    return text.ljust(width)


def _group_indian(digits: str) -> str:
    """'1234567' → '12,34,567' (last three, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_price(price: Optional[float | int | str]) -> str:
    """
    Currency symbol + Indian digit grouping, up to 3 decimals, no trailing zeros.
    Unparseable or missing prices render as 'N/A'.
    """
    if price is None:
        return "N/A"
    try:
        value = float(str(price).replace(",", "")) if isinstance(price, str) else float(price)
    except ValueError:
        return "N/A"
    if value != value:     # NaN
        return "N/A"

    sign = "-" if value < 0 else ""
    int_part, _, frac = f"{abs(value):.3f}".partition(".")
    frac = frac.rstrip("0")
    number = _group_indian(int_part) + (f".{frac}" if frac else "")
    return f"{sign}{config.CURRENCY_SYMBOL}{number}"


# ── Table ─────────────────────────────────────────────────────────────────────

def header_row() -> str:
    return (
        pad("E-Commerce Name", SOURCE_WIDTH)
        + SEPARATOR + pad("Price", PRICE_WIDTH)
        + SEPARATOR + pad("Title", TITLE_WIDTH)
    )


def listing_row(listing: ShoppingListing) -> str:
    source = listing.source or "Unknown"
    title  = listing.title or "No title"
    return (
        pad(truncate(source, SOURCE_WIDTH), SOURCE_WIDTH)
        + SEPARATOR + pad(truncate(format_price(listing.extracted_price), PRICE_WIDTH), PRICE_WIDTH)
        + SEPARATOR + pad(truncate(title, TITLE_WIDTH), TITLE_WIDTH)
    )


def footer(count: int) -> str:
    return f"Total results shown ({config.REGION_LABEL}): {count}"


def render_table(listings: Sequence[ShoppingListing]) -> str:
    lines = [DIV, header_row(), DIV, SDIV]
    if not listings:
        lines.append(NO_RESULTS)
    else:
        lines.extend(listing_row(listing) for listing in listings)
    lines += [DIV, "", footer(len(listings))]
    return "\n".join(lines)


def display_table(listings: Sequence[ShoppingListing]) -> None:
    print("\n" + render_table(listings) + "\n")
