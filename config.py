"""
Central configuration — reads from .env file.

API keys are NOT stored here. They are looked up through key_store.py on
first use so a missing key is reported by name at the point it is needed:

  SERPAPI_API_KEY      →  shopping search
  GOOGLE_API_KEY       →  google-ai labeler (default)
  OPENAI_API_KEY       →  openai labeler
  ANTHROPIC_API_KEY    →  anthropic labeler
  OPENROUTER_API_KEY   →  openrouter labeler
"""
import os
from dotenv import load_dotenv

load_dotenv()

# ── Image labeler defaults ────────────────────────────────────────────────────
# Passed explicitly into find_product_features() by main.py.
# Supported providers: google-ai | openai | anthropic | openrouter
DEFAULT_PROVIDER: str = os.getenv("DEFAULT_PROVIDER", "google-ai")
DEFAULT_MODEL: str    = os.getenv("DEFAULT_MODEL", "gemini-2.5-flash")

# ── Shopping search (SerpAPI, Google Shopping) ────────────────────────────────
SEARCH_LOCATION: str      = os.getenv("SEARCH_LOCATION", "India")
SEARCH_GOOGLE_DOMAIN: str = os.getenv("SEARCH_GOOGLE_DOMAIN", "google.com")
SEARCH_COUNTRY: str       = os.getenv("SEARCH_COUNTRY", "in")     # gl
SEARCH_LANGUAGE: str      = os.getenv("SEARCH_LANGUAGE", "en")    # hl
SEARCH_DEVICE: str        = os.getenv("SEARCH_DEVICE", "desktop")

# ── Console table ─────────────────────────────────────────────────────────────
CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₹")
REGION_LABEL: str    = os.getenv("REGION_LABEL", "Indian sites only")
