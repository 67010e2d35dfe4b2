"""
main.py — Product Search & Price Comparison demo.

Runs the three-stage pipeline once:
  1. find_product_features()  — user text + image label → search query
  2. search_product_prices()  — SerpAPI Google Shopping
  3. display_table()          — fixed-width console table

With no flags the built-in demo input is used. Flags override it:
  python main.py --name "galaxy s24" --spec "256gb" --image photo.jpg --json
"""
import argparse
import asyncio
import json
import logging
import sys

import config
from errors import SearchError
from find_product import find_product_features
from price_search import search_product_prices
from style import display_table

logging.basicConfig(
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stdout)],
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

DEMO_INPUT = {
    "product_name":  "IQOO neo 10r",
    "product_model": "",
    "specification": "12 + 256",
    "images":        ["test/test1.jpeg"],
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Identify a product and compare prices online.")
    parser.add_argument("--name", help="product name")
    parser.add_argument("--product-model", help="product model / variant")
    parser.add_argument("--spec", help="specification, e.g. '12 + 256'")
    parser.add_argument("--image", action="append", help="product photo (repeatable)")
    parser.add_argument("--provider", default=config.DEFAULT_PROVIDER, help="AI provider id")
    parser.add_argument("--ai-model", default=config.DEFAULT_MODEL, help="AI model id used to label images")
    parser.add_argument("--json", action="store_true", help="also print listings as JSON")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> dict:
    """Use the demo input unless at least one input flag was given."""
    if not any((args.name, args.product_model, args.spec, args.image)):
        return dict(DEMO_INPUT)
    options: dict = {"images": args.image or []}
    if args.name:
        options["product_name"] = args.name
    if args.product_model:
        options["product_model"] = args.product_model
    if args.spec:
        options["specification"] = args.spec
    return options


async def run(args: argparse.Namespace) -> int:
    print("🚀 Product Search & Price Comparison Demo\n")

    # ── Step 1: build search query ────────────────────────────────────────────
    print("🔍 Step 1: Building product search query...")
    result = await find_product_features(
        build_options(args),
        default_provider=args.provider,
        default_model=args.ai_model,
    )
    if not result.success:
        print(f"❌ Error building search query: {result.error}")
        return 1

    print(f"✅ Search Query: {result.search_query}")
    print("📊 Metadata:", {
        "user_text":          result.metadata.user_text,
        "image_product_name": result.metadata.image_product_name,
        "image_count":        result.metadata.image_count,
    })
    if not result.search_query:
        print("⚠️  Nothing to search for — give a product name or a photo.")
        return 1

    print("\n" + "=" * 60)

    # ── Step 2: shopping search (errors propagate to main) ────────────────────
    print("🛒 Step 2: Searching for product prices online...")
    listings = await search_product_prices(result.search_query)

    if args.json:
        print("\n📄 JSON Results:")
        print(json.dumps([item.to_dict() for item in listings], indent=2, ensure_ascii=False))

    print("\n" + "=" * 60)

    # ── Step 3: table ─────────────────────────────────────────────────────────
    print("📊 Step 3: Formatted Price Comparison Table:")
    display_table(listings)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        code = asyncio.run(run(args))
    except SearchError as exc:
        logger.error("Search failed: %s", exc)
        print(f"💥 Fatal error: {exc}")
        code = 1
    except KeyboardInterrupt:
        code = 130
    print("\n🏁 Demo completed")
    return code


if __name__ == "__main__":
    sys.exit(main())
