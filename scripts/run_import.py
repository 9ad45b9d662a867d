#!/usr/bin/env python3
# =============================================================================
# scripts/run_import.py - Run a Catalog Import from the Command Line
# =============================================================================
# Runs one ImportService pass against the configured database and prints a
# summary.
#
# Usage:
#   python scripts/run_import.py latest --limit 50
#   python scripts/run_import.py brand Samsung --limit 20
#   python scripts/run_import.py search "galaxy s24" --limit 10
#   python scripts/run_import.py popular --per-brand 10
#   python scripts/run_import.py brands
#
#   # Pick the upstream API (default: IMPORT_SOURCE)
#   python scripts/run_import.py latest --source mobileapi
#
# Prerequisites:
#   - RAPIDAPI_KEY or MOBILEAPI_KEY set (.env file)
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app.exceptions import MobilePricesException
from core.models.imports import ImportResult
from importers import ImportService, get_source
from lib.database import SessionLocal, init_db

MAX_PRINTED_ERRORS = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Import phones from a third-party spec API")
    parser.add_argument("--source", choices=["rapidapi", "mobileapi"], default=None)

    sub = parser.add_subparsers(dest="command", required=True)

    latest = sub.add_parser("latest", help="Import the newest phones")
    latest.add_argument("--limit", type=int, default=50)

    brand = sub.add_parser("brand", help="Import phones of one brand")
    brand.add_argument("brand")
    brand.add_argument("--limit", type=int, default=20)

    search = sub.add_parser("search", help="Import phones matching a query")
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=10)

    popular = sub.add_parser("popular", help="Import the popular brands in turn")
    popular.add_argument("--per-brand", type=int, default=10)

    sub.add_parser("brands", help="Create missing brands")
    return parser


def run(args: argparse.Namespace, service: ImportService) -> ImportResult:
    if args.command == "latest":
        return service.import_latest_mobiles(args.limit)
    if args.command == "brand":
        return service.import_mobiles_by_brand(args.brand, args.limit)
    if args.command == "search":
        return service.search_and_import_mobiles(args.query, args.limit)
    if args.command == "popular":
        return service.import_popular_brands(args.per_brand)
    return service.import_brands()


def print_summary(result: ImportResult) -> None:
    print()
    print("=" * 60)
    print("Import summary")
    print("=" * 60)
    print(f"  Imported:        {result.success}")
    print(f"  Updated:         {result.existing}")
    print(f"  Total processed: {result.processed}")
    print(f"  Errors:          {len(result.errors)}")

    if result.errors:
        print()
        print("Errors:")
        for i, error in enumerate(result.errors[:MAX_PRINTED_ERRORS], start=1):
            print(f"  {i}. {error}")
        if len(result.errors) > MAX_PRINTED_ERRORS:
            print(f"  ...and {len(result.errors) - MAX_PRINTED_ERRORS} more")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    init_db()

    try:
        with SessionLocal() as db, get_source(args.source) as source:
            result = run(args, ImportService(db, source))
    except MobilePricesException as e:
        print(f"Import failed: {e.message}", file=sys.stderr)
        if e.suggestion:
            print(f"  {e.suggestion}", file=sys.stderr)
        return 1

    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
