#!/usr/bin/env python3
# =============================================================================
# scripts/export_data.py - Write a Catalog Export to Disk
# =============================================================================
# Usage:
#   python scripts/export_data.py --format json --output exports/catalog.json
#   python scripts/export_data.py --format sql
#
# Without --output the file is written to the current directory with the
# same dated name the /api/export endpoints use.
# =============================================================================

import argparse
import json
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.services.export_service import ExportService, export_filename
from lib.database import SessionLocal, init_db

DEFAULT_PREFIX = {
    "json": "mobile-prices-export",
    "sql": "database-export",
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export brands and mobiles")
    parser.add_argument("--format", choices=["json", "sql"], default="json")
    parser.add_argument("--output", default=None, help="Destination file path")
    args = parser.parse_args(argv)

    init_db()
    with SessionLocal() as db:
        if args.format == "json":
            payload = ExportService.export_json(db)
            content = json.dumps(payload, indent=2, default=str)
            stats = payload["stats"]
        else:
            content = ExportService.export_sql(db)
            stats = ExportService.stats(db)

    output = Path(args.output or export_filename(DEFAULT_PREFIX[args.format], args.format))
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")

    print(f"Exported {stats['totalBrands']} brands and {stats['totalMobiles']} mobiles to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
