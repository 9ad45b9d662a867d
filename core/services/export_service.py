# =============================================================================
# core/services/export_service.py - Catalog Export
# =============================================================================
# Builds the downloadable dumps served under /api/export and written by
# scripts/export_data.py:
# - JSON snapshot with stats
# - Brands CSV and flattened mobiles CSV (pandas)
# - PostgreSQL INSERT script
# - Brand and price distribution stats
# =============================================================================

import io
import json
import logging
import re
from datetime import datetime, timezone
from typing import Any

import pandas as pd
from sqlalchemy.orm import Session

from core.models.brand import BrandResponse
from core.models.mobile import MobileResponse
from core.orm import Mobile
from core.services.brand_service import BrandService
from core.services.mobile_service import MobileService

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"

BRAND_CSV_COLUMNS = {
    "id": "ID",
    "name": "Name",
    "slug": "Slug",
    "logo": "Logo",
    "phoneCount": "Phone Count",
    "description": "Description",
    "isVisible": "Is Visible",
    "createdAt": "Created At",
}

MOBILE_CSV_COLUMNS = {
    "id": "ID",
    "name": "Name",
    "brand": "Brand",
    "model": "Model",
    "slug": "Slug",
    "imageUrl": "Image URL",
    "releaseDate": "Release Date",
    "price": "Price",
    "ram": "RAM",
    "storage": "Storage",
    "camera": "Camera",
    "battery": "Battery",
    "display": "Display",
    "processor": "Processor",
    "carouselImages": "Carousel Images (JSON)",
    "createdAt": "Created At",
}

# (label, upper bound exclusive); the last bucket has no bound
PRICE_BUCKETS = [
    ("under25k", 25_000),
    ("25k-50k", 50_000),
    ("50k-100k", 100_000),
    ("100k-150k", 150_000),
    ("above150k", None),
]

_PRICE_NUMBER = re.compile(r"\d[\d,]*")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def export_filename(prefix: str, extension: str) -> str:
    """Attachment name stamped with today's date, e.g. brands-2024-05-01.csv."""
    return f"{prefix}-{datetime.now(timezone.utc).date().isoformat()}.{extension}"


def parse_price(price: str | None) -> int:
    """
    Extract the first number from a free-text price.

    "Rs 449,999" -> 449999, "USD $1199.99" -> 1199, None -> 0.
    """
    if not price:
        return 0
    match = _PRICE_NUMBER.search(price)
    if not match:
        return 0
    return int(match.group(0).replace(",", ""))


def price_bucket(price: str | None) -> str:
    value = parse_price(price)
    for label, upper in PRICE_BUCKETS:
        if upper is None or value < upper:
            return label
    return PRICE_BUCKETS[-1][0]


def sql_literal(value: Any) -> str:
    """
    Render a Python value as a SQL literal.

    Strings have single quotes doubled; dicts and lists are JSON-encoded
    first. None becomes NULL.
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        value = json.dumps(value)
    if isinstance(value, datetime):
        value = value.isoformat()
    return "'" + str(value).replace("'", "''") + "'"


class ExportService:
    """Read-only export of the whole catalog."""

    @staticmethod
    def _brands(db: Session) -> list[dict[str, Any]]:
        return [b.model_dump(mode="json", by_alias=True) for b in BrandService.list_brands(db)]

    @staticmethod
    def _mobiles(db: Session) -> list[dict[str, Any]]:
        return [
            MobileResponse.model_validate(m).model_dump(mode="json", by_alias=True)
            for m in MobileService.list_mobiles(db)
        ]

    @staticmethod
    def export_json(db: Session) -> dict[str, Any]:
        """
        Full catalog snapshot.

        Returns:
            {exportDate, version, stats{totalBrands, totalMobiles}, brands, mobiles}
        """
        brands = ExportService._brands(db)
        mobiles = ExportService._mobiles(db)

        logger.info(f"Exported JSON: {len(brands)} brands, {len(mobiles)} mobiles")
        return {
            "exportDate": _now_iso(),
            "version": EXPORT_VERSION,
            "stats": {
                "totalBrands": len(brands),
                "totalMobiles": len(mobiles),
            },
            "brands": brands,
            "mobiles": mobiles,
        }

    @staticmethod
    def brands_csv(db: Session) -> str:
        df = pd.DataFrame(ExportService._brands(db), columns=list(BRAND_CSV_COLUMNS))
        df = df.rename(columns=BRAND_CSV_COLUMNS)

        csv_buffer = io.StringIO()
        df.to_csv(csv_buffer, index=False)
        return csv_buffer.getvalue()

    @staticmethod
    def mobiles_csv(db: Session) -> str:
        """Mobiles with short specs flattened and carousel images as JSON text."""
        rows = []
        for mobile in ExportService._mobiles(db):
            short_specs = mobile.get("shortSpecs") or {}
            carousel = mobile.get("carouselImages")
            rows.append({
                "id": mobile["id"],
                "name": mobile["name"],
                "brand": mobile["brand"],
                "model": mobile["model"],
                "slug": mobile["slug"],
                "imageUrl": mobile["imageUrl"],
                "releaseDate": mobile["releaseDate"],
                "price": mobile.get("price") or "",
                "ram": short_specs.get("ram") or "",
                "storage": short_specs.get("storage") or "",
                "camera": short_specs.get("camera") or "",
                "battery": short_specs.get("battery") or "",
                "display": short_specs.get("display") or "",
                "processor": short_specs.get("processor") or "",
                "carouselImages": json.dumps(carousel) if carousel else "",
                "createdAt": mobile.get("createdAt"),
            })

        df = pd.DataFrame(rows, columns=list(MOBILE_CSV_COLUMNS))
        df = df.rename(columns=MOBILE_CSV_COLUMNS)

        csv_buffer = io.StringIO()
        df.to_csv(csv_buffer, index=False)
        return csv_buffer.getvalue()

    @staticmethod
    def export_sql(db: Session) -> str:
        """PostgreSQL script that truncates and reloads brands and mobiles."""
        brands = BrandService.list_brands(db)
        mobiles = MobileService.list_mobiles(db)

        lines = [
            "-- MobilePrices Database Backup",
            f"-- Generated on: {_now_iso()}",
            f"-- Total Brands: {len(brands)}",
            f"-- Total Mobiles: {len(mobiles)}",
            "",
            "SET session_replication_role = replica;",
            "",
            "TRUNCATE TABLE brands CASCADE;",
            "TRUNCATE TABLE mobiles CASCADE;",
            "",
            "-- Insert Brands",
        ]

        for brand in brands:
            values = ", ".join(sql_literal(v) for v in (
                brand.id, brand.name, brand.slug, brand.logo, brand.phone_count,
                brand.description, bool(brand.is_visible), brand.created_at,
            ))
            lines.append(
                "INSERT INTO brands (id, name, slug, logo, phone_count, description, "
                f"is_visible, created_at) VALUES ({values});"
            )

        lines += ["", "-- Insert Mobiles"]

        for mobile in mobiles:
            values = ", ".join(sql_literal(v) for v in (
                mobile.id, mobile.name, mobile.brand, mobile.model, mobile.slug,
                mobile.image_url, mobile.imagekit_path, mobile.release_date, mobile.price,
                mobile.short_specs, mobile.carousel_images, mobile.specifications,
                mobile.dimensions, mobile.build_materials, mobile.created_at,
            ))
            lines.append(
                "INSERT INTO mobiles (id, name, brand, model, slug, image_url, imagekit_path, "
                "release_date, price, short_specs, carousel_images, specifications, "
                "dimensions, build_materials, created_at) "
                f"VALUES ({values});"
            )

        lines += [
            "",
            "SET session_replication_role = DEFAULT;",
            "",
            "-- Backup completed successfully",
            "",
        ]

        logger.info(f"Exported SQL: {len(brands)} brands, {len(mobiles)} mobiles")
        return "\n".join(lines)

    @staticmethod
    def stats(db: Session) -> dict[str, Any]:
        brands = BrandService.list_brands(db)
        mobiles: list[Mobile] = MobileService.list_mobiles(db)

        price_distribution = {label: 0 for label, _ in PRICE_BUCKETS}
        for mobile in mobiles:
            price_distribution[price_bucket(mobile.price)] += 1

        return {
            "totalBrands": len(brands),
            "totalMobiles": len(mobiles),
            "brandDistribution": {b.name: int(b.phone_count or 0) for b in brands},
            "priceDistribution": price_distribution,
            "lastUpdated": _now_iso(),
            "availableFormats": ["json", "csv", "sql"],
        }
