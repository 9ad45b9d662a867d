# =============================================================================
# tests/test_export.py - Export and SEO Tests
# =============================================================================
# Covers price parsing, SQL literals, the /api/export downloads and stats,
# and sitemap.xml / robots.txt.
# =============================================================================

import csv
import io
from datetime import datetime

import pytest

from core.models import BrandCreate, MobileCreate
from core.services import BrandService, MobileService
from core.services.export_service import ExportService, parse_price, price_bucket, sql_literal
from core.services.sitemap_service import SitemapService
from tests.conftest import make_brand, make_mobile


@pytest.fixture
def catalog(db):
    BrandService.create(db, BrandCreate(**make_brand()))
    BrandService.create(db, BrandCreate(**make_brand(name="Nokia", slug="nokia", logo="N")))
    MobileService.create(db, MobileCreate(**make_mobile()))
    MobileService.create(db, MobileCreate(**make_mobile(
        slug="nokia-105", name="Nokia 105", brand="nokia", model="105", price="Rs 5,999",
    )))
    MobileService.create(db, MobileCreate(**make_mobile(
        slug="galaxy-a35", name="Galaxy A35", model="Galaxy A35", price=None,
    )))
    return db


# =============================================================================
# Helpers
# =============================================================================

class TestPriceParsing:

    @pytest.mark.parametrize("price,expected", [
        ("Rs 449,999", 449999),
        ("USD $1199.99", 1199),
        ("Rs 305,000 - 388,000 (Est.)", 305000),
        ("Coming soon", 0),
        ("", 0),
        (None, 0),
    ])
    def test_parse_price(self, price, expected):
        assert parse_price(price) == expected

    @pytest.mark.parametrize("price,bucket", [
        ("Rs 24,999", "under25k"),
        ("Rs 25,000", "25k-50k"),
        ("Rs 99,999", "50k-100k"),
        ("Rs 149,999", "100k-150k"),
        ("Rs 150,000", "above150k"),
        (None, "under25k"),
    ])
    def test_price_bucket(self, price, bucket):
        assert price_bucket(price) == bucket


class TestSqlLiteral:

    def test_quotes_doubled(self):
        assert sql_literal("O'Brien's phone") == "'O''Brien''s phone'"

    def test_json_values_escaped(self):
        assert sql_literal({"note": "it's"}) == """'{"note": "it''s"}'"""

    def test_scalars(self):
        assert sql_literal(None) == "NULL"
        assert sql_literal(True) == "true"
        assert sql_literal(datetime(2024, 1, 2, 3, 4, 5)) == "'2024-01-02T03:04:05'"


# =============================================================================
# Export Service
# =============================================================================

class TestExportService:

    def test_json_snapshot(self, catalog):
        data = ExportService.export_json(catalog)

        assert data["version"] == "1.0"
        assert data["stats"] == {"totalBrands": 2, "totalMobiles": 3}
        assert {m["slug"] for m in data["mobiles"]} == {"galaxy-s24-ultra", "nokia-105", "galaxy-a35"}
        assert "shortSpecs" in data["mobiles"][0]

    def test_mobiles_csv_flattens_specs(self, catalog):
        rows = list(csv.DictReader(io.StringIO(ExportService.mobiles_csv(catalog))))

        row = next(r for r in rows if r["Slug"] == "galaxy-s24-ultra")
        assert row["RAM"] == "12GB"
        assert row["Processor"] == ""
        assert row["Carousel Images (JSON)"] == '["https://example.com/s24-1.jpg"]'

    def test_brands_csv_header(self, catalog):
        header = ExportService.brands_csv(catalog).splitlines()[0]

        assert header == "ID,Name,Slug,Logo,Phone Count,Description,Is Visible,Created At"

    def test_empty_catalog_csv_has_header_only(self, db):
        assert len(ExportService.mobiles_csv(db).strip().splitlines()) == 1

    def test_sql_script(self, catalog):
        script = ExportService.export_sql(catalog)

        assert "-- Total Mobiles: 3" in script
        assert script.count("INSERT INTO brands") == 2
        assert script.count("INSERT INTO mobiles") == 3
        assert "TRUNCATE TABLE mobiles CASCADE;" in script

    def test_sql_script_keeps_every_mobile_column(self, db):
        MobileService.create(db, MobileCreate(**make_mobile(
            imagekitPath="/mobiles/s24.jpg",
            dimensions={"height": "162.3mm", "weight": "233g"},
            buildMaterials={"frame": "Titanium", "back": "Glass"},
        )))

        lines = ExportService.export_sql(db).splitlines()
        insert = next(line for line in lines if line.startswith("INSERT INTO mobiles"))

        assert "image_url, imagekit_path, release_date" in insert
        assert "specifications, dimensions, build_materials, created_at)" in insert
        assert "'/mobiles/s24.jpg'" in insert
        assert '"weight": "233g"' in insert
        assert '"frame": "Titanium"' in insert

    def test_stats(self, catalog):
        stats = ExportService.stats(catalog)

        assert stats["brandDistribution"] == {"Nokia": 1, "Samsung": 2}
        assert stats["priceDistribution"] == {
            "under25k": 2, "25k-50k": 0, "50k-100k": 0, "100k-150k": 0, "above150k": 1,
        }
        assert stats["availableFormats"] == ["json", "csv", "sql"]


# =============================================================================
# Export Endpoints
# =============================================================================

class TestExportEndpoints:

    @pytest.mark.parametrize("path,media_type,prefix", [
        ("/api/export/json", "application/json", "mobile-prices-export-"),
        ("/api/export/brands/csv", "text/csv", "brands-"),
        ("/api/export/mobiles/csv", "text/csv", "mobiles-"),
        ("/api/export/sql", "application/sql", "database-export-"),
    ])
    def test_downloads_are_attachments(self, admin_client, catalog, path, media_type, prefix):
        response = admin_client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith(media_type)
        assert response.headers["content-disposition"].startswith(f"attachment; filename={prefix}")

    def test_json_download_is_parseable(self, admin_client, catalog):
        assert admin_client.get("/api/export/json").json()["stats"]["totalMobiles"] == 3

    def test_requires_admin(self, client):
        assert client.get("/api/export/json").status_code == 401


# =============================================================================
# SEO
# =============================================================================

class TestSitemap:

    def test_entry_order_and_priorities(self, catalog):
        entries = SitemapService.entries(catalog, base_url="https://example.com/")

        assert entries[0].loc == "https://example.com"
        assert entries[0].priority == 1.0
        assert [e.loc for e in entries[1:3]] == ["https://example.com/nokia", "https://example.com/samsung"]
        assert "https://example.com/nokia/nokia-105" in [e.loc for e in entries]
        assert [e.loc for e in entries[-3:]] == [
            "https://example.com/brands", "https://example.com/search", "https://example.com/compare",
        ]

    def test_sitemap_endpoint(self, client, catalog):
        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert response.headers["cache-control"] == "public, max-age=3600"
        assert "<loc>https://mobile-price.com/samsung/galaxy-s24-ultra</loc>" in response.text

    def test_robots(self, client):
        response = client.get("/robots.txt")

        assert response.text.startswith("User-agent: *\nAllow: /")
        assert "Sitemap: https://mobile-price.com/sitemap.xml" in response.text
        assert "Disallow: /api/" in response.text
        assert response.headers["cache-control"] == "public, max-age=86400"
