# =============================================================================
# tests/test_catalog_api.py - Public Catalog Endpoint Tests
# =============================================================================
# Covers /api/brands, /api/mobiles, /api/search, /api/featured, the root
# index and health checks. Data is inserted directly through the services.
# =============================================================================

import pytest

from core.models import BrandCreate, MobileCreate
from core.services import BrandService, MobileService
from tests.conftest import make_brand, make_mobile


@pytest.fixture
def catalog(db):
    """Two brands, three mobiles, and one brand with no phones."""
    BrandService.create(db, BrandCreate(**make_brand()))
    BrandService.create(db, BrandCreate(**make_brand(name="Apple", slug="apple", logo="A")))
    BrandService.create(db, BrandCreate(**make_brand(name="Nokia", slug="nokia", logo="N")))

    MobileService.create(db, MobileCreate(**make_mobile()))
    MobileService.create(db, MobileCreate(**make_mobile(
        slug="galaxy-a55", name="Samsung Galaxy A55", model="Galaxy A55", price="Rs 129,999",
    )))
    MobileService.create(db, MobileCreate(**make_mobile(
        slug="iphone-15-pro", name="iPhone 15 Pro", brand="apple", model="iPhone 15 Pro",
        price="Rs 399,999",
    )))
    return db


# =============================================================================
# Brands
# =============================================================================

class TestBrandsEndpoint:
    """GET /api/brands and /api/brands/{slug}."""

    def test_list_is_ordered_by_name(self, client, catalog):
        response = client.get("/api/brands")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Apple", "Nokia", "Samsung"]

    def test_phone_count_is_computed(self, client, catalog):
        counts = {b["slug"]: b["phoneCount"] for b in client.get("/api/brands").json()}

        assert counts == {"apple": "1", "nokia": "0", "samsung": "2"}

    def test_response_uses_camel_case(self, client, catalog):
        brand = client.get("/api/brands/samsung").json()

        assert set(brand) >= {"id", "name", "slug", "logo", "phoneCount", "isVisible", "createdAt"}
        assert "phone_count" not in brand

    def test_unknown_slug_is_404(self, client, catalog):
        response = client.get("/api/brands/motorola")

        assert response.status_code == 404
        assert response.json()["code"] == "BRAND_NOT_FOUND"

    def test_empty_catalog(self, client):
        assert client.get("/api/brands").json() == []


# =============================================================================
# Mobiles
# =============================================================================

class TestMobilesEndpoint:
    """GET /api/mobiles with its filters."""

    def test_list_all(self, client, catalog):
        assert len(client.get("/api/mobiles").json()) == 3

    def test_brand_filter_returns_only_that_brand(self, client, catalog):
        mobiles = client.get("/api/mobiles", params={"brand": "samsung"}).json()

        assert len(mobiles) == 2
        assert {m["brand"] for m in mobiles} == {"samsung"}

    def test_brand_filter_wins_over_search(self, client, catalog):
        mobiles = client.get("/api/mobiles", params={"brand": "apple", "search": "galaxy"}).json()

        assert [m["slug"] for m in mobiles] == ["iphone-15-pro"]

    def test_search_filter(self, client, catalog):
        mobiles = client.get("/api/mobiles", params={"search": "A55"}).json()

        assert [m["slug"] for m in mobiles] == ["galaxy-a55"]

    def test_featured_filter(self, client, catalog):
        mobiles = client.get("/api/mobiles", params={"featured": "true"}).json()

        assert len(mobiles) == 3

    def test_by_brand_path(self, client, catalog):
        mobiles = client.get("/api/mobiles/brand/apple").json()

        assert [m["name"] for m in mobiles] == ["iPhone 15 Pro"]

    def test_get_by_brand_and_slug(self, client, catalog):
        response = client.get("/api/mobiles/samsung/galaxy-s24-ultra")

        assert response.status_code == 200
        mobile = response.json()
        assert mobile["shortSpecs"]["ram"] == "12GB"
        assert mobile["imageUrl"] == "https://example.com/s24.jpg"
        assert mobile["specifications"][0]["category"] == "Display"

    def test_slug_under_wrong_brand_is_404(self, client, catalog):
        response = client.get("/api/mobiles/apple/galaxy-s24-ultra")

        assert response.status_code == 404
        assert response.json()["code"] == "MOBILE_NOT_FOUND"


class TestSearchAndFeatured:
    """GET /api/search and /api/featured."""

    def test_search_is_case_insensitive(self, client, catalog):
        mobiles = client.get("/api/search", params={"q": "IPHONE"}).json()

        assert [m["slug"] for m in mobiles] == ["iphone-15-pro"]

    def test_search_matches_brand(self, client, catalog):
        assert len(client.get("/api/search", params={"q": "samsung"}).json()) == 2

    def test_search_no_match(self, client, catalog):
        assert client.get("/api/search", params={"q": "pixel"}).json() == []

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_blank_query_is_400(self, client, params):
        response = client.get("/api/search", params=params)

        assert response.status_code == 400
        assert response.json()["code"] == "SEARCH_QUERY_REQUIRED"

    def test_featured_respects_limit(self, client, db):
        for i in range(10):
            MobileService.create(db, MobileCreate(**make_mobile(slug=f"phone-{i}", name=f"Phone {i}")))

        assert len(client.get("/api/featured").json()) == 8


# =============================================================================
# Root & Health
# =============================================================================

class TestRootAndHealth:

    def test_root_lists_endpoints(self, client):
        body = client.get("/").json()

        assert body["name"] == "MobilePrices API"
        assert body["endpoints"]["search"] == "/api/search?q="

    def test_health(self, client):
        body = client.get("/api/health").json()

        assert body["status"] == "healthy"
        assert body["environment"] == "development"

    def test_readiness_checks_database(self, client):
        body = client.get("/api/health/ready").json()

        assert body["status"] == "ready"
        assert body["checks"] == {"database": "healthy", "ai": "disabled"}
        assert set(body["catalog"]) == {"brands", "mobiles"}
