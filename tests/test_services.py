# =============================================================================
# tests/test_services.py - Storage Service Tests
# =============================================================================
# Direct service calls for what the HTTP tests don't reach: sample seeding,
# user storage, short-spec normalization and brand phone counts.
# =============================================================================

import pytest

from app.exceptions import BrandNotFoundError, DuplicateSlugError, InvalidRecordError
from core.models import BrandCreate, MobileCreate
from core.services import BrandService, MobileService, UserService, seed_sample_data
from core.services.mobile_service import normalize_short_specs
from core.services.seed import SAMPLE_BRANDS, SAMPLE_MOBILES
from tests.conftest import make_brand, make_mobile


class TestSeed:

    def test_seeds_empty_catalog_once(self, db):
        assert seed_sample_data(db) is True
        assert seed_sample_data(db) is False

        assert BrandService.count(db) == len(SAMPLE_BRANDS)
        assert MobileService.count(db) == len(SAMPLE_MOBILES)

    def test_skips_when_any_brand_exists(self, db):
        BrandService.create(db, BrandCreate(**make_brand(name="Nokia", slug="nokia")))

        assert seed_sample_data(db) is False
        assert MobileService.count(db) == 0

    def test_seeded_mobiles_reference_seeded_brands(self, db):
        seed_sample_data(db)

        for mobile in MobileService.list_mobiles(db):
            assert BrandService.get_by_slug(db, mobile.brand) is not None


class TestUserService:

    def test_create_and_lookup(self, db):
        user = UserService.create_user(db, "editor", "secret")

        assert UserService.get_user(db, user.id).username == "editor"
        assert UserService.get_user_by_username(db, "editor").id == user.id
        assert UserService.get_user_by_username(db, "nobody") is None

    def test_duplicate_username(self, db):
        UserService.create_user(db, "editor", "secret")

        with pytest.raises(DuplicateSlugError):
            UserService.create_user(db, "editor", "other")


class TestCatalogServices:

    def test_phone_count_ignores_stored_value(self, db):
        BrandService.create(db, BrandCreate(**make_brand(phoneCount="142")))
        MobileService.create(db, MobileCreate(**make_mobile()))

        assert BrandService.list_brands(db)[0].phone_count == "1"

    def test_delete_brand_keeps_mobiles(self, db):
        brand = BrandService.create(db, BrandCreate(**make_brand()))
        MobileService.create(db, MobileCreate(**make_mobile()))

        BrandService.delete(db, brand.id)

        assert MobileService.count(db) == 1

    def test_update_unknown_brand(self, db):
        with pytest.raises(BrandNotFoundError):
            BrandService.update(db, "missing", {"name": "X"})

    def test_rejected_write_is_not_reported_as_slug_clash(self, db):
        mobile = MobileService.create(db, MobileCreate(**make_mobile()))
        brand = BrandService.create(db, BrandCreate(**make_brand()))

        with pytest.raises(InvalidRecordError):
            MobileService.update(db, mobile.id, {"release_date": None})
        with pytest.raises(InvalidRecordError):
            BrandService.update(db, brand.id, {"name": None})

        assert MobileService.get_by_id(db, mobile.id).release_date == "2024-01-17"

    def test_taken_slug_is_reported_as_clash(self, db):
        MobileService.create(db, MobileCreate(**make_mobile()))
        other = MobileService.create(db, MobileCreate(**make_mobile(slug="galaxy-a55")))

        with pytest.raises(DuplicateSlugError):
            MobileService.update(db, other.id, {"slug": "galaxy-s24-ultra"})

    def test_normalize_short_specs(self):
        assert normalize_short_specs({"battery": "5000mAh"}) == {
            "ram": "", "storage": "", "camera": "",
            "battery": "5000mAh", "display": None, "processor": None,
        }
        assert normalize_short_specs({"ram": None, "storage": "128GB"})["ram"] == ""

    def test_search_trims_query(self, db):
        MobileService.create(db, MobileCreate(**make_mobile()))

        assert len(MobileService.search(db, "  ultra  ")) == 1
