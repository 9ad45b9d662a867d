# =============================================================================
# importers/import_service.py - Import Orchestrator
# =============================================================================
# Runs fetch -> transform -> upsert-by-slug against one PhoneSource.
#
# Items are processed one at a time with a fixed pause between them. A failed
# item is rolled back, logged and recorded in ImportResult.errors; the pass
# continues. A failed fetch ends the pass with whatever counts it has.
#
# Usage:
#   with get_source("rapidapi") as source:
#       result = ImportService(db, source).import_mobiles_by_brand("Apple", 5)
# =============================================================================

import logging
import time
from typing import Any, Callable

from sqlalchemy.orm import Session

from app.config import settings
from core.models.imports import ImportResult, ImportStatus
from core.orm import Brand, Mobile
from core.services.brand_service import BrandService
from core.services.mobile_service import MobileService
from importers.sources import PhoneSource

logger = logging.getLogger(__name__)

POPULAR_BRANDS = ["Apple", "Samsung", "Xiaomi", "OnePlus", "Google", "Oppo", "Vivo"]

# Pause between brands in import_popular_brands, as a multiple of delay
BRAND_DELAY_FACTOR = 5


class ImportService:
    """
    Sequential importer for one source.

    Args:
        db: Session used for every read and write in the pass
        source: Upstream catalog to pull from
        delay: Seconds to pause after each item (default IMPORT_REQUEST_DELAY)
        sleep: Pause function, replaceable in tests
    """

    def __init__(
        self,
        db: Session,
        source: PhoneSource,
        delay: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.db = db
        self.source = source
        self.delay = settings.IMPORT_REQUEST_DELAY if delay is None else delay
        self.sleep = sleep

    # -------------------------------------------------------------------------
    # Per-item upsert
    # -------------------------------------------------------------------------

    def _ensure_brand(self, raw: dict[str, Any], brand_slug: str) -> None:
        if BrandService.get_by_slug(self.db, brand_slug) is not None:
            return
        brand = self.source.transform_brand(self.source.brand_name(raw))
        # Slug must equal the mobile's brand field
        self.db.add(Brand(**{**brand.model_dump(), "slug": brand_slug}))
        logger.info(f"Created missing brand: {brand_slug}")

    def _upsert(self, raw: dict[str, Any], result: ImportResult) -> None:
        mobile = self.source.transform_mobile(raw)
        result.processed += 1

        self._ensure_brand(raw, mobile.brand)

        existing = MobileService.find_by_slug(self.db, mobile.slug)
        if existing is None:
            self.db.add(Mobile(**mobile.model_dump()))
            self.db.commit()
            result.success += 1
            logger.info(f"Imported mobile: {mobile.name}")
        else:
            for field, value in mobile.model_dump().items():
                setattr(existing, field, value)
            self.db.commit()
            result.existing += 1
            logger.info(f"Updated existing mobile: {mobile.name}")

    def _run(self, phones: list[dict[str, Any]], result: ImportResult) -> ImportResult:
        for raw in phones:
            try:
                self._upsert(raw, result)
            except Exception as e:
                self.db.rollback()
                message = f"Failed to import mobile {self.source.describe(raw)}: {e}"
                logger.error(message)
                result.errors.append(message)
            self.sleep(self.delay)

        logger.info(
            f"Import pass completed. Success: {result.success}, "
            f"Existing: {result.existing}, Errors: {len(result.errors)}"
        )
        return result

    def _fetch(self, fetch: Callable[[], list[dict[str, Any]]], what: str, result: ImportResult):
        try:
            return fetch()
        except Exception as e:
            message = f"Failed to fetch {what} from {self.source.name}: {e}"
            logger.error(message)
            result.errors.append(message)
            return None

    # -------------------------------------------------------------------------
    # Passes
    # -------------------------------------------------------------------------

    def import_latest_mobiles(self, limit: int = 50) -> ImportResult:
        logger.info(f"Starting import of up to {limit} latest mobiles from {self.source.name}")
        result = ImportResult()

        phones = self._fetch(lambda: self.source.latest(limit), "latest mobiles", result)
        if phones is None:
            return result

        logger.info(f"Processing {len(phones)} phones")
        return self._run(phones, result)

    def import_mobiles_by_brand(self, brand: str, limit: int = 20) -> ImportResult:
        logger.info(f"Starting import of up to {limit} mobiles for brand: {brand}")
        result = ImportResult()

        phones = self._fetch(lambda: self.source.by_brand(brand, limit), f"mobiles for brand {brand}", result)
        if phones is None:
            return result

        logger.info(f"Found {len(phones)} phones for brand {brand}")
        return self._run(phones, result)

    def search_and_import_mobiles(self, query: str, limit: int = 10) -> ImportResult:
        logger.info(f'Starting search and import for query: "{query}"')
        result = ImportResult()

        phones = self._fetch(lambda: self.source.search(query, limit), f'mobiles matching "{query}"', result)
        if phones is None:
            return result

        logger.info(f'Found {len(phones)} phones matching "{query}"')
        return self._run(phones, result)

    def import_brands(self) -> ImportResult:
        """Create every upstream brand not yet in the catalog."""
        logger.info(f"Starting brand import from {self.source.name}")
        result = ImportResult()

        names = self._fetch(self.source.brands, "brands", result)
        if names is None:
            return result

        logger.info(f"Found {len(names)} brands")
        for name in names:
            result.processed += 1
            try:
                brand = self.source.transform_brand(name)
                if BrandService.get_by_slug(self.db, brand.slug) is not None:
                    result.existing += 1
                    logger.debug(f"Brand already exists: {brand.name}")
                    continue
                self.db.add(Brand(**brand.model_dump()))
                self.db.commit()
                result.success += 1
                logger.info(f"Imported brand: {brand.name}")
            except Exception as e:
                self.db.rollback()
                message = f"Failed to import brand {name}: {e}"
                logger.error(message)
                result.errors.append(message)

        logger.info(f"Brand import completed. Success: {result.success}, Errors: {len(result.errors)}")
        return result

    def import_popular_brands(self, per_brand: int = 10) -> ImportResult:
        logger.info("Starting import of popular brands")
        result = ImportResult()

        for brand in POPULAR_BRANDS:
            result.merge(self.import_mobiles_by_brand(brand, per_brand))
            self.sleep(self.delay * BRAND_DELAY_FACTOR)

        logger.info(f"Popular brands import completed. Success: {result.success}, Errors: {len(result.errors)}")
        return result

    @staticmethod
    def get_import_status(db: Session) -> ImportStatus:
        """Catalog totals; needs no source, so it works without API keys."""
        return ImportStatus(
            total_brands=BrandService.count(db),
            total_mobiles=MobileService.count(db),
            last_import=MobileService.latest_created_at(db),
        )
