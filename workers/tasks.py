# =============================================================================
# workers/tasks.py - Celery Task Definitions
# =============================================================================
# Scheduled and on-demand catalog imports.
#
# Tasks:
# - run_daily_import: latest phones (beat: every 24h)
# - run_weekly_update: brands, then popular brands (beat: every 7 days)
# - import_brand_task: one brand, on demand
#
# Each task opens its own session and source, and returns the ImportResult
# as a dict. Failures are logged and returned, never raised, so beat keeps
# its schedule.
# =============================================================================

import logging
from typing import Any, Callable

from celery import shared_task

from app.exceptions import MobilePricesException
from core.models.imports import ImportResult
from importers import ImportService, get_source
from lib.database import SessionLocal

logger = logging.getLogger(__name__)


def _run_import(
    action: Callable[[ImportService], ImportResult],
    source_name: str | None = None,
) -> dict[str, Any]:
    """Run one import action with a fresh session and source."""
    try:
        with SessionLocal() as db, get_source(source_name) as source:
            result = action(ImportService(db, source))
    except MobilePricesException as e:
        logger.error(f"Import could not start: {e.message}")
        return ImportResult(errors=[e.message]).model_dump(by_alias=True)
    except Exception as e:
        logger.exception(f"Import failed: {e}")
        return ImportResult(errors=[str(e)]).model_dump(by_alias=True)

    if result.errors:
        logger.error(f"Import finished with {len(result.errors)} errors: {result.errors[:5]}")
    return result.model_dump(by_alias=True)


@shared_task(name="workers.tasks.run_daily_import")
def run_daily_import(limit: int = 20, source: str | None = None) -> dict[str, Any]:
    """Import the newest phones from the source."""
    logger.info(f"Starting scheduled daily import (limit={limit})")
    result = _run_import(lambda service: service.import_latest_mobiles(limit), source)
    logger.info(f"Daily import completed: {result['success']} new mobiles imported")
    return result


@shared_task(name="workers.tasks.run_weekly_update")
def run_weekly_update(source: str | None = None) -> dict[str, Any]:
    """
    Refresh the brand list, then re-import the popular brands.

    The two passes are merged into one result.
    """
    logger.info("Starting scheduled weekly update")

    def update(service: ImportService) -> ImportResult:
        result = service.import_brands()
        result.merge(service.import_popular_brands())
        return result

    result = _run_import(update, source)
    logger.info(f"Weekly update completed: {result['success']} total items imported")
    return result


@shared_task(name="workers.tasks.import_brand_task")
def import_brand_task(brand: str, limit: int = 20, source: str | None = None) -> dict[str, Any]:
    logger.info(f"Starting brand import: {brand} (limit={limit})")
    return _run_import(lambda service: service.import_mobiles_by_brand(brand, limit), source)
