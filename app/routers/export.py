# =============================================================================
# app/routers/export.py - Catalog Export Endpoints
# =============================================================================
# Downloadable dumps of the catalog. Files are served as attachments named
# with today's date (e.g. mobiles-2024-05-01.csv).
# Every route requires a valid admin token.
# =============================================================================

import json
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from app.auth import require_admin
from app.dependencies import DbDep
from core.services.export_service import ExportService, export_filename

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


def _attachment(content: str, media_type: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        iter([content]),
        media_type=media_type,
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
        }
    )


@router.get("/json")
def export_json(db: DbDep):
    """Full snapshot: {exportDate, version, stats, brands, mobiles}."""
    payload = ExportService.export_json(db)
    return _attachment(
        json.dumps(payload, indent=2, default=str),
        "application/json",
        export_filename("mobile-prices-export", "json"),
    )


@router.get("/brands/csv")
def export_brands_csv(db: DbDep):
    return _attachment(ExportService.brands_csv(db), "text/csv", export_filename("brands", "csv"))


@router.get("/mobiles/csv")
def export_mobiles_csv(db: DbDep):
    """Mobiles with short specs flattened into columns."""
    return _attachment(ExportService.mobiles_csv(db), "text/csv", export_filename("mobiles", "csv"))


@router.get("/sql")
def export_sql(db: DbDep):
    """PostgreSQL INSERT script for brands and mobiles."""
    return _attachment(ExportService.export_sql(db), "application/sql", export_filename("database-export", "sql"))


@router.get("/stats")
def export_stats(db: DbDep):
    return ExportService.stats(db)
