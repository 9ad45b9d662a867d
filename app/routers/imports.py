# =============================================================================
# app/routers/imports.py - Data Import Endpoints
# =============================================================================
# Triggers import passes from the configured third-party phone APIs.
#
# Every pass runs synchronously inside the request and answers 200 with an
# ImportResult, even when individual items failed (see result.errors).
# An unconfigured source answers 503 before any work starts.
#
# Query parameter:
#   ?source=rapidapi|mobileapi   (default: IMPORT_SOURCE)
# =============================================================================

import logging
from typing import Annotated, Iterator, Literal

from fastapi import APIRouter, Depends, Path, Query

from app.auth import require_admin
from app.dependencies import DbDep
from core.models.imports import ImportResult, ImportSearchRequest, ImportStatus
from importers import ImportService, PhoneSource, get_source

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


def get_import_source(
    source: Annotated[
        Literal["rapidapi", "mobileapi"] | None,
        Query(description="Upstream API to import from"),
    ] = None,
) -> Iterator[PhoneSource]:
    """Build the requested source and close its HTTP client afterwards."""
    phone_source = get_source(source)
    try:
        yield phone_source
    finally:
        phone_source.close()


SourceDep = Annotated[PhoneSource, Depends(get_import_source)]


@router.post("/brands", response_model=ImportResult)
def import_brands(db: DbDep, source: SourceDep):
    """Create every brand the source lists that isn't in the catalog yet."""
    return ImportService(db, source).import_brands()


@router.post("/latest", response_model=ImportResult)
def import_latest(
    db: DbDep,
    source: SourceDep,
    limit: Annotated[int, Query(ge=1, le=500)] = 50,
):
    return ImportService(db, source).import_latest_mobiles(limit)


@router.post("/brand/{brand_name}", response_model=ImportResult)
def import_brand(
    brand_name: Annotated[str, Path(description="Brand name as the source knows it")],
    db: DbDep,
    source: SourceDep,
    limit: Annotated[int, Query(ge=1, le=500)] = 20,
):
    return ImportService(db, source).import_mobiles_by_brand(brand_name, limit)


@router.post("/popular", response_model=ImportResult)
def import_popular(db: DbDep, source: SourceDep):
    """Import the top phones of each popular brand in turn."""
    return ImportService(db, source).import_popular_brands()


@router.post("/search", response_model=ImportResult)
def import_search(request: ImportSearchRequest, db: DbDep, source: SourceDep):
    return ImportService(db, source).search_and_import_mobiles(request.query, request.limit)


@router.get("/status", response_model=ImportStatus)
def import_status(db: DbDep):
    return ImportService.get_import_status(db)
