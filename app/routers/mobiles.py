# =============================================================================
# app/routers/mobiles.py - Public Mobile Endpoints
# =============================================================================
# Listing, lookup, search and featured mobiles.
#
# Two routers are exported because the paths live under different prefixes:
# - router: mounted at /api/mobiles
# - catalog_router: mounted at /api (/api/search, /api/featured)
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import DbDep
from app.exceptions import MobileNotFoundError, MobilePricesException
from core.models.mobile import MobileResponse
from core.services.mobile_service import MobileService

router = APIRouter()
catalog_router = APIRouter()


# =============================================================================
# /api/mobiles
# =============================================================================

@router.get("", response_model=list[MobileResponse])
def list_mobiles(
    db: DbDep,
    brand: Annotated[str | None, Query(description="Only mobiles of this brand slug")] = None,
    featured: Annotated[bool, Query(description="Return the featured selection")] = False,
    search: Annotated[str | None, Query(description="Case-insensitive text search")] = None,
):
    """
    List mobiles.

    Filters are not combined: brand wins over featured, featured wins over
    search. With no filter every mobile is returned.
    """
    if brand:
        return MobileService.list_by_brand(db, brand)
    if featured:
        return MobileService.featured(db)
    if search:
        return MobileService.search(db, search)
    return MobileService.list_mobiles(db)


@router.get("/brand/{slug}", response_model=list[MobileResponse])
def list_mobiles_by_brand(
    slug: Annotated[str, Path(description="Brand slug")],
    db: DbDep,
):
    return MobileService.list_by_brand(db, slug)


@router.get("/{brand}/{slug}", response_model=MobileResponse)
def get_mobile(
    brand: Annotated[str, Path(description="Brand slug")],
    slug: Annotated[str, Path(description="Mobile slug")],
    db: DbDep,
):
    mobile = MobileService.get_by_slug(db, brand, slug)
    if mobile is None:
        raise MobileNotFoundError(f"{brand}/{slug}")
    return mobile


# =============================================================================
# /api/search, /api/featured
# =============================================================================

@catalog_router.get("/search", response_model=list[MobileResponse])
def search_mobiles(
    db: DbDep,
    q: Annotated[str | None, Query(description="Search text")] = None,
):
    """Search mobiles by name, brand or model."""
    if not q or not q.strip():
        raise MobilePricesException(
            message="Search query is required",
            code="SEARCH_QUERY_REQUIRED",
            status_code=400,
            suggestion="Pass a non-empty ?q= parameter",
        )
    return MobileService.search(db, q)


@catalog_router.get("/featured", response_model=list[MobileResponse])
def featured_mobiles(db: DbDep):
    return MobileService.featured(db)
