# =============================================================================
# app/routers/brands.py - Public Brand Endpoints
# =============================================================================
# Read-only brand catalog. Admin writes live in admin.py.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import DbDep
from app.exceptions import BrandNotFoundError
from core.models.brand import BrandResponse
from core.services.brand_service import BrandService

router = APIRouter()


@router.get("", response_model=list[BrandResponse])
def list_brands(db: DbDep):
    """
    List all brands ordered by name.

    phoneCount is the live number of mobiles for each brand.
    """
    return BrandService.list_brands(db)


@router.get("/{slug}", response_model=BrandResponse)
def get_brand(
    slug: Annotated[str, Path(description="Brand slug, e.g. 'samsung'")],
    db: DbDep,
):
    brand = BrandService.get_by_slug(db, slug)
    if brand is None:
        raise BrandNotFoundError(slug)
    return brand
