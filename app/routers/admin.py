# =============================================================================
# app/routers/admin.py - Admin Catalog Endpoints
# =============================================================================
# Brand/mobile CRUD and the AI enhancement tools for the admin UI.
# Every route requires a valid admin token (see app.auth.require_admin).
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import Response

from app.auth import require_admin
from app.dependencies import AIServiceDep, DbDep
from app.exceptions import MobileNotFoundError
from core.models.ai import (
    DetailedSpecsResponse,
    EnhancedMobileData,
    EnhanceMobileRequest,
    GenerateSpecsRequest,
    MobileSpec,
    SimilarPhonesResponse,
)
from core.models.brand import BrandCreate, BrandResponse, BrandUpdate
from core.models.mobile import MobileCreate, MobileResponse, MobileUpdate
from core.services.brand_service import BrandService
from core.services.mobile_service import MobileService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])

BrandId = Annotated[str, Path(description="Brand UUID")]
MobileId = Annotated[str, Path(description="Mobile UUID")]


# =============================================================================
# Brands
# =============================================================================

@router.post("/brands", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
def create_brand(data: BrandCreate, db: DbDep):
    """Create a brand. A taken slug answers 409."""
    return BrandService.create(db, data)


@router.put("/brands/{brand_id}", response_model=BrandResponse)
def update_brand(brand_id: BrandId, data: BrandUpdate, db: DbDep):
    return BrandService.update(db, brand_id, data)


@router.delete("/brands/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_brand(brand_id: BrandId, db: DbDep):
    BrandService.delete(db, brand_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Mobiles
# =============================================================================

@router.get("/mobiles/{mobile_id}", response_model=MobileResponse)
def get_mobile(mobile_id: MobileId, db: DbDep):
    mobile = MobileService.get_by_id(db, mobile_id)
    if mobile is None:
        raise MobileNotFoundError(mobile_id)
    return mobile


@router.post("/mobiles", response_model=MobileResponse, status_code=status.HTTP_201_CREATED)
def create_mobile(data: MobileCreate, db: DbDep):
    """Create a mobile. A taken slug answers 409."""
    return MobileService.create(db, data)


@router.put("/mobiles/{mobile_id}", response_model=MobileResponse)
def update_mobile(mobile_id: MobileId, data: MobileUpdate, db: DbDep):
    """
    Partially update a mobile.

    Only fields present in the body are written. A partial shortSpecs
    object keeps ram/storage/camera present as empty strings.
    """
    return MobileService.update(db, mobile_id, data)


@router.delete("/mobiles/{mobile_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_mobile(mobile_id: MobileId, db: DbDep):
    MobileService.delete(db, mobile_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# AI Enhancement
# =============================================================================

@router.post("/ai/enhance-mobile", response_model=EnhancedMobileData)
def enhance_mobile(request: EnhanceMobileRequest, ai: AIServiceDep):
    """Marketing and SEO copy for a phone. Falls back to templated copy."""
    return ai.enhance_mobile_data(request.mobile_data)


@router.post("/ai/generate-specs", response_model=MobileSpec)
def generate_specs(request: GenerateSpecsRequest, ai: AIServiceDep):
    return ai.generate_mobile_specs(request.brand, request.model, request.year)


@router.post("/ai/detailed-specs", response_model=DetailedSpecsResponse)
def detailed_specs(request: EnhanceMobileRequest, ai: AIServiceDep):
    return DetailedSpecsResponse(specifications=ai.generate_detailed_specs(request.mobile_data))


@router.post("/ai/similar-phones", response_model=SimilarPhonesResponse)
def similar_phones(request: EnhanceMobileRequest, ai: AIServiceDep, db: DbDep):
    """Suggest catalog phones similar to the one described."""
    catalog = [
        MobileSpec(
            name=m.name,
            brand=m.brand,
            model=m.model,
            price=m.price,
            short_specs=m.short_specs or {},
        )
        for m in MobileService.list_mobiles(db)
    ]
    return SimilarPhonesResponse(suggestions=ai.suggest_similar_phones(request.mobile_data, catalog))
