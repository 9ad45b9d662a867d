# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - brand.py: Brand CRUD schemas
# - mobile.py: Mobile CRUD schemas and the nested spec structures
# - imports.py: Import pass results and requests
# - ai.py: AI enhancement and analysis shapes
#
# These models define the "contract" between API and clients. All of them
# serialize with camelCase keys.
# =============================================================================

# -----------------------------------------------------------------------------
# Catalog Models
# -----------------------------------------------------------------------------
from .brand import BrandCreate, BrandResponse, BrandUpdate
from .mobile import (
    BuildMaterials,
    Dimensions,
    MobileCreate,
    MobileResponse,
    MobileUpdate,
    ShortSpecs,
    SpecCategory,
    SpecItem,
)

# -----------------------------------------------------------------------------
# Import Models
# -----------------------------------------------------------------------------
from .imports import ImportResult, ImportSearchRequest, ImportStatus

# -----------------------------------------------------------------------------
# AI Models
# -----------------------------------------------------------------------------
from .ai import (
    AnalyzeMobileRequest,
    CameraAnalysis,
    DesignSimilarity,
    DetailedSpecsResponse,
    EnhancedMobileData,
    EnhanceMobileRequest,
    FindSimilarDesignsRequest,
    FindSimilarPhotosRequest,
    GenerateSpecsRequest,
    MobileSpec,
    PhotoSimilarity,
    ScreenAnalysis,
    SimilarPhonesResponse,
)

__all__ = [
    # Catalog
    "BrandCreate",
    "BrandResponse",
    "BrandUpdate",
    "BuildMaterials",
    "Dimensions",
    "MobileCreate",
    "MobileResponse",
    "MobileUpdate",
    "ShortSpecs",
    "SpecCategory",
    "SpecItem",
    # Import
    "ImportResult",
    "ImportSearchRequest",
    "ImportStatus",
    # AI
    "AnalyzeMobileRequest",
    "CameraAnalysis",
    "DesignSimilarity",
    "DetailedSpecsResponse",
    "EnhancedMobileData",
    "EnhanceMobileRequest",
    "FindSimilarDesignsRequest",
    "FindSimilarPhotosRequest",
    "GenerateSpecsRequest",
    "MobileSpec",
    "PhotoSimilarity",
    "ScreenAnalysis",
    "SimilarPhonesResponse",
]
