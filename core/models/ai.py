# =============================================================================
# core/models/ai.py - AI Enhancement and Analysis Schemas
# =============================================================================
# Shapes returned by the agents package. Every field has a default so that
# partial or malformed LLM output still validates into the full shape.
#
# - MobileSpec: minimal phone description used as AI input/output
# - EnhancedMobileData: generated marketing copy
# - CameraAnalysis / ScreenAnalysis: scored spec analysis (scores 1-10)
# - DesignSimilarity / PhotoSimilarity: similarity results (0-100)
# - Request bodies for the /api/admin/ai and /api/ai routes
# =============================================================================

from pydantic import Field

from .base import CamelModel


# -----------------------------------------------------------------------------
# Enhancement
# -----------------------------------------------------------------------------

class MobileSpecShort(CamelModel):
    ram: str = ""
    storage: str = ""
    camera: str = ""
    battery: str | None = None
    display: str | None = None
    processor: str | None = None


class MobileSpec(CamelModel):
    """
    Minimal phone description passed to and returned by AIService.

    Example:
        {"name": "Galaxy S24", "brand": "samsung", "price": "Rs 199,999",
         "shortSpecs": {"ram": "8GB", "storage": "256GB", "camera": "50MP"}}
    """

    name: str
    brand: str
    model: str | None = None
    price: str | None = None
    short_specs: MobileSpecShort = Field(default_factory=MobileSpecShort)


class EnhancedMobileData(CamelModel):
    seo_description: str = ""
    marketing_description: str = ""
    key_features: list[str] = Field(default_factory=list)
    target_audience: str = ""
    comparison_points: list[str] = Field(default_factory=list)


class EnhanceMobileRequest(CamelModel):
    mobile_data: MobileSpec


class GenerateSpecsRequest(CamelModel):
    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: str | None = None


class DetailedSpecsResponse(CamelModel):
    specifications: list[dict] = Field(default_factory=list)


class SimilarPhonesResponse(CamelModel):
    suggestions: list[str] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Analysis
# -----------------------------------------------------------------------------

class PhotoQuality(CamelModel):
    daylight: float = 5
    low_light: float = 4
    portrait: float = 5
    video: float = 5


class CameraAnalysis(CamelModel):
    overall_score: float = 5
    photo_quality: PhotoQuality = Field(default_factory=PhotoQuality)
    strengths: list[str] = Field(default_factory=lambda: ["Good overall performance"])
    weaknesses: list[str] = Field(default_factory=lambda: ["Average in some conditions"])
    real_world_comparison: str = "Comparable to similar phones in this price range"
    recommended_for: list[str] = Field(default_factory=lambda: ["General users"])


class DisplayMetrics(CamelModel):
    sharpness: float = 5
    color_accuracy: float = 5
    brightness: float = 5
    viewing_angles: float = 5


class ScreenAnalysis(CamelModel):
    overall_score: float = 5
    display_metrics: DisplayMetrics = Field(default_factory=DisplayMetrics)
    strengths: list[str] = Field(default_factory=lambda: ["Good display quality"])
    weaknesses: list[str] = Field(default_factory=lambda: ["Some limitations in bright sunlight"])
    best_use_case: str = "General use and media consumption"
    comparison: str = "Competitive display for its category"


class DesignSimilarity(CamelModel):
    mobile_id: str
    mobile_name: str
    similarity: float = 0
    similar_aspects: list[str] = Field(default_factory=list)
    key_differences: list[str] = Field(default_factory=list)
    aesthetic_match: str = "Some design similarities"


class PhotoSimilarity(CamelModel):
    phone_id: str
    phone_name: str
    similarity: float = 0
    matching_features: list[str] = Field(default_factory=list)
    confidence: float = 0


class AnalyzeMobileRequest(CamelModel):
    mobile_id: str = Field(..., min_length=1)


class FindSimilarDesignsRequest(CamelModel):
    target_mobile_id: str = Field(..., min_length=1)
    candidate_ids: list[str] = Field(default_factory=list)


class FindSimilarPhotosRequest(CamelModel):
    image_base64: str = Field(..., min_length=1)
    mobile_ids: list[str] = Field(default_factory=list)
