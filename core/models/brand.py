# =============================================================================
# core/models/brand.py - Brand Schemas
# =============================================================================
# These models define the API contract for brand operations:
# - BrandCreate: Input for POST /api/admin/brands and the import pipeline
# - BrandUpdate: Partial input for PUT /api/admin/brands/{id}
# - BrandResponse: Output for brand endpoints
# =============================================================================

from datetime import datetime

from pydantic import Field, model_validator

from .base import CamelModel, reject_explicit_nulls


class BrandCreate(CamelModel):
    """
    Schema for creating a brand.

    Example:
        {
            "name": "Samsung",
            "slug": "samsung",
            "logo": "S",
            "description": "South Korean multinational electronics company"
        }
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    slug: str = Field(..., min_length=1, max_length=255, description="Unique URL slug")
    logo: str | None = Field(default=None, description="Logo glyph or image URL")
    phone_count: str | None = Field(default="0", description="Stored phone count")
    description: str | None = Field(default=None)
    is_visible: bool | None = Field(default=True)


class BrandUpdate(CamelModel):
    """Partial brand update; only the fields sent are written."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255)
    logo: str | None = None
    phone_count: str | None = None
    description: str | None = None
    is_visible: bool | None = None

    @model_validator(mode="after")
    def check_required_columns(self):
        return reject_explicit_nulls(self, ("name", "slug"))


class BrandResponse(CamelModel):
    """Brand as returned by the API."""

    id: str
    name: str
    slug: str
    logo: str | None = None
    phone_count: str | None = "0"
    description: str | None = None
    is_visible: bool | None = True
    created_at: datetime | None = None
