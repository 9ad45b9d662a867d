# =============================================================================
# core/models/mobile.py - Mobile Schemas
# =============================================================================
# These models define the API contract for phone records:
# - ShortSpecs: compact spec summary shown on listing cards
# - SpecCategory / SpecItem: the detailed specifications tree
# - MobileCreate / MobileUpdate: admin and import input
# - MobileResponse: output for every mobile endpoint
#
# `brand` is a brand slug ("samsung"), not a foreign key, and
# `release_date` is free text.
# =============================================================================

from datetime import datetime

from pydantic import Field, model_validator

from .base import CamelModel, reject_explicit_nulls


class ShortSpecs(CamelModel):
    """
    Compact spec summary.

    Example:
        {"ram": "12GB", "storage": "256GB", "camera": "200MP",
         "battery": "5000mAh", "display": "6.8 inches",
         "processor": "Snapdragon 8 Gen 3"}
    """

    ram: str
    storage: str
    camera: str
    battery: str | None = None
    display: str | None = None
    processor: str | None = None


class SpecItem(CamelModel):
    """One feature/value row inside a spec category."""

    feature: str
    value: str


class SpecCategory(CamelModel):
    """A named group of spec rows ("Display", "Camera", ...)."""

    category: str
    specs: list[SpecItem] = Field(default_factory=list)


class Dimensions(CamelModel):
    height: str = ""
    width: str = ""
    thickness: str = ""
    weight: str = ""


class BuildMaterials(CamelModel):
    frame: str = ""
    back: str = ""
    protection: str = ""


class MobileCreate(CamelModel):
    """
    Schema for creating a mobile.

    Used by POST /api/admin/mobiles and produced by the import transformers.
    """

    slug: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., min_length=1, description="Brand slug")
    model: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    imagekit_path: str | None = None
    release_date: str = Field(..., description="Free-text release date")
    price: str | None = None
    short_specs: ShortSpecs
    carousel_images: list[str] = Field(default_factory=list)
    specifications: list[SpecCategory] = Field(default_factory=list)
    dimensions: Dimensions | None = None
    build_materials: BuildMaterials | None = None


# Columns stored NOT NULL; an update may omit them but never clear them
NON_NULLABLE_FIELDS = (
    "slug", "name", "brand", "model", "image_url", "release_date",
    "short_specs", "carousel_images", "specifications",
)


class MobileUpdate(CamelModel):
    """Partial mobile update; only the fields sent are written."""

    slug: str | None = Field(default=None, min_length=1, max_length=255)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    brand: str | None = Field(default=None, min_length=1)
    model: str | None = Field(default=None, min_length=1)
    image_url: str | None = Field(default=None, min_length=1)
    imagekit_path: str | None = None
    release_date: str | None = None
    price: str | None = None
    short_specs: dict[str, str | None] | None = None
    carousel_images: list[str] | None = None
    specifications: list[SpecCategory] | None = None
    dimensions: Dimensions | None = None
    build_materials: BuildMaterials | None = None

    @model_validator(mode="after")
    def check_required_columns(self):
        return reject_explicit_nulls(self, NON_NULLABLE_FIELDS)


class MobileResponse(CamelModel):
    """Mobile as returned by the API."""

    id: str
    slug: str
    name: str
    brand: str
    model: str
    image_url: str
    imagekit_path: str | None = None
    release_date: str
    price: str | None = None
    short_specs: ShortSpecs
    carousel_images: list[str] = Field(default_factory=list)
    specifications: list[SpecCategory] = Field(default_factory=list)
    dimensions: Dimensions | None = None
    build_materials: BuildMaterials | None = None
    created_at: datetime | None = None
