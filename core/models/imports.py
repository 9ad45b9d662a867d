# =============================================================================
# core/models/imports.py - Import Pipeline Schemas
# =============================================================================
# - ImportResult: counters returned by every ImportService pass
# - ImportSearchRequest: body for POST /api/admin/import/search
# - ImportStatus: catalog summary for GET /api/admin/import/status
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class ImportResult(CamelModel):
    """
    Outcome of one import pass.

    success counts inserted records, existing counts records matched by slug
    and updated, processed counts every item the loop reached. errors holds
    one message per failed item.
    """

    success: int = 0
    errors: list[str] = Field(default_factory=list)
    existing: int = 0
    processed: int = 0

    def merge(self, other: "ImportResult") -> None:
        self.success += other.success
        self.existing += other.existing
        self.processed += other.processed
        self.errors.extend(other.errors)


class ImportSearchRequest(CamelModel):
    query: str = Field(..., min_length=1)
    limit: int = Field(default=10, ge=1, le=100)


class ImportStatus(CamelModel):
    total_brands: int
    total_mobiles: int
    last_import: datetime | None = None
