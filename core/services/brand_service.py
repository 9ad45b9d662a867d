# =============================================================================
# core/services/brand_service.py - Brand Storage
# =============================================================================
# Brand CRUD over the brands table.
# Separates HTTP concerns from database logic.
# =============================================================================

import logging
from typing import Any

from sqlalchemy import cast, func, select, String
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import BrandNotFoundError, DuplicateSlugError, InvalidRecordError
from core.models.brand import BrandCreate, BrandResponse, BrandUpdate
from core.orm import Brand, Mobile

logger = logging.getLogger(__name__)


class BrandService:
    """
    Service for brand storage operations.

    All methods take the caller's session; nothing here commits across
    more than one record.
    """

    @staticmethod
    def list_brands(db: Session) -> list[BrandResponse]:
        """
        List all brands ordered by name.

        phone_count is computed from the mobiles table at read time, not read
        from the stored column.
        """
        phone_count = cast(func.count(Mobile.id), String).label("phone_count")
        stmt = (
            select(Brand, phone_count)
            .outerjoin(Mobile, Mobile.brand == Brand.slug)
            .group_by(Brand.id)
            .order_by(Brand.name)
        )

        brands = []
        for brand, count in db.execute(stmt).all():
            response = BrandResponse.model_validate(brand)
            response.phone_count = str(count)
            brands.append(response)
        return brands

    @staticmethod
    def get_by_slug(db: Session, slug: str) -> Brand | None:
        return db.scalar(select(Brand).where(Brand.slug == slug))

    @staticmethod
    def get_by_id(db: Session, brand_id: str) -> Brand | None:
        return db.get(Brand, brand_id)

    @staticmethod
    def create(db: Session, data: BrandCreate) -> Brand:
        """
        Insert a brand.

        Raises:
            DuplicateSlugError: If a brand with the same slug exists
        """
        brand = Brand(**data.model_dump())
        db.add(brand)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise BrandService._write_error(db, data.slug, None, e)

        db.refresh(brand)
        logger.info(f"Created brand: {brand.slug}")
        return brand

    @staticmethod
    def update(db: Session, brand_id: str, data: BrandUpdate | dict[str, Any]) -> Brand:
        """
        Apply a partial update to a brand.

        Raises:
            BrandNotFoundError: If the id doesn't exist
            DuplicateSlugError: If the new slug collides with another brand
            InvalidRecordError: If the database rejects the row for another reason
        """
        brand = db.get(Brand, brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)

        changes = data if isinstance(data, dict) else data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(brand, field, value)

        slug = changes.get("slug") or brand.slug
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise BrandService._write_error(db, slug, brand_id, e)

        db.refresh(brand)
        logger.info(f"Updated brand: {brand.slug}")
        return brand

    @staticmethod
    def _write_error(db: Session, slug: str, brand_id: str | None, error: IntegrityError) -> Exception:
        stmt = select(Brand.id).where(Brand.slug == slug)
        if brand_id is not None:
            stmt = stmt.where(Brand.id != brand_id)
        if db.scalar(stmt) is not None:
            return DuplicateSlugError("brand", slug)
        logger.warning(f"Brand write rejected for {slug}: {error.orig}")
        return InvalidRecordError("brand", str(error.orig))

    @staticmethod
    def delete(db: Session, brand_id: str) -> None:
        """
        Delete a brand. Mobiles referencing its slug are left in place.

        Raises:
            BrandNotFoundError: If the id doesn't exist
        """
        brand = db.get(Brand, brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)

        db.delete(brand)
        db.commit()
        logger.info(f"Deleted brand: {brand.slug}")

    @staticmethod
    def count(db: Session) -> int:
        return db.scalar(select(func.count(Brand.id))) or 0
