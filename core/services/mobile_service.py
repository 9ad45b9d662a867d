# =============================================================================
# core/services/mobile_service.py - Mobile Storage
# =============================================================================
# Mobile CRUD, listing, search and featured queries over the mobiles table.
#
# Mobile.brand is a brand slug; lookups by (brand, slug) are plain queries,
# uniqueness is enforced on slug alone by the database.
# =============================================================================

import logging
from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import DuplicateSlugError, InvalidRecordError, MobileNotFoundError
from core.models.mobile import MobileCreate, MobileUpdate
from core.orm import Mobile

logger = logging.getLogger(__name__)


def normalize_short_specs(short_specs: dict[str, Any]) -> dict[str, Any]:
    """Fill missing ram/storage/camera with empty strings."""
    return {
        "ram": short_specs.get("ram") or "",
        "storage": short_specs.get("storage") or "",
        "camera": short_specs.get("camera") or "",
        "battery": short_specs.get("battery"),
        "display": short_specs.get("display"),
        "processor": short_specs.get("processor"),
    }


class MobileService:
    """
    Service for mobile storage operations.

    Lists are returned unpaginated in insertion order.
    """

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @staticmethod
    def list_mobiles(db: Session) -> list[Mobile]:
        return list(db.scalars(select(Mobile).order_by(Mobile.created_at, Mobile.id)))

    @staticmethod
    def get_by_id(db: Session, mobile_id: str) -> Mobile | None:
        return db.get(Mobile, mobile_id)

    @staticmethod
    def list_by_brand(db: Session, brand_slug: str) -> list[Mobile]:
        stmt = select(Mobile).where(Mobile.brand == brand_slug).order_by(Mobile.created_at, Mobile.id)
        return list(db.scalars(stmt))

    @staticmethod
    def get_by_slug(db: Session, brand_slug: str, mobile_slug: str) -> Mobile | None:
        """Find a mobile by brand slug and its own slug."""
        stmt = select(Mobile).where(Mobile.brand == brand_slug, Mobile.slug == mobile_slug)
        return db.scalar(stmt)

    @staticmethod
    def find_by_slug(db: Session, slug: str) -> Mobile | None:
        """Find a mobile by slug alone (the import upsert key)."""
        return db.scalar(select(Mobile).where(Mobile.slug == slug))

    @staticmethod
    def search(db: Session, query: str) -> list[Mobile]:
        """
        Case-insensitive substring search over name, brand and model.

        Args:
            query: Raw search text; surrounding whitespace is ignored

        Returns:
            Matching mobiles, possibly empty
        """
        term = f"%{query.strip()}%"
        stmt = select(Mobile).where(
            or_(
                Mobile.name.ilike(term),
                Mobile.brand.ilike(term),
                Mobile.model.ilike(term),
            )
        ).order_by(Mobile.created_at, Mobile.id)
        return list(db.scalars(stmt))

    @staticmethod
    def featured(db: Session, limit: int | None = None) -> list[Mobile]:
        limit = limit or settings.FEATURED_LIMIT
        stmt = select(Mobile).order_by(Mobile.created_at, Mobile.id).limit(limit)
        return list(db.scalars(stmt))

    @staticmethod
    def count(db: Session) -> int:
        return db.scalar(select(func.count(Mobile.id))) or 0

    @staticmethod
    def latest_created_at(db: Session):
        return db.scalar(select(func.max(Mobile.created_at)))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    @staticmethod
    def create(db: Session, data: MobileCreate) -> Mobile:
        """
        Insert a mobile.

        Raises:
            DuplicateSlugError: If a mobile with the same slug exists
        """
        mobile = Mobile(**data.model_dump())
        db.add(mobile)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise MobileService._write_error(db, data.slug, None, e)

        db.refresh(mobile)
        logger.info(f"Created mobile: {mobile.brand}/{mobile.slug}")
        return mobile

    @staticmethod
    def update(db: Session, mobile_id: str, data: MobileUpdate | dict[str, Any]) -> Mobile:
        """
        Apply a partial update to a mobile.

        short_specs, when present, is normalized so ram/storage/camera are
        never missing.

        Raises:
            MobileNotFoundError: If the id doesn't exist
            DuplicateSlugError: If the new slug collides with another mobile
            InvalidRecordError: If the database rejects the row for another reason
        """
        mobile = db.get(Mobile, mobile_id)
        if mobile is None:
            raise MobileNotFoundError(mobile_id)

        changes = data if isinstance(data, dict) else data.model_dump(exclude_unset=True)
        if changes.get("short_specs") is not None:
            changes["short_specs"] = normalize_short_specs(changes["short_specs"])

        for field, value in changes.items():
            setattr(mobile, field, value)

        slug = changes.get("slug") or mobile.slug
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise MobileService._write_error(db, slug, mobile_id, e)

        db.refresh(mobile)
        logger.info(f"Updated mobile: {mobile.brand}/{mobile.slug}")
        return mobile

    @staticmethod
    def _write_error(db: Session, slug: str, mobile_id: str | None, error: IntegrityError) -> Exception:
        """Map a rejected write to a slug clash only when another row holds the slug."""
        stmt = select(Mobile.id).where(Mobile.slug == slug)
        if mobile_id is not None:
            stmt = stmt.where(Mobile.id != mobile_id)
        clash = db.scalar(stmt)
        if clash is not None:
            return DuplicateSlugError("mobile", slug)
        logger.warning(f"Mobile write rejected for {slug}: {error.orig}")
        return InvalidRecordError("mobile", str(error.orig))

    @staticmethod
    def delete(db: Session, mobile_id: str) -> None:
        """
        Raises:
            MobileNotFoundError: If the id doesn't exist
        """
        mobile = db.get(Mobile, mobile_id)
        if mobile is None:
            raise MobileNotFoundError(mobile_id)

        db.delete(mobile)
        db.commit()
        logger.info(f"Deleted mobile: {mobile.brand}/{mobile.slug}")
