# =============================================================================
# core/orm.py - Database Tables
# =============================================================================
# SQLAlchemy models for the catalog:
# - Brand: phone manufacturer, keyed by a unique slug
# - Mobile: one phone, keyed by a unique slug; `brand` holds a brand slug
# - User: present in the schema, not used by admin auth
#
# Mobile.brand is deliberately a plain string matching Brand.slug, not a
# foreign key. Nested spec structures live in JSON columns.
# =============================================================================

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from lib.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Brand(Base):
    __tablename__ = "brands"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    logo: Mapped[str | None] = mapped_column(Text)
    # Stored as text; GET /api/brands recomputes it from the mobiles table
    phone_count: Mapped[str | None] = mapped_column(Text, default="0")
    description: Mapped[str | None] = mapped_column(Text)
    is_visible: Mapped[bool | None] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Brand {self.slug}>"


class Mobile(Base):
    __tablename__ = "mobiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    brand: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    imagekit_path: Mapped[str | None] = mapped_column(Text)
    release_date: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[str | None] = mapped_column(Text)
    short_specs: Mapped[dict] = mapped_column(JSON, nullable=False)
    carousel_images: Mapped[list] = mapped_column(JSON, nullable=False)
    specifications: Mapped[list] = mapped_column(JSON, nullable=False)
    dimensions: Mapped[dict | None] = mapped_column(JSON)
    build_materials: Mapped[dict | None] = mapped_column(JSON)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Mobile {self.brand}/{self.slug}>"


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
