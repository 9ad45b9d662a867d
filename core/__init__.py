# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - orm.py: SQLAlchemy tables (brands, mobiles, users)
# - models/: Pydantic schemas for the API contract
# - services/: Storage, export, sitemap and seeding services
#
# Code in this package should NOT import from app.routers or Celery.
# =============================================================================
