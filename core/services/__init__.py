# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .brand_service import BrandService
from .mobile_service import MobileService
from .user_service import UserService
from .export_service import ExportService
from .sitemap_service import SitemapService
from .seed import seed_sample_data

__all__ = [
    "BrandService",
    "MobileService",
    "UserService",
    "ExportService",
    "SitemapService",
    "seed_sample_data",
]
