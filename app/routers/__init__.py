# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - brands.py: Public brand catalog
# - mobiles.py: Public mobile listing, lookup, search and featured
# - admin.py: Admin CRUD and AI enhancement tools
# - imports.py: Third-party data import passes
# - export.py: JSON/CSV/SQL downloads and stats
# - seo.py: sitemap.xml and robots.txt
# - ai_analysis.py: Camera/screen analysis and similarity search
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import admin
from . import ai_analysis
from . import brands
from . import export
from . import health
from . import imports
from . import mobiles
from . import seo

__all__ = [
    "admin",
    "ai_analysis",
    "brands",
    "export",
    "health",
    "imports",
    "mobiles",
    "seo",
]
