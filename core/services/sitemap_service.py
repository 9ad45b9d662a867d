# =============================================================================
# core/services/sitemap_service.py - sitemap.xml and robots.txt
# =============================================================================

from dataclasses import dataclass
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from sqlalchemy.orm import Session

from app.config import settings
from core.services.brand_service import BrandService
from core.services.mobile_service import MobileService

STATIC_PAGES = [
    ("/brands", 0.7),
    ("/search", 0.6),
    ("/compare", 0.6),
]


@dataclass
class SitemapEntry:
    loc: str
    lastmod: str
    changefreq: str
    priority: float


class SitemapService:

    @staticmethod
    def entries(db: Session, base_url: str | None = None) -> list[SitemapEntry]:
        """
        Home, one page per brand, one per mobile, then the static pages.

        Mobile URLs are /{brand}/{slug}.
        """
        base_url = (base_url or settings.SITE_URL).rstrip("/")
        now = datetime.now(timezone.utc).isoformat()

        entries = [SitemapEntry(base_url, now, "daily", 1.0)]

        for brand in BrandService.list_brands(db):
            entries.append(SitemapEntry(f"{base_url}/{brand.slug}", now, "weekly", 0.8))

        for mobile in MobileService.list_mobiles(db):
            loc = f"{base_url}/{mobile.brand.lower()}/{mobile.slug}"
            entries.append(SitemapEntry(loc, now, "weekly", 0.9))

        for path, priority in STATIC_PAGES:
            entries.append(SitemapEntry(f"{base_url}{path}", now, "monthly", priority))

        return entries

    @staticmethod
    def sitemap_xml(db: Session, base_url: str | None = None) -> str:
        urls = "\n".join(
            "  <url>\n"
            f"    <loc>{escape(e.loc)}</loc>\n"
            f"    <lastmod>{e.lastmod}</lastmod>\n"
            f"    <changefreq>{e.changefreq}</changefreq>\n"
            f"    <priority>{e.priority}</priority>\n"
            "  </url>"
            for e in SitemapService.entries(db, base_url)
        )
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            f"{urls}\n"
            "</urlset>"
        )

    @staticmethod
    def robots_txt(base_url: str | None = None) -> str:
        base_url = (base_url or settings.SITE_URL).rstrip("/")
        return (
            "User-agent: *\n"
            "Allow: /\n"
            "\n"
            "# Sitemaps\n"
            f"Sitemap: {base_url}/sitemap.xml\n"
            "\n"
            "# Block admin and API routes\n"
            "Disallow: /admin/\n"
            "Disallow: /api/\n"
            "\n"
            "User-agent: Googlebot\n"
            "Allow: /\n"
            "\n"
            "User-agent: Bingbot\n"
            "Allow: /\n"
            "\n"
            "Crawl-delay: 1"
        )
