# =============================================================================
# app/routers/seo.py - sitemap.xml and robots.txt
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from app.dependencies import DbDep
from core.services.sitemap_service import SitemapService

router = APIRouter()

CACHE_ONE_HOUR = "public, max-age=3600"
CACHE_ONE_DAY = "public, max-age=86400"


@router.get("/sitemap.xml", include_in_schema=False)
def sitemap(db: DbDep):
    """Static pages plus one URL per visible brand and per mobile."""
    return Response(
        content=SitemapService.sitemap_xml(db),
        media_type="application/xml",
        headers={"Cache-Control": CACHE_ONE_HOUR},
    )


@router.get("/robots.txt", include_in_schema=False)
def robots():
    return PlainTextResponse(
        SitemapService.robots_txt(),
        headers={"Cache-Control": CACHE_ONE_DAY},
    )
