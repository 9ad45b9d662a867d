# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the MobilePrices API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import (
    MobilePricesException,
    mobileprices_exception_handler,
    validation_exception_handler,
)
from app.routers import admin, ai_analysis, brands, export, health, imports, mobiles, seo
from core.services.seed import seed_sample_data
from lib.database import SessionLocal, init_db

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup creates missing tables and, when SEED_SAMPLE_DATA is set, fills
    an empty catalog with the sample brands and mobiles.
    """
    logger.info(f"Starting MobilePrices API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    init_db()
    if settings.SEED_SAMPLE_DATA:
        with SessionLocal() as db:
            seed_sample_data(db)

    if not settings.ai_enabled:
        logger.warning("OPENAI_API_KEY not set: AI enhancement uses static fallbacks, analysis answers 503")

    yield

    logger.info("Shutting down MobilePrices API")


# Create FastAPI application
app = FastAPI(
    title="MobilePrices API",
    description="""
## Mobile Phone Price Comparison API

Browse, search and compare mobile phone specifications and prices.

### Public Catalog

| Endpoint | Purpose |
|----------|---------|
| `GET /api/brands` | All brands with live phone counts |
| `GET /api/mobiles` | All mobiles, filterable by `brand`, `featured`, `search` |
| `GET /api/mobiles/{brand}/{slug}` | One mobile |
| `GET /api/search?q=` | Text search over name, brand and model |
| `GET /api/featured` | Featured selection |

### Admin

Log in with `POST /api/auth/login`; the JWT is set as the `auth-token`
cookie and also returned for use as a Bearer token.

- **CRUD**: brands and mobiles under `/api/admin`
- **Import**: pull phones from RapidAPI or MobileAPI.dev under `/api/admin/import`
- **AI tools**: marketing copy and spec generation under `/api/admin/ai`
- **Export**: JSON, CSV, SQL and stats under `/api/export`

### Quick Start

```bash
# 1. Log in
curl -c cookies.txt -X POST http://localhost:8000/api/auth/login \\
  -H "Content-Type: application/json" \\
  -d '{"username": "admin", "password": "admin123"}'

# 2. Import the latest phones
curl -b cookies.txt -X POST "http://localhost:8000/api/admin/import/latest?limit=10"

# 3. Browse
curl http://localhost:8000/api/mobiles?brand=samsung
```
""",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Admin login, logout and session status",
        },
        {
            "name": "Brands",
            "description": "Public brand catalog",
        },
        {
            "name": "Mobiles",
            "description": "Public mobile listing, lookup and search",
        },
        {
            "name": "Admin",
            "description": "Brand/mobile management and AI enhancement tools",
        },
        {
            "name": "Import",
            "description": "Import phones from third-party spec APIs",
        },
        {
            "name": "Export",
            "description": "Download the catalog as JSON, CSV or SQL",
        },
        {
            "name": "AI Analysis",
            "description": "Camera/screen analysis and similarity search",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(MobilePricesException)
async def handle_mobileprices_exception(request: Request, exc: MobilePricesException):
    """Handle custom MobilePrices exceptions."""
    return await mobileprices_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Public catalog
app.include_router(
    brands.router,
    prefix="/api/brands",
    tags=["Brands"]
)

app.include_router(
    mobiles.router,
    prefix="/api/mobiles",
    tags=["Mobiles"]
)

# /api/search and /api/featured
app.include_router(
    mobiles.catalog_router,
    prefix="/api",
    tags=["Mobiles"]
)

# Admin CRUD and AI tools (auth required)
app.include_router(
    admin.router,
    prefix="/api/admin",
    tags=["Admin"]
)

# Data import (auth required)
app.include_router(
    imports.router,
    prefix="/api/admin/import",
    tags=["Import"]
)

# Export (auth required)
app.include_router(
    export.router,
    prefix="/api/export",
    tags=["Export"]
)

# AI analysis
app.include_router(
    ai_analysis.router,
    prefix="/api/ai",
    tags=["AI Analysis"]
)

# sitemap.xml, robots.txt
app.include_router(seo.router)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info and the endpoint map.
    """
    return {
        "name": "MobilePrices API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/health",
        "endpoints": {
            "brands": "/api/brands",
            "brand": "/api/brands/{slug}",
            "mobiles": "/api/mobiles",
            "mobilesByBrand": "/api/mobiles/brand/{slug}",
            "mobile": "/api/mobiles/{brand}/{slug}",
            "search": "/api/search?q=",
            "featured": "/api/featured",
            "auth": "/api/auth/login",
            "admin": "/api/admin",
            "import": "/api/admin/import",
            "export": "/api/export",
            "aiAnalysis": "/api/ai",
            "sitemap": "/sitemap.xml",
            "robots": "/robots.txt",
        },
    }
