# =============================================================================
# app/routers/ai_analysis.py - Public AI Analysis Endpoints
# =============================================================================
# Camera/screen scoring and design/photo similarity for catalog phones.
#
# Unlike the admin enhancement tools these have no static fallback: without
# OPENAI_API_KEY they answer 503. Unknown mobile IDs answer 404.
# =============================================================================

import logging

from fastapi import APIRouter
from sqlalchemy.orm import Session

from app.dependencies import DbDep, SpecAnalyzerDep
from app.exceptions import MobileNotFoundError
from core.models.ai import (
    AnalyzeMobileRequest,
    CameraAnalysis,
    DesignSimilarity,
    FindSimilarDesignsRequest,
    FindSimilarPhotosRequest,
    PhotoSimilarity,
    ScreenAnalysis,
)
from core.orm import Mobile
from core.services.mobile_service import MobileService

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_mobile(db: Session, mobile_id: str) -> Mobile:
    mobile = MobileService.get_by_id(db, mobile_id)
    if mobile is None:
        raise MobileNotFoundError(mobile_id)
    return mobile


def _existing(db: Session, mobile_ids: list[str]) -> list[Mobile]:
    """Look up IDs in order, skipping ones that don't exist."""
    mobiles = []
    for mobile_id in mobile_ids:
        mobile = MobileService.get_by_id(db, mobile_id)
        if mobile is not None:
            mobiles.append(mobile)
    return mobiles


@router.post("/analyze-camera", response_model=CameraAnalysis)
def analyze_camera(request: AnalyzeMobileRequest, db: DbDep, analyzer: SpecAnalyzerDep):
    return analyzer.analyze_camera(_get_mobile(db, request.mobile_id))


@router.post("/analyze-screen", response_model=ScreenAnalysis)
def analyze_screen(request: AnalyzeMobileRequest, db: DbDep, analyzer: SpecAnalyzerDep):
    return analyzer.analyze_screen(_get_mobile(db, request.mobile_id))


@router.post("/find-similar-designs", response_model=list[DesignSimilarity])
def find_similar_designs(request: FindSimilarDesignsRequest, db: DbDep, analyzer: SpecAnalyzerDep):
    """Rank up to five candidates by design similarity to the target."""
    target = _get_mobile(db, request.target_mobile_id)
    candidates = [m for m in _existing(db, request.candidate_ids) if m.id != target.id]
    return analyzer.find_similar_designs(target, candidates)


@router.post("/find-similar-photos", response_model=list[PhotoSimilarity])
def find_similar_photos(request: FindSimilarPhotosRequest, db: DbDep, analyzer: SpecAnalyzerDep):
    """
    Match an uploaded phone photo against up to eight catalog phones.

    Only matches above 20% similarity are returned.
    """
    return analyzer.find_similar_photos(request.image_base64, _existing(db, request.mobile_ids))
