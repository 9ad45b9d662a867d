# =============================================================================
# agents/analyzer.py - AI Spec Analysis
# =============================================================================
# SpecAnalyzer scores a phone's camera and screen from its specification
# tree, and ranks other phones by design or photo similarity.
#
# Model output is never trusted as-is:
# - scores are clamped to 1-10, similarity and confidence to 0-100
# - missing or non-numeric fields take fixed defaults
# - a failed call yields the all-defaults shape instead of an error
#
# A missing OPENAI_API_KEY raises AIUnavailableError (HTTP 503).
# =============================================================================

import logging
from typing import Any, Protocol

from openai import OpenAI

from agents.client import ai_available, chat_json, chat_text
from agents.prompts.analysis import (
    CAMERA_SYSTEM_PROMPT,
    DESIGN_SYSTEM_PROMPT,
    PHOTO_DESCRIBE_PROMPT,
    PHOTO_DESCRIBE_SYSTEM_PROMPT,
    PHOTO_MATCH_SYSTEM_PROMPT,
    SCREEN_SYSTEM_PROMPT,
    build_camera_prompt,
    build_design_prompt,
    build_photo_match_prompt,
    build_screen_prompt,
)
from app.exceptions import AIUnavailableError
from core.models.ai import (
    CameraAnalysis,
    DesignSimilarity,
    DisplayMetrics,
    PhotoQuality,
    PhotoSimilarity,
    ScreenAnalysis,
)

logger = logging.getLogger(__name__)

ANALYSIS_TEMPERATURE = 0.3
MAX_DESIGN_CANDIDATES = 5
MAX_PHOTO_CANDIDATES = 8
MIN_PHOTO_SIMILARITY = 20
NOT_SPECIFIED = "Not specified"


class PhoneRecord(Protocol):
    id: str
    name: str
    brand: str
    specifications: list
    dimensions: dict | None
    build_materials: dict | None


# =============================================================================
# Output Validation
# =============================================================================

def clamp(value: Any, low: float, high: float, default: float) -> float:
    """Clamp a model-supplied number; falsy or non-numeric values use default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
        value = default
    return min(high, max(low, value))


def _list_or(value: Any, default: list[str]) -> list[str]:
    if isinstance(value, list) and value:
        return [str(v) for v in value]
    return list(default)


def _str_or(value: Any, default: str) -> str:
    return str(value) if value else default


def validate_camera_analysis(data: dict[str, Any]) -> CameraAnalysis:
    defaults = CameraAnalysis()
    quality = data.get("photoQuality") if isinstance(data.get("photoQuality"), dict) else {}
    q = PhotoQuality()

    return CameraAnalysis(
        overall_score=clamp(data.get("overallScore"), 1, 10, defaults.overall_score),
        photo_quality=PhotoQuality(
            daylight=clamp(quality.get("daylight"), 1, 10, q.daylight),
            low_light=clamp(quality.get("lowLight"), 1, 10, q.low_light),
            portrait=clamp(quality.get("portrait"), 1, 10, q.portrait),
            video=clamp(quality.get("video"), 1, 10, q.video),
        ),
        strengths=_list_or(data.get("strengths"), defaults.strengths),
        weaknesses=_list_or(data.get("weaknesses"), defaults.weaknesses),
        real_world_comparison=_str_or(data.get("realWorldComparison"), defaults.real_world_comparison),
        recommended_for=_list_or(data.get("recommendedFor"), defaults.recommended_for),
    )


def validate_screen_analysis(data: dict[str, Any]) -> ScreenAnalysis:
    defaults = ScreenAnalysis()
    metrics = data.get("displayMetrics") if isinstance(data.get("displayMetrics"), dict) else {}
    m = DisplayMetrics()

    return ScreenAnalysis(
        overall_score=clamp(data.get("overallScore"), 1, 10, defaults.overall_score),
        display_metrics=DisplayMetrics(
            sharpness=clamp(metrics.get("sharpness"), 1, 10, m.sharpness),
            color_accuracy=clamp(metrics.get("colorAccuracy"), 1, 10, m.color_accuracy),
            brightness=clamp(metrics.get("brightness"), 1, 10, m.brightness),
            viewing_angles=clamp(metrics.get("viewingAngles"), 1, 10, m.viewing_angles),
        ),
        strengths=_list_or(data.get("strengths"), defaults.strengths),
        weaknesses=_list_or(data.get("weaknesses"), defaults.weaknesses),
        best_use_case=_str_or(data.get("bestUseCase"), defaults.best_use_case),
        comparison=_str_or(data.get("comparison"), defaults.comparison),
    )


# =============================================================================
# Spec Extraction
# =============================================================================

def spec_lookup(mobile: PhoneRecord, category: str, *features: str) -> str | None:
    """First value among `features` inside the named spec category."""
    wanted = {f.lower() for f in features}
    for group in mobile.specifications or []:
        if str(group.get("category", "")).lower() != category.lower():
            continue
        for spec in group.get("specs") or []:
            if str(spec.get("feature", "")).lower() in wanted:
                return spec.get("value")
    return None


def camera_specs(mobile: PhoneRecord) -> dict[str, Any]:
    features = spec_lookup(mobile, "Camera", "Main Features", "Features")
    return {
        "mainCamera": spec_lookup(mobile, "Camera", "Main Camera", "Primary Camera", "Rear Camera") or NOT_SPECIFIED,
        "frontCamera": spec_lookup(mobile, "Camera", "Front Camera", "Selfie Camera") or NOT_SPECIFIED,
        "videoRecording": spec_lookup(mobile, "Camera", "Video Recording", "Video") or NOT_SPECIFIED,
        "features": [features] if features else [],
    }


def display_specs(mobile: PhoneRecord) -> dict[str, Any]:
    return {
        "screenSize": spec_lookup(mobile, "Display", "Screen Size", "Size") or NOT_SPECIFIED,
        "resolution": spec_lookup(mobile, "Display", "Resolution") or NOT_SPECIFIED,
        "displayType": spec_lookup(mobile, "Display", "Display Type", "Type") or NOT_SPECIFIED,
        "refreshRate": spec_lookup(mobile, "Display", "Refresh Rate") or "60Hz",
        "ppi": spec_lookup(mobile, "Display", "PPI", "Pixel Density") or NOT_SPECIFIED,
    }


def design_specs(mobile: PhoneRecord, include_weight: bool = True) -> dict[str, Any]:
    colors = spec_lookup(mobile, "Body", "Available Colors", "Colors") or spec_lookup(
        mobile, "Build & Design", "Colors"
    )
    specs = {
        "brand": mobile.brand,
        "dimensions": mobile.dimensions,
        "buildMaterial": mobile.build_materials or NOT_SPECIFIED,
        "colors": [colors] if colors else [],
    }
    if include_weight:
        specs["weight"] = (mobile.dimensions or {}).get("weight") or NOT_SPECIFIED
    return specs


# =============================================================================
# Analyzer
# =============================================================================

class SpecAnalyzer:
    """
    Camera, screen and similarity analysis for catalog phones.

    Args:
        client: OpenAI client to use instead of the shared lazy one
    """

    def __init__(self, client: OpenAI | None = None):
        self.client = client

    def _require_ai(self) -> None:
        if self.client is None and not ai_available():
            raise AIUnavailableError()

    def analyze_camera(self, mobile: PhoneRecord) -> CameraAnalysis:
        self._require_ai()
        try:
            data = chat_json(
                CAMERA_SYSTEM_PROMPT,
                build_camera_prompt(mobile.name, camera_specs(mobile)),
                ANALYSIS_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"Camera analysis failed for {mobile.name}: {e}")
            data = {}
        return validate_camera_analysis(data)

    def analyze_screen(self, mobile: PhoneRecord) -> ScreenAnalysis:
        self._require_ai()
        try:
            data = chat_json(
                SCREEN_SYSTEM_PROMPT,
                build_screen_prompt(mobile.name, display_specs(mobile)),
                ANALYSIS_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"Screen analysis failed for {mobile.name}: {e}")
            data = {}
        return validate_screen_analysis(data)

    def find_similar_designs(self, target: PhoneRecord, candidates: list[PhoneRecord]) -> list[DesignSimilarity]:
        """Compare the target against up to five candidates, best match first."""
        self._require_ai()
        target_specs = design_specs(target)
        results = []

        for candidate in candidates[:MAX_DESIGN_CANDIDATES]:
            try:
                data = chat_json(
                    DESIGN_SYSTEM_PROMPT,
                    build_design_prompt(target.name, target_specs, candidate.name, design_specs(candidate)),
                    ANALYSIS_TEMPERATURE,
                    client=self.client,
                )
            except Exception as e:
                logger.error(f"Design comparison failed for {candidate.name}: {e}")
                data = {}

            results.append(DesignSimilarity(
                mobile_id=candidate.id,
                mobile_name=candidate.name,
                similarity=clamp(data.get("similarity"), 0, 100, 0),
                similar_aspects=_list_or(data.get("similarAspects"), []),
                key_differences=_list_or(data.get("keyDifferences"), []),
                aesthetic_match=_str_or(data.get("aestheticMatch"), "Some design similarities"),
            ))

        results.sort(key=lambda r: r.similarity, reverse=True)
        return results

    def find_similar_photos(self, image_base64: str, candidates: list[PhoneRecord]) -> list[PhotoSimilarity]:
        """
        Describe the uploaded photo, then score up to eight candidates against
        the description. Matches at or below 20% similarity are dropped.
        """
        self._require_ai()
        try:
            image_analysis = chat_text(
                PHOTO_DESCRIBE_SYSTEM_PROMPT,
                [
                    {"type": "text", "text": PHOTO_DESCRIBE_PROMPT},
                    {"type": "image_url", "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"}},
                ],
                ANALYSIS_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"Photo description failed: {e}")
            return []

        results = []
        for candidate in candidates[:MAX_PHOTO_CANDIDATES]:
            try:
                data = chat_json(
                    PHOTO_MATCH_SYSTEM_PROMPT,
                    build_photo_match_prompt(
                        image_analysis, candidate.name, candidate.brand,
                        design_specs(candidate, include_weight=False),
                    ),
                    ANALYSIS_TEMPERATURE,
                    client=self.client,
                )
            except Exception as e:
                logger.error(f"Photo match failed for {candidate.name}: {e}")
                data = {}

            results.append(PhotoSimilarity(
                phone_id=candidate.id,
                phone_name=candidate.name,
                similarity=clamp(data.get("similarity"), 0, 100, 0),
                matching_features=_list_or(data.get("matchingFeatures"), []),
                confidence=clamp(data.get("confidence"), 0, 100, 0),
            ))

        matches = [r for r in results if r.similarity > MIN_PHOTO_SIMILARITY]
        matches.sort(key=lambda r: r.similarity, reverse=True)
        return matches
