# =============================================================================
# agents/prompts/analysis.py - Spec Analysis Prompts
# =============================================================================
# Prompts for SpecAnalyzer: camera and screen scoring, design comparison and
# photo matching.
# =============================================================================

from __future__ import annotations

import json
from typing import Any

CAMERA_SYSTEM_PROMPT = (
    "You are an expert mobile phone camera analyst. Provide detailed, accurate "
    "assessments based on technical specifications. Respond in JSON format only."
)

SCREEN_SYSTEM_PROMPT = (
    "You are an expert display technology analyst. Provide detailed assessments of "
    "mobile phone screens based on technical specifications. Respond in JSON format only."
)

DESIGN_SYSTEM_PROMPT = (
    "You are an expert in mobile phone design and aesthetics. Compare phones based on "
    "build quality, materials, design language, and overall aesthetic appeal. "
    "Respond in JSON format only."
)

PHOTO_DESCRIBE_SYSTEM_PROMPT = (
    "You are an expert in mobile phone design recognition. Analyze images and describe "
    "key visual characteristics that distinguish different phone models."
)

PHOTO_MATCH_SYSTEM_PROMPT = (
    "You are an expert at matching phones based on visual similarity. Compare uploaded "
    "images with phone specifications and design descriptions. Respond in JSON format only."
)


def _dump(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2)


def build_camera_prompt(name: str, camera_specs: dict[str, Any]) -> str:
    return f"""Analyze the camera quality of this mobile phone based on its specifications:

Phone: {name}
Camera Specifications: {_dump(camera_specs)}

Provide a detailed analysis in JSON format with:
1. overallScore: overall camera score (1-10)
2. photoQuality: scores for daylight, lowLight, portrait and video (1-10 each)
3. strengths and weaknesses (arrays)
4. realWorldComparison (string)
5. recommendedFor: types of users this camera is best for (array)

Consider megapixel count, aperture, sensor size, optical image stabilization and computational photography features."""


def build_screen_prompt(name: str, display_specs: dict[str, Any]) -> str:
    return f"""Analyze the screen quality of this mobile phone:

Phone: {name}
Display Specifications: {_dump(display_specs)}

Provide analysis in JSON format with:
1. overallScore: overall screen score (1-10)
2. displayMetrics: scores for sharpness, colorAccuracy, brightness, viewingAngles (1-10 each)
3. strengths and weaknesses (arrays)
4. bestUseCase (string)
5. comparison: comparison to typical phone displays (string)

Consider resolution, PPI, panel type (OLED/LCD), refresh rate, brightness levels, color gamut and HDR support."""


def build_design_prompt(
    target_name: str,
    target_specs: dict[str, Any],
    candidate_name: str,
    candidate_specs: dict[str, Any],
) -> str:
    return f"""Compare the design similarity between these two phones:

Target Phone: {target_name}
Target Specs: {_dump(target_specs)}

Candidate Phone: {candidate_name}
Candidate Specs: {_dump(candidate_specs)}

Provide comparison in JSON format with:
1. similarity: percentage (0-100)
2. similarAspects: array of similar design aspects
3. keyDifferences: array of key design differences
4. aestheticMatch: string describing overall aesthetic match"""


PHOTO_DESCRIBE_PROMPT = """Analyze this phone image and identify key visual characteristics:

Look for:
1. Overall shape and form factor
2. Camera module design and placement
3. Color scheme and finish
4. Button placement
5. Screen-to-body ratio
6. Distinctive design elements

Describe the phone's visual appearance in detail, focusing on design elements that would help match it to similar phones."""


def build_photo_match_prompt(image_analysis: str, name: str, brand: str, design_specs: dict[str, Any]) -> str:
    return f"""Compare this phone description with the visual characteristics from the uploaded image:

Image Analysis: {image_analysis}

Phone to Compare: {name}
Brand: {brand}
Specifications: {_dump(design_specs)}

Provide matching analysis in JSON format with:
1. similarity: percentage (0-100)
2. matchingFeatures: array of matching visual features
3. confidence: level (0-100)"""
