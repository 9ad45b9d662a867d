# =============================================================================
# agents/enhancer.py - AI Catalog Enhancement
# =============================================================================
# AIService generates marketing copy and spec data for the admin tools.
#
# Every operation degrades to agents.fallbacks:
# - no OPENAI_API_KEY: the fallback is returned and no client is created
# - API error or malformed JSON: the error is logged, fallback returned
#
# Usage:
#   service = AIService()
#   copy = service.enhance_mobile_data(MobileSpec(...))
# =============================================================================

import logging
from typing import Any

from openai import OpenAI

from agents import fallbacks
from agents.client import ai_available, chat_json
from agents.prompts.enhancement import (
    DETAILED_SPECS_SYSTEM_PROMPT,
    ENHANCE_SYSTEM_PROMPT,
    SIMILAR_SYSTEM_PROMPT,
    SPECS_SYSTEM_PROMPT,
    build_detailed_specs_prompt,
    build_enhance_prompt,
    build_similar_prompt,
    build_specs_prompt,
)
from core.models.ai import EnhancedMobileData, MobileSpec, MobileSpecShort

logger = logging.getLogger(__name__)

ENHANCE_TEMPERATURE = 0.7
SPECS_TEMPERATURE = 0.3
DETAILED_SPECS_TEMPERATURE = 0.2
SIMILAR_TEMPERATURE = 0.3


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _valid_categories(value: Any) -> list[dict]:
    """Keep only well-formed {category, specs[{feature, value}]} entries."""
    if not isinstance(value, list):
        return []

    categories = []
    for entry in value:
        if not isinstance(entry, dict) or not entry.get("category"):
            continue
        specs = [
            {"feature": str(s["feature"]), "value": str(s["value"])}
            for s in entry.get("specs") or []
            if isinstance(s, dict) and s.get("feature") and s.get("value") is not None
        ]
        categories.append({"category": str(entry["category"]), "specs": specs})
    return categories


class AIService:
    """
    LLM-backed catalog enhancement with static fallbacks.

    Args:
        client: OpenAI client to use instead of the shared lazy one
    """

    def __init__(self, client: OpenAI | None = None):
        self.client = client

    def _available(self) -> bool:
        return self.client is not None or ai_available()

    def enhance_mobile_data(self, mobile: MobileSpec) -> EnhancedMobileData:
        if not self._available():
            return fallbacks.enhancement(mobile)

        try:
            result = chat_json(
                ENHANCE_SYSTEM_PROMPT,
                build_enhance_prompt(mobile),
                ENHANCE_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"AI enhancement failed, using fallback: {e}")
            return fallbacks.enhancement(mobile)

        return EnhancedMobileData(
            seo_description=str(result.get("seoDescription") or ""),
            marketing_description=str(result.get("marketingDescription") or ""),
            key_features=_str_list(result.get("keyFeatures")),
            target_audience=str(result.get("targetAudience") or ""),
            comparison_points=_str_list(result.get("comparisonPoints")),
        )

    def generate_mobile_specs(self, brand: str, model: str, year: str | None = None) -> MobileSpec:
        if not self._available():
            return fallbacks.mobile_specs(brand, model, year)

        try:
            result = chat_json(
                SPECS_SYSTEM_PROMPT,
                build_specs_prompt(brand, model, year),
                SPECS_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"AI spec generation failed, using fallback: {e}")
            return fallbacks.mobile_specs(brand, model, year)

        short = result.get("shortSpecs")
        if not isinstance(short, dict):
            short = {}

        def optional(key: str) -> str | None:
            return str(short[key]) if short.get(key) else None

        return MobileSpec(
            name=str(result.get("name") or f"{brand} {model}"),
            brand=str(result.get("brand") or brand.lower()),
            model=str(result.get("model") or model),
            price=str(result.get("price") or ""),
            short_specs=MobileSpecShort(
                ram=str(short.get("ram") or "8GB"),
                storage=str(short.get("storage") or "128GB"),
                camera=str(short.get("camera") or "50MP"),
                battery=optional("battery"),
                display=optional("display"),
                processor=optional("processor"),
            ),
        )

    def generate_detailed_specs(self, mobile: MobileSpec) -> list[dict]:
        if not self._available():
            return fallbacks.detailed_specs(mobile)

        try:
            result = chat_json(
                DETAILED_SPECS_SYSTEM_PROMPT,
                build_detailed_specs_prompt(mobile),
                DETAILED_SPECS_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"AI detailed specs generation failed, using fallback: {e}")
            return fallbacks.detailed_specs(mobile)

        return _valid_categories(result.get("specifications"))

    def suggest_similar_phones(self, mobile: MobileSpec, candidates: list[MobileSpec]) -> list[str]:
        if not self._available():
            return fallbacks.similar_phones(mobile, candidates)

        try:
            result = chat_json(
                SIMILAR_SYSTEM_PROMPT,
                build_similar_prompt(mobile, candidates),
                SIMILAR_TEMPERATURE,
                client=self.client,
            )
        except Exception as e:
            logger.error(f"AI similar phones suggestion failed, using fallback: {e}")
            return fallbacks.similar_phones(mobile, candidates)

        return _str_list(result.get("suggestions"))
