# =============================================================================
# agents/prompts/enhancement.py - Catalog Enhancement Prompts
# =============================================================================
# System prompts and user-prompt builders for AIService:
# - marketing copy for one phone
# - spec generation from brand/model
# - detailed spec categories
# - similar-phone suggestions
# =============================================================================

from __future__ import annotations

from core.models.ai import MobileSpec

NOT_SPECIFIED = "Not specified"


# =============================================================================
# Marketing Copy
# =============================================================================

ENHANCE_SYSTEM_PROMPT = (
    "You are an expert mobile phone analyst and copywriter. Generate authentic, "
    "compelling marketing content based on real specifications. Respond with JSON "
    "in the exact format requested."
)


def build_enhance_prompt(mobile: MobileSpec) -> str:
    specs = mobile.short_specs
    return f"""
Analyze this mobile phone and generate marketing content:

Phone: {mobile.name}
Brand: {mobile.brand}
Price: {mobile.price or NOT_SPECIFIED}
RAM: {specs.ram}
Storage: {specs.storage}
Camera: {specs.camera}
Battery: {specs.battery or NOT_SPECIFIED}
Display: {specs.display or NOT_SPECIFIED}
Processor: {specs.processor or NOT_SPECIFIED}

Generate a JSON response with:
- seoDescription: SEO-optimized meta description (150-160 chars)
- marketingDescription: Engaging product description (2-3 paragraphs)
- keyFeatures: Array of 4-5 standout features
- targetAudience: Who this phone is best for
- comparisonPoints: 3-4 key points for comparison with other phones

Make it authentic and based on the actual specifications provided.
""".strip()


# =============================================================================
# Spec Generation
# =============================================================================

SPECS_SYSTEM_PROMPT = (
    "You are a mobile phone specification expert. Generate realistic, current market "
    "specifications based on brand positioning and market trends. Respond with JSON only."
)


def build_specs_prompt(brand: str, model: str, year: str | None) -> str:
    return f"""
Generate realistic mobile phone specifications for:
Brand: {brand}
Model: {model}
Year: {year or "2024"}

Create specifications that are realistic for this brand and model name.
Include current market pricing in the local currency format.

Return JSON with:
- name: Full phone name
- brand: Brand slug (lowercase)
- model: Model name
- price: Realistic price with currency
- shortSpecs: object with ram, storage, camera, battery, display, processor
""".strip()


# =============================================================================
# Detailed Specs
# =============================================================================

DETAILED_SPECS_SYSTEM_PROMPT = (
    "You are a technical specifications expert. Generate comprehensive, realistic "
    "mobile phone specifications based on current market standards. Respond with JSON only."
)


def build_detailed_specs_prompt(mobile: MobileSpec) -> str:
    specs = mobile.short_specs
    return f"""
Generate detailed technical specifications for this mobile phone:

Phone: {mobile.name}
Brand: {mobile.brand}
Basic specs: RAM {specs.ram}, Storage {specs.storage}, Camera {specs.camera}

Create realistic detailed specifications organized in categories:
- Display (size, resolution, type, refresh rate, protection)
- Camera (main, ultra-wide, telephoto, front, video features)
- Performance (processor, GPU, RAM, storage options)
- Battery & Charging (capacity, charging speed, wireless charging)
- Connectivity (5G, WiFi, Bluetooth, NFC, USB)
- Build & Design (materials, dimensions, weight, colors)
- Software (OS, UI, security features)

Return a JSON object {{"specifications": [{{"category": string, "specs": [{{"feature": string, "value": string}}]}}]}}.
""".strip()


# =============================================================================
# Similar Phones
# =============================================================================

SIMILAR_SYSTEM_PROMPT = (
    "You are a mobile phone comparison expert. Suggest similar phones based on "
    "specifications, price range, and target audience. Respond with JSON only."
)


def build_similar_prompt(mobile: MobileSpec, candidates: list[MobileSpec]) -> str:
    context = "\n".join(
        f"{m.name} - {m.short_specs.ram} RAM, {m.short_specs.storage} storage, {m.price or 'No price'}"
        for m in candidates
    )
    specs = mobile.short_specs
    return f"""
Given this phone: {mobile.name} ({specs.ram} RAM, {specs.storage} storage, {mobile.price or "No price"})

From this list of available phones, suggest 3-4 most similar ones for comparison:
{context}

Consider: price range, specifications, brand positioning, target audience.
Return a JSON object {{"suggestions": ["Phone Name 1", "Phone Name 2", ...]}}.
""".strip()
