# =============================================================================
# agents/prompts/ - Prompts for the AI Services
# =============================================================================
# - enhancement.py: AIService prompts (marketing copy, specs, similar phones)
# - analysis.py: SpecAnalyzer prompts (camera, screen, design, photo)
# =============================================================================
