# =============================================================================
# agents/ - LLM-Backed Catalog Services
# =============================================================================
# - client.py: lazy OpenAI client and JSON-mode chat helper
# - enhancer.py: AIService (marketing copy, spec generation, suggestions)
# - analyzer.py: SpecAnalyzer (camera/screen scoring, similarity search)
# - fallbacks.py: deterministic results used when AI is unavailable
# - prompts/: system and user prompts
# =============================================================================

from agents.analyzer import SpecAnalyzer
from agents.enhancer import AIService

__all__ = ["AIService", "SpecAnalyzer"]
