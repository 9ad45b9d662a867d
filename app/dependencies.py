# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated, Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from agents import AIService, SpecAnalyzer
from lib.database import session_scope


def get_db() -> Iterator[Session]:
    """
    Per-request database session.

    Closed after the response is sent. Tests override this dependency to
    point at an in-memory database.
    """
    yield from session_scope()


# Type alias for dependency injection
DbDep = Annotated[Session, Depends(get_db)]


def get_ai_service() -> AIService:
    """AIService bound to the shared lazy OpenAI client."""
    return AIService()


def get_spec_analyzer() -> SpecAnalyzer:
    return SpecAnalyzer()


AIServiceDep = Annotated[AIService, Depends(get_ai_service)]
SpecAnalyzerDep = Annotated[SpecAnalyzer, Depends(get_spec_analyzer)]
