# =============================================================================
# agents/client.py - OpenAI Client and JSON Chat Helper
# =============================================================================
# The client is created lazily on first use, and only when OPENAI_API_KEY is
# set. Callers check ai_available() before asking for it.
# =============================================================================

import json
import logging
from typing import Any

from openai import OpenAI

from app.config import settings

logger = logging.getLogger(__name__)

_client: OpenAI | None = None


class AIResponseError(Exception):
    """Raised when the model's reply is not a JSON object."""


def ai_available() -> bool:
    return settings.ai_enabled


def get_openai_client() -> OpenAI:
    """Get or create the OpenAI client (lazy initialization)."""
    global _client
    if _client is None:
        _client = OpenAI(api_key=settings.OPENAI_API_KEY)
        logger.info(f"OpenAI client initialized with model={settings.OPENAI_MODEL}")
    return _client


def reset_openai_client() -> None:
    """Drop the cached client (used when settings change in tests)."""
    global _client
    _client = None


def chat_json(
    system: str,
    user: str | list[dict[str, Any]],
    temperature: float,
    client: OpenAI | None = None,
) -> dict[str, Any]:
    """
    Run one chat completion in JSON mode and parse the reply.

    Args:
        system: System prompt
        user: User prompt text, or a content-part list for image input
        temperature: Sampling temperature
        client: Client to use instead of the shared one

    Returns:
        Parsed JSON object (empty dict for an empty reply)

    Raises:
        AIResponseError: If the reply isn't a JSON object
        openai.OpenAIError: If the API call fails
    """
    client = client or get_openai_client()
    response = client.chat.completions.create(
        model=settings.OPENAI_MODEL,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        response_format={"type": "json_object"},
        temperature=temperature,
    )

    content = response.choices[0].message.content or "{}"
    logger.debug(f"OpenAI response: {content[:200]}...")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise AIResponseError(f"Invalid JSON from model: {e}") from e

    if not isinstance(data, dict):
        raise AIResponseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def chat_text(
    system: str,
    user: str | list[dict[str, Any]],
    temperature: float,
    client: OpenAI | None = None,
) -> str:
    """Run one free-text chat completion."""
    client = client or get_openai_client()
    response = client.chat.completions.create(
        model=settings.OPENAI_MODEL,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        temperature=temperature,
    )
    return response.choices[0].message.content or ""
