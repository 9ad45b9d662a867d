# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class MobilePricesException(Exception):
    """
    Base exception for the MobilePrices API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "MOBILEPRICES_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Catalog Exceptions
# =============================================================================

class BrandNotFoundError(MobilePricesException):
    """Raised when a brand slug or ID doesn't exist."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Brand not found: {identifier}",
            code="BRAND_NOT_FOUND",
            status_code=404,
            suggestion="Check the brand slug or ID; GET /api/brands lists all brands",
            details={"brand": identifier}
        )


class MobileNotFoundError(MobilePricesException):
    """Raised when a mobile slug or ID doesn't exist."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Mobile not found: {identifier}",
            code="MOBILE_NOT_FOUND",
            status_code=404,
            suggestion="Check the brand slug and mobile slug in the URL",
            details={"mobile": identifier}
        )


class DuplicateSlugError(MobilePricesException):
    """Raised when a create/update collides with an existing unique slug."""

    def __init__(self, entity: str, slug: str):
        super().__init__(
            message=f"A {entity} with slug '{slug}' already exists",
            code="DUPLICATE_SLUG",
            status_code=409,
            suggestion=f"Choose a different slug or update the existing {entity} instead",
            details={"entity": entity, "slug": slug}
        )


class InvalidRecordError(MobilePricesException):
    """Raised when the database rejects a write for a reason other than a slug clash."""

    def __init__(self, entity: str, error: str):
        super().__init__(
            message=f"Invalid {entity} data: {error}",
            code="VALIDATION_ERROR",
            status_code=400,
            suggestion=f"Required {entity} fields cannot be null or empty",
            details={"entity": entity},
        )


# =============================================================================
# Import Exceptions
# =============================================================================

class ImportSourceNotConfiguredError(MobilePricesException):
    """Raised when an import source has no API key configured."""

    def __init__(self, source: str, env_var: str):
        super().__init__(
            message=f"{env_var} is required for {source} data import",
            code="IMPORT_SOURCE_NOT_CONFIGURED",
            status_code=503,
            suggestion=f"Set {env_var} in the environment or .env file",
            details={"source": source}
        )


class ImportSourceError(MobilePricesException):
    """Raised when a third-party phone data source request fails."""

    def __init__(self, source: str, error: str):
        super().__init__(
            message=f"{source} request failed: {error}",
            code="IMPORT_SOURCE_ERROR",
            status_code=502,
            suggestion="The upstream API may be rate limiting or down; try again later",
            details={"source": source, "error": error}
        )


# =============================================================================
# AI Exceptions
# =============================================================================

class AIUnavailableError(MobilePricesException):
    """Raised by analysis endpoints when no OpenAI key is configured."""

    def __init__(self):
        super().__init__(
            message="OpenAI API key not configured. AI analysis features are unavailable.",
            code="AI_UNAVAILABLE",
            status_code=503,
            suggestion="Set OPENAI_API_KEY to enable AI analysis",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def mobileprices_exception_handler(
    request: Request,
    exc: MobilePricesException
) -> JSONResponse:
    """
    Convert MobilePricesException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Invalid bodies and query parameters answer 400 with the field errors.
    """
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Invalid request data",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
