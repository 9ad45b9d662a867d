# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for the admin login flow.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

from core.models.base import CamelModel


class LoginRequest(BaseModel):
    """Credentials posted to /api/auth/login."""
    username: str
    password: str


class LoginResponse(CamelModel):
    success: bool
    message: str
    redirect_to: str | None = None
    token: str | None = None


class LogoutResponse(BaseModel):
    success: bool
    message: str


class AuthStatus(CamelModel):
    is_authenticated: bool
    username: str | None = None


class AdminUser(BaseModel):
    """
    Admin identity decoded from the JWT.

    Only the username is carried; there is no per-user permission model.
    """
    username: str

    model_config = ConfigDict(frozen=True)


class TokenPayload(BaseModel):
    """Decoded JWT claims."""
    username: str = Field(min_length=1)
    exp: int
    iat: int
