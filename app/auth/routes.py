# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Login, logout and status for the single admin account.
#
# Credentials are compared against ADMIN_USERNAME / ADMIN_PASSWORD; the
# users table is not consulted.
# =============================================================================

import logging
import secrets

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from app.auth.dependencies import create_access_token, get_admin_optional
from app.auth.models import AdminUser, AuthStatus, LoginRequest, LoginResponse, LogoutResponse
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _credentials_match(request: LoginRequest) -> bool:
    # compare_digest only accepts ASCII str, so compare the UTF-8 bytes
    username_ok = secrets.compare_digest(
        request.username.encode("utf-8"), settings.ADMIN_USERNAME.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        request.password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8")
    )
    return username_ok and password_ok


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, response: Response):
    """
    Exchange admin credentials for a session cookie.

    On success the JWT is set as an HttpOnly cookie and also returned in
    the body for clients that prefer the Bearer header.
    """
    if not _credentials_match(request):
        logger.warning(f"Failed admin login for '{request.username}'")
        return JSONResponse(
            status_code=401,
            content={"success": False, "message": "Invalid credentials"},
        )

    token = create_access_token(request.username)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_HOURS * 3600,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    logger.info(f"Admin '{request.username}' logged in")

    return LoginResponse(
        success=True,
        message="Login successful",
        redirect_to="/admin",
        token=token,
    )


@router.post("/logout", response_model=LogoutResponse)
def logout(response: Response):
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, path="/")
    return LogoutResponse(success=True, message="Logged out successfully")


@router.get("/status", response_model=AuthStatus)
def auth_status(admin: AdminUser | None = Depends(get_admin_optional)):
    """Report whether the caller holds a valid admin token."""
    return AuthStatus(
        is_authenticated=admin is not None,
        username=admin.username if admin else None,
    )
