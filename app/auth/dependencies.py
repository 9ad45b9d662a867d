# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Issues and verifies the admin JWT.
#
# The token is HS256-signed with SECRET_KEY and travels either in the
# auth-token cookie (set by /api/auth/login) or in an
# "Authorization: Bearer" header.
#
# Usage:
#   from app.auth import require_admin, AdminUser
#
#   @router.post("/brands")
#   def create(admin: AdminUser = Depends(require_admin)):
#       ...
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from app.auth.models import AdminUser, TokenPayload
from app.config import settings

logger = logging.getLogger(__name__)

LOGIN_PAGE = "/admin/login"

# Bearer header is optional; the cookie is the primary carrier
security_optional = HTTPBearer(auto_error=False)


def create_access_token(username: str, expires_hours: int | None = None) -> str:
    """Sign a token for `username` valid for JWT_EXPIRE_HOURS."""
    now = datetime.now(timezone.utc)
    hours = expires_hours if expires_hours is not None else settings.JWT_EXPIRE_HOURS
    payload = {
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=hours)).timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> AdminUser:
    """
    Verify a token and return the admin it names.

    Raises:
        JWTError: If the signature, expiry or claims are invalid
    """
    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    try:
        payload = TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError(f"invalid claims: {e.error_count()} error(s)") from e
    return AdminUser(username=payload.username)


def extract_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    """Cookie first, then the Bearer header."""
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"message": message, "redirectTo": LOGIN_PAGE},
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security_optional),
) -> AdminUser:
    """
    Gate for /api/admin/* and /api/export/*.

    Raises:
        HTTPException: 401 if the token is missing, expired or invalid
    """
    token = extract_token(request, credentials)
    if not token:
        raise _unauthorized("Authentication required")

    try:
        return decode_token(token)
    except ExpiredSignatureError:
        logger.warning("Admin token has expired")
        raise _unauthorized("Invalid token")
    except JWTError as e:
        logger.warning(f"Admin token validation failed: {e}")
        raise _unauthorized("Invalid token")


def get_admin_optional(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security_optional),
) -> AdminUser | None:
    """Like require_admin, but returns None instead of raising."""
    token = extract_token(request, credentials)
    if not token:
        return None
    try:
        return decode_token(token)
    except JWTError:
        return None
