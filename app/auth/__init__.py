# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT cookie authentication for the admin surface.
#
# Usage:
#   from app.auth import require_admin, AdminUser
#
#   @router.get("/protected")
#   def protected(admin: AdminUser = Depends(require_admin)):
#       return {"username": admin.username}
# =============================================================================

from app.auth.dependencies import (
    create_access_token,
    decode_token,
    get_admin_optional,
    require_admin,
)
from app.auth.models import AdminUser, AuthStatus, LoginRequest, LoginResponse

__all__ = [
    "create_access_token",
    "decode_token",
    "get_admin_optional",
    "require_admin",
    "AdminUser",
    "AuthStatus",
    "LoginRequest",
    "LoginResponse",
]
