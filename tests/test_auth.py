# =============================================================================
# tests/test_auth.py - Admin Authentication Tests
# =============================================================================
# Covers:
# - Login/logout/status endpoints and the auth-token cookie
# - The require_admin gate (cookie, Bearer header, bad and expired tokens)
# - Token helpers
# =============================================================================

import pytest
from jose import JWTError, jwt

from app.auth import create_access_token, decode_token
from app.config import settings


# =============================================================================
# Login / Logout / Status
# =============================================================================

class TestLogin:
    """POST /api/auth/login."""

    def test_valid_credentials_set_cookie(self, client):
        response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["redirectTo"] == "/admin"
        assert body["message"] == "Login successful"
        assert body["token"]

        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"{settings.AUTH_COOKIE_NAME}=")
        assert "HttpOnly" in cookie
        assert "samesite=lax" in cookie.lower()
        assert "Max-Age=86400" in cookie

    def test_cookie_is_not_secure_outside_production(self, client):
        response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
        assert "Secure" not in response.headers["set-cookie"]

    @pytest.mark.parametrize("username,password", [
        ("admin", "wrong"),
        ("root", "admin123"),
        ("", ""),
        ("\u00e4dmin", "admin123"),
        ("admin", "pa\u00df\u00f6rd"),
    ])
    def test_invalid_credentials_rejected(self, client, username, password):
        response = client.post("/api/auth/login", json={"username": username, "password": password})

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid credentials"}
        assert "set-cookie" not in response.headers

    def test_missing_fields_is_validation_error(self, client):
        response = client.post("/api/auth/login", json={"username": "admin"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestSessionLifecycle:
    """Cookie round trip through status and logout."""

    def test_status_anonymous(self, client):
        response = client.get("/api/auth/status")

        assert response.status_code == 200
        assert response.json() == {"isAuthenticated": False, "username": None}

    def test_status_after_login_uses_cookie(self, client):
        client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

        response = client.get("/api/auth/status")

        assert response.json() == {"isAuthenticated": True, "username": "admin"}

    def test_logout_clears_cookie(self, client):
        client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

        response = client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Logged out successfully"}
        assert client.get("/api/auth/status").json()["isAuthenticated"] is False


# =============================================================================
# Admin Gate
# =============================================================================

class TestRequireAdmin:
    """Protected routes under /api/admin and /api/export."""

    @pytest.mark.parametrize("path", [
        "/api/admin/import/status",
        "/api/export/stats",
        "/api/admin/mobiles/some-id",
    ])
    def test_missing_token_is_401(self, client, path):
        response = client.get(path)

        assert response.status_code == 401
        assert response.json()["detail"] == {
            "message": "Authentication required",
            "redirectTo": "/admin/login",
        }

    def test_invalid_token_is_401(self, client):
        response = client.get(
            "/api/export/stats",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["detail"]["message"] == "Invalid token"

    def test_token_signed_with_other_key_is_401(self, client):
        forged = jwt.encode({"username": "admin"}, "some-other-secret-key", algorithm="HS256")

        response = client.get("/api/export/stats", headers={"Authorization": f"Bearer {forged}"})

        assert response.status_code == 401

    def test_expired_token_is_401(self, client):
        expired = create_access_token("admin", expires_hours=-1)

        response = client.get("/api/export/stats", headers={"Authorization": f"Bearer {expired}"})

        assert response.status_code == 401

    def test_bearer_token_accepted(self, admin_client):
        assert admin_client.get("/api/export/stats").status_code == 200

    def test_cookie_accepted(self, client):
        client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

        assert client.get("/api/export/stats").status_code == 200

    def test_public_routes_need_no_token(self, client):
        assert client.get("/api/brands").status_code == 200
        assert client.get("/api/mobiles").status_code == 200


# =============================================================================
# Token Helpers
# =============================================================================

class TestTokens:

    def test_round_trip(self):
        token = create_access_token("admin")
        assert decode_token(token).username == "admin"

    def test_token_carries_expiry(self):
        claims = jwt.get_unverified_claims(create_access_token("admin"))
        assert claims["exp"] - claims["iat"] == settings.JWT_EXPIRE_HOURS * 3600

    def test_missing_username_claim_rejected(self):
        token = jwt.encode({"sub": "x"}, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(JWTError):
            decode_token(token)

    def test_token_without_expiry_rejected(self):
        token = jwt.encode({"username": "admin", "iat": 0}, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(JWTError):
            decode_token(token)
