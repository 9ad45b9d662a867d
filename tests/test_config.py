# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestSettings:

    def test_test_environment_loaded(self):
        settings = make_settings()

        assert settings.is_sqlite
        assert settings.ai_enabled is False
        assert settings.RAPIDAPI_KEY is None
        assert settings.IMPORT_REQUEST_DELAY == 0

    def test_ai_enabled_with_key(self):
        assert make_settings(OPENAI_API_KEY="sk-test").ai_enabled

    def test_cors_origins_split_and_trimmed(self):
        settings = make_settings(CORS_ORIGINS="http://localhost:5173, https://mobile-price.com")

        assert settings.cors_origins_list == ["http://localhost:5173", "https://mobile-price.com"]

    def test_environment_flags(self):
        assert make_settings(ENVIRONMENT="production").is_production
        assert not make_settings(ENVIRONMENT="staging").is_development

    @pytest.mark.parametrize("overrides", [
        {"SECRET_KEY": "short"},
        {"IMPORT_REQUEST_DELAY": -1},
        {"IMPORT_SOURCE": "gsmarena"},
        {"ENVIRONMENT": "qa"},
    ])
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValidationError):
            make_settings(**overrides)
