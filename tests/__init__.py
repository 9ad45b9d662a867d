# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the MobilePrices API:
# - test_catalog_api.py / test_admin_api.py / test_auth.py: HTTP endpoints
# - test_services.py / test_export.py: storage, export and SEO services
# - test_transformers.py / test_clients.py / test_import_service.py: imports
# - test_ai_service.py / test_analyzer.py: AI features with a mocked client
# - test_tasks.py / test_config.py: Celery tasks and settings
#
# Run tests with: pytest
# =============================================================================
