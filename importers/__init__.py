# =============================================================================
# importers/ - Third-Party Phone Data Import
# =============================================================================
# This package pulls phone listings from external spec APIs into the catalog:
# - rapidapi_client.py / mobileapi_client.py: HTTP clients (httpx)
# - rapidapi_transformer.py / mobileapi_transformer.py: vendor JSON -> schemas
# - sources.py: PhoneSource pairing a client with its transformer
# - import_service.py: ImportService, the fetch -> transform -> upsert loop
#
# Transformers are pure; only clients do I/O.
# =============================================================================

from .import_service import ImportService
from .sources import MobileAPISource, PhoneSource, RapidAPISource, get_source

__all__ = [
    "ImportService",
    "PhoneSource",
    "RapidAPISource",
    "MobileAPISource",
    "get_source",
]
