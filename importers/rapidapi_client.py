# =============================================================================
# importers/rapidapi_client.py - GSMArena Parser (RapidAPI) Client
# =============================================================================
# Thin httpx wrapper over gsmarenaparser.p.rapidapi.com.
#
# Usage:
#   with RapidAPIClient() as client:
#       brands = client.get_all_brands()
#       phones = client.get_phones_by_brand("Samsung")
# =============================================================================

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.config import settings
from app.exceptions import ImportSourceError, ImportSourceNotConfiguredError

logger = logging.getLogger(__name__)

SOURCE_NAME = "RapidAPI"


class RapidAPIClient:
    """HTTP client for the GSMArena parser API."""

    def __init__(
        self,
        api_key: str | None = None,
        host: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        api_key = api_key or settings.RAPIDAPI_KEY
        if not api_key:
            raise ImportSourceNotConfiguredError(SOURCE_NAME, "RAPIDAPI_KEY")

        self.host = host or settings.RAPIDAPI_HOST
        self.base_url = f"https://{self.host}"
        self.client = httpx.Client(
            headers={
                "X-RapidAPI-Key": api_key,
                "X-RapidAPI-Host": self.host,
            },
            timeout=timeout or settings.IMPORT_TIMEOUT_SECONDS,
            transport=transport,
        )

    def _get(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"RapidAPI request failed: {url} -> {e.response.status_code}")
            raise ImportSourceError(
                SOURCE_NAME, f"{e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"RapidAPI request failed: {url} -> {e}")
            raise ImportSourceError(SOURCE_NAME, str(e)) from e

    def get_all_brands(self) -> list[str]:
        brands = self._get("/api/values/availablebrands")
        return brands if isinstance(brands, list) else []

    def get_phones_by_brand(self, brand: str) -> list[dict[str, Any]]:
        phones = self._get(f"/api/values/getdevices/{quote(brand, safe='')}")
        return phones if isinstance(phones, list) else []

    def get_phone_details(self, manufacturer: str, model: str) -> dict[str, Any]:
        return self._get(
            f"/api/values/getspecs/{quote(manufacturer, safe='')}/{quote(model, safe='')}"
        )

    def get_all_device_specs(self) -> list[dict[str, Any]]:
        phones = self._get("/api/values/getalldevicespecs")
        return phones if isinstance(phones, list) else []

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
