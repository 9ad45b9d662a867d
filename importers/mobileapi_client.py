# =============================================================================
# importers/mobileapi_client.py - MobileAPI.dev Client
# =============================================================================
# httpx wrapper over the MobileAPI.dev device catalog. List endpoints may
# answer with a bare array or with the array under devices/data/results.
# =============================================================================

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.config import settings
from app.exceptions import ImportSourceError, ImportSourceNotConfiguredError

logger = logging.getLogger(__name__)

SOURCE_NAME = "MobileAPI"
USER_AGENT = "mobile-price-com-importer"


def extract_devices(payload: Any) -> list[dict[str, Any]]:
    """Pull the device list out of any of the response shapes."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("devices", "data", "results"):
            if payload.get(key):
                return payload[key]
    return []


class MobileAPIClient:
    """HTTP client for MobileAPI.dev."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key or settings.MOBILEAPI_KEY
        if not self.api_key:
            raise ImportSourceNotConfiguredError(SOURCE_NAME, "MOBILEAPI_KEY")

        self.base_url = (base_url or settings.MOBILEAPI_BASE_URL).rstrip("/")
        self.client = httpx.Client(
            headers={
                "Accept": "application/json",
                "Authorization": f"Bearer {self.api_key}",
                "User-Agent": USER_AGENT,
            },
            timeout=timeout or settings.IMPORT_TIMEOUT_SECONDS,
            transport=transport,
        )

    def _get(self, path: str, params: dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            return self.client.get(url, params={**params, "key": self.api_key})
        except httpx.RequestError as e:
            logger.error(f"MobileAPI request failed: {url} -> {e}")
            raise ImportSourceError(SOURCE_NAME, str(e)) from e

    def _get_devices(self, path: str, params: dict[str, Any], action: str) -> list[dict[str, Any]]:
        response = self._get(path, params)
        if response.is_error:
            raise ImportSourceError(
                SOURCE_NAME,
                f"{action} failed ({response.status_code}): {response.reason_phrase} - {response.text}",
            )
        return extract_devices(response.json())

    def search_devices(self, query: str, limit: int = 25) -> list[dict[str, Any]]:
        if not query.strip():
            return []
        return self._get_devices("/devices/search", {"name": query, "limit": limit}, "search")

    def list_latest(self, limit: int = 50) -> list[dict[str, Any]]:
        return self._get_devices("/devices/latest", {"limit": limit}, "latest fetch")

    def list_devices_by_brand(self, brand: str, limit: int = 50) -> list[dict[str, Any]]:
        """
        Devices for one brand.

        Tries /brands/{brand}/devices first and falls back to a name search
        when that endpoint errors or comes back empty.
        """
        if not brand.strip():
            return []

        response = self._get(f"/brands/{quote(brand, safe='')}/devices", {"limit": limit})
        if response.is_success:
            devices = extract_devices(response.json())
            if devices:
                return devices[:limit]

        logger.debug(f"Brand endpoint empty for {brand}, falling back to search")
        return self.search_devices(brand, limit)

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
