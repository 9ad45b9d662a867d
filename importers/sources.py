# =============================================================================
# importers/sources.py - Phone Data Sources
# =============================================================================
# A PhoneSource pairs an HTTP client with its transformer so ImportService
# can run the same upsert loop against either upstream API.
#
# Usage:
#   source = get_source("rapidapi")
#   for raw in source.by_brand("Apple", limit=5):
#       mobile = source.transform_mobile(raw)
# =============================================================================

import logging
import math
import random
from abc import ABC, abstractmethod
from typing import Any

from app.config import settings
from core.models.brand import BrandCreate
from core.models.mobile import MobileCreate
from importers.mobileapi_client import MobileAPIClient
from importers.mobileapi_transformer import MobileAPITransformer
from importers.rapidapi_client import RapidAPIClient
from importers.rapidapi_transformer import DataTransformer

logger = logging.getLogger(__name__)

# Brands sampled when a source has no "latest" feed of its own
LATEST_BRANDS = ["Samsung", "Apple", "Xiaomi", "OnePlus", "Google"]
SEARCH_BRAND_LIMIT = 10


class PhoneSource(ABC):
    """One upstream catalog: fetch raw records and transform them."""

    name: str

    @abstractmethod
    def latest(self, limit: int) -> list[dict[str, Any]]: ...

    @abstractmethod
    def by_brand(self, brand: str, limit: int) -> list[dict[str, Any]]: ...

    @abstractmethod
    def search(self, query: str, limit: int) -> list[dict[str, Any]]: ...

    @abstractmethod
    def brands(self) -> list[str]: ...

    @abstractmethod
    def transform_mobile(self, raw: dict[str, Any]) -> MobileCreate: ...

    @abstractmethod
    def transform_brand(self, name: str) -> BrandCreate: ...

    @abstractmethod
    def brand_name(self, raw: dict[str, Any]) -> str: ...

    def describe(self, raw: dict[str, Any]) -> str:
        """Human label for log and error lines."""
        return str(raw.get("name") or raw)

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# =============================================================================
# RapidAPI (GSMArena parser)
# =============================================================================

class RapidAPISource(PhoneSource):
    name = "rapidapi"

    def __init__(
        self,
        client: RapidAPIClient | None = None,
        transformer: DataTransformer | None = None,
        rng: random.Random | None = None,
    ):
        self.client = client or RapidAPIClient()
        self.transformer = transformer or DataTransformer(rng=rng)

    def latest(self, limit: int) -> list[dict[str, Any]]:
        """
        The parser has no working "latest" feed, so take an even share of
        each brand in LATEST_BRANDS. A brand that fails is skipped.
        """
        per_brand = math.ceil(limit / len(LATEST_BRANDS))
        phones: list[dict[str, Any]] = []

        for brand in LATEST_BRANDS:
            try:
                phones.extend(self.client.get_phones_by_brand(brand)[:per_brand])
            except Exception as e:
                logger.warning(f"Could not fetch phones for {brand}: {e}")
                continue
            if len(phones) >= limit:
                break

        return phones[:limit]

    def by_brand(self, brand: str, limit: int) -> list[dict[str, Any]]:
        return self.client.get_phones_by_brand(brand)[:limit]

    def search(self, query: str, limit: int) -> list[dict[str, Any]]:
        """Scan the first few brands and filter on manufacturer/model."""
        needle = query.lower()
        phones: list[dict[str, Any]] = []

        for brand in self.client.get_all_brands()[:SEARCH_BRAND_LIMIT]:
            try:
                phones.extend(self.client.get_phones_by_brand(brand))
            except Exception as e:
                logger.warning(f"Could not fetch phones for {brand}: {e}")

        matches = [
            p for p in phones
            if needle in str(p.get("manufacturer", "")).lower()
            or needle in str(p.get("model", "")).lower()
        ]
        return matches[:limit]

    def brands(self) -> list[str]:
        return self.client.get_all_brands()

    def transform_mobile(self, raw: dict[str, Any]) -> MobileCreate:
        return self.transformer.transform_mobile(raw)

    def transform_brand(self, name: str) -> BrandCreate:
        return self.transformer.transform_brand(name)

    def brand_name(self, raw: dict[str, Any]) -> str:
        return raw["manufacturer"]

    def describe(self, raw: dict[str, Any]) -> str:
        return f"{raw.get('manufacturer')} {raw.get('model')}"

    def close(self) -> None:
        self.client.close()


# =============================================================================
# MobileAPI.dev
# =============================================================================

class MobileAPISource(PhoneSource):
    name = "mobileapi"

    def __init__(self, client: MobileAPIClient | None = None):
        self.client = client or MobileAPIClient()

    def latest(self, limit: int) -> list[dict[str, Any]]:
        return self.client.list_latest(limit)[:limit]

    def by_brand(self, brand: str, limit: int) -> list[dict[str, Any]]:
        return self.client.list_devices_by_brand(brand, limit)

    def search(self, query: str, limit: int) -> list[dict[str, Any]]:
        return self.client.search_devices(query, limit)[:limit]

    def brands(self) -> list[str]:
        # No brand listing upstream; derive names from the latest feed
        names: list[str] = []
        for device in self.client.list_latest(50):
            name = (device.get("brand_name") or "").strip()
            if name and name not in names:
                names.append(name)
        return names

    def transform_mobile(self, raw: dict[str, Any]) -> MobileCreate:
        return MobileAPITransformer.transform_device(raw)

    def transform_brand(self, name: str) -> BrandCreate:
        return MobileAPITransformer.transform_brand(name)

    def brand_name(self, raw: dict[str, Any]) -> str:
        return raw.get("brand_name") or "Unknown"

    def describe(self, raw: dict[str, Any]) -> str:
        return f"{raw.get('brand_name')} {raw.get('name')}"

    def close(self) -> None:
        self.client.close()


SOURCES: dict[str, type[PhoneSource]] = {
    RapidAPISource.name: RapidAPISource,
    MobileAPISource.name: MobileAPISource,
}


def get_source(name: str | None = None) -> PhoneSource:
    """
    Build the named source (default IMPORT_SOURCE).

    Raises:
        ImportSourceNotConfiguredError: If the source's API key is unset
        ValueError: If the name is unknown
    """
    name = name or settings.IMPORT_SOURCE
    try:
        source_cls = SOURCES[name]
    except KeyError:
        raise ValueError(f"Unknown import source: {name}") from None
    return source_cls()
