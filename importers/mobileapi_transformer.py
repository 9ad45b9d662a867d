# =============================================================================
# importers/mobileapi_transformer.py - MobileAPI.dev -> Catalog Records
# =============================================================================
# Maps MobileAPI.dev device JSON into MobileCreate and BrandCreate. Device
# fields are loosely typed upstream, so every accessor tolerates missing or
# oddly shaped values. No I/O.
# =============================================================================

import re
from datetime import date
from typing import Any
from urllib.parse import quote

from core.models.brand import BrandCreate
from core.models.mobile import Dimensions, MobileCreate, ShortSpecs, SpecCategory, SpecItem
from importers.text import slugify

UNKNOWN = "Unknown"
PRICE_NOT_AVAILABLE = "Price not available"
MAX_IMAGES = 6
PLACEHOLDER_IMAGE = "https://dummyimage.com/600x600/0d6efd/ffffff&text={text}"

_FULL_DATE = re.compile(r"\d{4}[-/]\d{2}[-/]\d{2}")
_YEAR = re.compile(r"\d{4}")
_RAM = re.compile(r"(\d+\s?GB)\s?(RAM)?", re.IGNORECASE)
_STORAGE = re.compile(r"\d+\s?GB|\d+\s?TB", re.IGNORECASE)
_PROCESSOR = re.compile(
    r"(A\d+\s?Pro?|Snapdragon\s?[0-9A-Za-z+\s]+|Dimensity\s?[0-9A-Za-z+\s]+)",
    re.IGNORECASE,
)
_NUMERIC = re.compile(r"[^0-9.]")


def _loose_slug(value: str) -> str:
    # Unlike slugify, punctuation becomes a separator instead of vanishing
    return slugify(re.sub(r"[^a-z0-9\s-]", " ", value.lower()))


def parse_price(device: dict[str, Any]) -> str:
    """
    First usable USD or PKR price, formatted as "USD $x.xx".

    Non-numeric strings are passed through trimmed.
    """
    price = device.get("price") or {}
    prices = device.get("prices") or {}
    if not isinstance(price, dict):
        price = {}
    if not isinstance(prices, dict):
        prices = {}

    candidates = [
        price.get("usd"), prices.get("USD"), prices.get("usd"),
        price.get("pkr"), prices.get("PKR"), prices.get("pkr"),
    ]

    for entry in candidates:
        if entry is None:
            continue
        if isinstance(entry, (int, float)) and not isinstance(entry, bool):
            return f"USD ${entry:.2f}"

        digits = _NUMERIC.sub("", str(entry))
        try:
            numeric = float(digits)
        except ValueError:
            numeric = 0.0
        if numeric > 0:
            return f"USD ${numeric:.2f}"
        if isinstance(entry, str) and entry.strip():
            return entry.strip()

    return PRICE_NOT_AVAILABLE


def select_images(device: dict[str, Any]) -> list[str]:
    """Up to six http(s) URLs from images/image_urls, else one placeholder."""
    candidates = []
    for key in ("images", "image_urls"):
        values = device.get(key)
        if isinstance(values, list):
            candidates.extend(v for v in values if isinstance(v, str) and v.startswith("http"))

    if candidates:
        return candidates[:MAX_IMAGES]

    fallback = _loose_slug(device.get("name") or "mobile")
    return [PLACEHOLDER_IMAGE.format(text=quote(fallback.upper(), safe=""))]


def parse_release_date(device: dict[str, Any]) -> str:
    raw = str(device.get("release_date") or device.get("announcement_date") or "")

    full = _FULL_DATE.search(raw)
    if full:
        return full.group(0).replace("/", "-")

    year = _YEAR.search(raw)
    if year:
        return f"{year.group(0)}-01-01"

    return date.today().isoformat()


def extract_ram(device: dict[str, Any]) -> str:
    for key in ("hardware", "ram", "memory"):
        source = device.get(key)
        if not source:
            continue
        match = _RAM.search(str(source))
        if match:
            return match.group(1).upper()
    return UNKNOWN


def extract_storage(device: dict[str, Any]) -> str:
    options = device.get("storage_options")
    if isinstance(options, list) and options:
        return ", ".join(str(o) for o in options)

    for key in ("storage", "hardware"):
        source = device.get(key)
        if not source:
            continue
        matches = _STORAGE.findall(str(source))
        if matches:
            return ", ".join(m.upper() for m in matches)
    return UNKNOWN


def extract_processor(device: dict[str, Any]) -> str:
    if device.get("processor"):
        return device["processor"]
    if device.get("chipset"):
        return device["chipset"]

    hardware = device.get("hardware")
    if hardware:
        match = _PROCESSOR.search(str(hardware))
        if match:
            return match.group(0).strip()
    return UNKNOWN


def build_specifications(device: dict[str, Any]) -> list[SpecCategory]:
    groups = [
        ("Display", [
            ("display", "Display"),
            ("screen_size", "Screen Size"),
            ("screen_resolution", "Resolution"),
        ]),
        ("Performance", [
            ("hardware", "Hardware"),
            ("processor", "Processor"),
            ("chipset", "Chipset"),
            ("platform", "Platform"),
            ("os", "Operating System"),
        ]),
        ("Camera", [
            ("camera", "Primary Camera"),
            ("rear_camera", "Rear Camera"),
            ("front_camera", "Front Camera"),
        ]),
        ("Battery", [
            ("battery_capacity", "Battery Capacity"),
            ("battery", "Battery Type"),
            ("charging", "Charging"),
        ]),
        ("Body", [
            ("dimensions", "Dimensions"),
            ("weight", "Weight"),
            ("thickness", "Thickness"),
            ("colors", "Available Colors"),
        ]),
        ("Highlights", [
            ("description", "Overview"),
        ]),
    ]

    categories = []
    for category, fields in groups:
        specs = [
            SpecItem(feature=feature, value=str(device[key]))
            for key, feature in fields
            if device.get(key)
        ]
        if specs:
            categories.append(SpecCategory(category=category, specs=specs))
    return categories


class MobileAPITransformer:
    """Transform MobileAPI.dev device records."""

    @staticmethod
    def transform_brand(name: str) -> BrandCreate:
        name = (name or "").strip() or UNKNOWN
        return BrandCreate(
            name=name,
            slug=_loose_slug(name),
            logo=name[:1].upper(),
            phone_count="0",
            description=f"{name} smartphone manufacturer",
            is_visible=True,
        )

    @staticmethod
    def transform_device(device: dict[str, Any]) -> MobileCreate:
        brand_slug = _loose_slug(device.get("brand_name") or "unknown")
        name = (device.get("name") or "").strip() or "Unknown Device"
        slug = _loose_slug(device.get("slug") or name)
        images = select_images(device)

        short_specs = ShortSpecs(
            ram=extract_ram(device),
            storage=extract_storage(device),
            camera=device.get("camera") or device.get("rear_camera") or UNKNOWN,
            battery=device.get("battery_capacity") or device.get("battery"),
            display=device.get("display") or device.get("screen_size"),
            processor=extract_processor(device),
        )

        dimensions = None
        if device.get("dimensions"):
            dimensions = Dimensions(
                height=str(device["dimensions"]),
                width="",
                thickness=str(device.get("thickness") or ""),
                weight=str(device.get("weight") or ""),
            )

        return MobileCreate(
            slug=slug,
            name=name,
            brand=brand_slug,
            model=device.get("model_name") or name,
            image_url=images[0],
            imagekit_path=f"/mobiles/{brand_slug}/{slug}.jpg",
            release_date=parse_release_date(device),
            price=parse_price(device),
            short_specs=short_specs,
            carousel_images=images,
            specifications=build_specifications(device),
            dimensions=dimensions,
            build_materials=None,
        )
