# =============================================================================
# importers/rapidapi_transformer.py - GSMArena Parser -> Catalog Records
# =============================================================================
# Maps RapidAPI phone JSON (manufacturer, model, chipset, internal, ...) into
# MobileCreate and brand names into BrandCreate. No I/O.
#
# Price and image are heuristics: price comes from a per-brand tier table
# keyed on model keywords, and the hero image is drawn from a per-brand
# flagship list using an injectable random.Random.
# =============================================================================

import random
import re
from datetime import date
from typing import Any

from core.models.brand import BrandCreate
from core.models.mobile import MobileCreate, ShortSpecs, SpecCategory, SpecItem
from importers.text import clean_html, slugify

UNKNOWN = "Unknown"

# -----------------------------------------------------------------------------
# Brand tables
# -----------------------------------------------------------------------------

BRAND_LOGOS = {
    "Apple": "\U0001F34E",
    "Samsung": "S",
    "Xiaomi": "X",
    "OnePlus": "1+",
    "Google": "G",
    "Huawei": "H",
    "Oppo": "O",
    "Vivo": "V",
    "Sony": "S",
    "Nokia": "N",
    "Motorola": "M",
    "Realme": "R",
    "Honor": "H",
    "Nothing": "N",
}

BRAND_DESCRIPTIONS = {
    "Apple": "American multinational technology company",
    "Samsung": "South Korean multinational electronics corporation",
    "Xiaomi": "Chinese electronics company",
    "OnePlus": "Chinese smartphone manufacturer",
    "Google": "American multinational technology corporation",
    "Huawei": "Chinese multinational technology corporation",
    "Oppo": "Chinese consumer electronics company",
    "Vivo": "Chinese technology company",
    "Sony": "Japanese multinational electronics corporation",
    "Nokia": "Finnish multinational telecommunications company",
    "Motorola": "American telecommunications company",
    "Realme": "Chinese smartphone brand",
    "Honor": "Chinese smartphone brand",
    "Nothing": "British consumer technology company",
}

# -----------------------------------------------------------------------------
# Image tables
# -----------------------------------------------------------------------------

_BIGPIC = "https://fdn2.gsmarena.com/vv/bigpic"
_PICS = "https://fdn2.gsmarena.com/vv/pics"

FLAGSHIP_IMAGES = {
    "apple": [
        f"{_BIGPIC}/apple-iphone-15-pro-max.jpg",
        f"{_BIGPIC}/apple-iphone-15-pro.jpg",
        f"{_BIGPIC}/apple-iphone-15-plus.jpg",
        f"{_BIGPIC}/apple-iphone-15.jpg",
    ],
    "samsung": [
        f"{_BIGPIC}/samsung-galaxy-s24-ultra-5g.jpg",
        f"{_BIGPIC}/samsung-galaxy-s24-plus-5g.jpg",
        f"{_BIGPIC}/samsung-galaxy-s24-5g.jpg",
        f"{_BIGPIC}/samsung-galaxy-z-fold5.jpg",
        f"{_BIGPIC}/samsung-galaxy-z-flip5.jpg",
    ],
    "google": [
        f"{_BIGPIC}/google-pixel-8-pro.jpg",
        f"{_BIGPIC}/google-pixel-8.jpg",
        f"{_BIGPIC}/google-pixel-8a.jpg",
    ],
    "xiaomi": [
        f"{_BIGPIC}/xiaomi-14-ultra.jpg",
        f"{_BIGPIC}/xiaomi-14-pro.jpg",
        f"{_BIGPIC}/xiaomi-14.jpg",
        f"{_BIGPIC}/xiaomi-13t-pro.jpg",
    ],
    "oneplus": [
        f"{_BIGPIC}/oneplus-12.jpg",
        f"{_BIGPIC}/oneplus-11.jpg",
        f"{_BIGPIC}/oneplus-open.jpg",
    ],
    "oppo": [
        f"{_BIGPIC}/oppo-find-x7-ultra.jpg",
        f"{_BIGPIC}/oppo-reno11-pro.jpg",
        f"{_BIGPIC}/oppo-a79-5g.jpg",
    ],
    "vivo": [
        f"{_BIGPIC}/vivo-x100-pro.jpg",
        f"{_BIGPIC}/vivo-v30-pro.jpg",
        f"{_BIGPIC}/vivo-y100.jpg",
    ],
}

CAROUSEL_IMAGES = {
    "apple": [
        f"{_BIGPIC}/apple-iphone-15-pro-max.jpg",
        f"{_BIGPIC}/apple-iphone-15-pro.jpg",
        f"{_BIGPIC}/apple-iphone-15-plus.jpg",
        f"{_PICS}/apple/apple-iphone-15-pro-max-1.jpg",
        f"{_PICS}/apple/apple-iphone-15-pro-max-2.jpg",
    ],
    "samsung": [
        f"{_BIGPIC}/samsung-galaxy-s24-ultra-5g.jpg",
        f"{_BIGPIC}/samsung-galaxy-s24-plus-5g.jpg",
        f"{_BIGPIC}/samsung-galaxy-z-fold5.jpg",
        f"{_PICS}/samsung/samsung-galaxy-s24-ultra-1.jpg",
        f"{_PICS}/samsung/samsung-galaxy-s24-ultra-2.jpg",
        f"{_PICS}/samsung/samsung-galaxy-s24-ultra-3.jpg",
    ],
    "google": [
        f"{_BIGPIC}/google-pixel-8-pro.jpg",
        f"{_BIGPIC}/google-pixel-8.jpg",
        f"{_PICS}/google/google-pixel-8-pro-1.jpg",
        f"{_PICS}/google/google-pixel-8-pro-2.jpg",
    ],
    "xiaomi": [
        f"{_BIGPIC}/xiaomi-14-ultra.jpg",
        f"{_BIGPIC}/xiaomi-14-pro.jpg",
        f"{_BIGPIC}/xiaomi-14.jpg",
        f"{_PICS}/xiaomi/xiaomi-14-ultra-1.jpg",
        f"{_PICS}/xiaomi/xiaomi-14-ultra-2.jpg",
    ],
    "oneplus": [
        f"{_BIGPIC}/oneplus-12.jpg",
        f"{_BIGPIC}/oneplus-11.jpg",
        f"{_PICS}/oneplus/oneplus-12-1.jpg",
        f"{_PICS}/oneplus/oneplus-12-2.jpg",
    ],
    "oppo": [
        f"{_BIGPIC}/oppo-find-x7-ultra.jpg",
        f"{_BIGPIC}/oppo-reno11-pro.jpg",
        f"{_PICS}/oppo/oppo-find-x7-ultra-1.jpg",
    ],
    "vivo": [
        f"{_BIGPIC}/vivo-x100-pro.jpg",
        f"{_BIGPIC}/vivo-v30-pro.jpg",
        f"{_PICS}/vivo/vivo-x100-pro-1.jpg",
    ],
}

# -----------------------------------------------------------------------------
# Price and release tables
# -----------------------------------------------------------------------------

PRICE_RANGES = {
    "apple": {
        "budget": "Rs 119,000 - 139,000",
        "mid": "Rs 194,000 - 222,000",
        "premium": "Rs 277,000 - 305,000",
        "flagship": "Rs 333,000 - 444,000",
    },
    "samsung": {
        "budget": "Rs 55,000 - 83,000",
        "mid": "Rs 111,000 - 166,000",
        "premium": "Rs 222,000 - 277,000",
        "flagship": "Rs 305,000 - 388,000",
    },
    "google": {
        "budget": "Rs 111,000 - 139,000",
        "mid": "Rs 166,000 - 194,000",
        "premium": "Rs 249,000 - 277,000",
        "flagship": "Rs 277,000 - 305,000",
    },
    "oneplus": {
        "budget": "Rs 83,000 - 111,000",
        "mid": "Rs 139,000 - 194,000",
        "premium": "Rs 194,000 - 249,000",
        "flagship": "Rs 249,000 - 305,000",
    },
    "xiaomi": {
        "budget": "Rs 41,000 - 69,000",
        "mid": "Rs 83,000 - 139,000",
        "premium": "Rs 166,000 - 222,000",
        "flagship": "Rs 222,000 - 277,000",
    },
    "oppo": {
        "budget": "Rs 50,000 - 78,000",
        "mid": "Rs 97,000 - 153,000",
        "premium": "Rs 180,000 - 236,000",
        "flagship": "Rs 249,000 - 333,000",
    },
    "vivo": {
        "budget": "Rs 47,000 - 75,000",
        "mid": "Rs 91,000 - 147,000",
        "premium": "Rs 175,000 - 230,000",
        "flagship": "Rs 244,000 - 327,000",
    },
}

# Checked in order; first match wins. "a" matches A-series tokens like "A54".
PRICE_TIERS = [
    ("flagship", re.compile(r"pro max|\bultra\b|\bfold|\bflip")),
    ("premium", re.compile(r"\bpro\b|\bplus\b|\bnote\b")),
    ("budget", re.compile(r"\bmini\b|\blite\b|\bse\b|\ba\d*\b")),
]

ANDROID_RELEASES = {
    "14": "2023-10-04",
    "13": "2022-08-15",
    "12": "2021-10-04",
    "11": "2020-09-08",
    "10": "2019-09-03",
    "9": "2018-08-06",
    "8": "2017-08-21",
    "7": "2016-08-22",
    "6": "2015-10-05",
}

_RAM = re.compile(r"(\d+GB)\s+RAM")
_STORAGE = re.compile(r"(\d+GB)\s+\d+GB\s+RAM")
_PARENS = re.compile(r"\([^)]*\)")
_NON_ALNUM_SPACE = re.compile(r"[^a-z0-9\s]")


def _clean(value: str | None) -> str:
    return clean_html(value) if value else UNKNOWN


def _category(name: str, specs: list[tuple[str, str]]) -> SpecCategory | None:
    items = [SpecItem(feature=f, value=v) for f, v in specs if v != UNKNOWN]
    if not items:
        return None
    return SpecCategory(category=name, specs=items)


class DataTransformer:
    """
    Transform GSMArena parser records.

    Args:
        rng: Random source for the flagship image pick. Pass a seeded
            random.Random for deterministic output.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    # -------------------------------------------------------------------------
    # Brands
    # -------------------------------------------------------------------------

    @staticmethod
    def brand_logo(name: str) -> str:
        return BRAND_LOGOS.get(name) or name[:1].upper()

    @staticmethod
    def brand_description(name: str) -> str:
        return BRAND_DESCRIPTIONS.get(name, f"{name} smartphone manufacturer")

    def transform_brand(self, name: str, phone_count: int = 0) -> BrandCreate:
        return BrandCreate(
            name=name,
            slug=slugify(name),
            logo=self.brand_logo(name),
            phone_count=str(phone_count),
            description=self.brand_description(name),
        )

    # -------------------------------------------------------------------------
    # Mobiles
    # -------------------------------------------------------------------------

    def transform_mobile(self, raw: dict[str, Any]) -> MobileCreate:
        """
        Map one parser record to a MobileCreate.

        Raises:
            KeyError: If manufacturer or model is missing
        """
        manufacturer = raw["manufacturer"]
        model = raw["model"]
        full_name = f"{manufacturer} {model}"
        slug = slugify(full_name)
        brand_slug = slugify(manufacturer)

        return MobileCreate(
            slug=slug,
            name=full_name,
            brand=brand_slug,
            model=model,
            image_url=self.image_url(manufacturer, model),
            imagekit_path=f"/mobiles/{brand_slug}/{slug}.jpg",
            release_date=self.release_date(raw.get("androidVersion")),
            price=self.price_estimate(manufacturer, model),
            short_specs=self.short_specs(raw),
            carousel_images=self.carousel_images(manufacturer, model),
            specifications=self.detailed_specs(raw),
            dimensions=None,
            build_materials=None,
        )

    @staticmethod
    def short_specs(raw: dict[str, Any]) -> ShortSpecs:
        # "internal" looks like "128GB 8GB RAM, 256GB 8GB RAM"
        internal = raw.get("internal") or ""
        ram_match = _RAM.search(internal)
        storage_match = _STORAGE.search(internal)

        processor = raw.get("chipset") or raw.get("cpu")

        return ShortSpecs(
            ram=ram_match.group(1) if ram_match else UNKNOWN,
            storage=storage_match.group(1) if storage_match else UNKNOWN,
            camera=_clean(raw.get("mainCameraSpecs")),
            battery=_clean(raw.get("battery")),
            display=_clean(raw.get("displaySize")),
            processor=_clean(processor),
        )

    @staticmethod
    def detailed_specs(raw: dict[str, Any]) -> list[SpecCategory]:
        """Build the category tree; empty rows and empty categories are dropped."""
        categories = []

        if raw.get("displaySize") or raw.get("displayType") or raw.get("displayResolution"):
            categories.append(_category("Display", [
                ("Screen Size", _clean(raw.get("displaySize"))),
                ("Resolution", _clean(raw.get("displayResolution"))),
                ("Display Type", _clean(raw.get("displayType"))),
            ]))

        if raw.get("mainCameraSpecs") or raw.get("selfieCameraSpecs"):
            categories.append(_category("Camera", [
                ("Main Camera", _clean(raw.get("mainCameraSpecs"))),
                ("Front Camera", _clean(raw.get("selfieCameraSpecs"))),
                ("Main Features", _clean(raw.get("mainCameraFeatures"))),
                ("Video Recording", _clean(raw.get("mainVideoSpecs"))),
            ]))

        if raw.get("chipset") or raw.get("cpu") or raw.get("gpu"):
            categories.append(_category("Performance", [
                ("Chipset", _clean(raw.get("chipset"))),
                ("CPU", _clean(raw.get("cpu"))),
                ("GPU", _clean(raw.get("gpu"))),
            ]))

        if raw.get("battery") or raw.get("internal"):
            categories.append(_category("Battery & Storage", [
                ("Battery", _clean(raw.get("battery"))),
                ("Internal Storage", _clean(raw.get("internal"))),
            ]))

        if raw.get("sensors") or raw.get("androidVersion"):
            categories.append(_category("Features", [
                ("Operating System", f"Android {raw.get('androidVersion') or UNKNOWN}"),
                ("Sensors", _clean(raw.get("sensors"))),
            ]))

        return [c for c in categories if c is not None]

    @staticmethod
    def release_date(android_version: str | None) -> str:
        today = date.today().isoformat()
        if not android_version:
            return today
        major = str(android_version).split(".")[0]
        return ANDROID_RELEASES.get(major, today)

    @staticmethod
    def price_estimate(manufacturer: str, model: str) -> str:
        prices = PRICE_RANGES.get(manufacturer.lower(), PRICE_RANGES["samsung"])
        model_lower = model.lower()

        tier = "mid"
        for name, pattern in PRICE_TIERS:
            if pattern.search(model_lower):
                tier = name
                break

        return f"{prices[tier]} (Est.)"

    @staticmethod
    def generated_image_url(manufacturer: str, model: str) -> str:
        clean_model = _PARENS.sub("", model.lower())
        clean_model = _NON_ALNUM_SPACE.sub("", clean_model)
        clean_model = slugify(clean_model)
        return f"{_BIGPIC}/{manufacturer.lower()}-{clean_model}.jpg"

    def image_url(self, manufacturer: str, model: str) -> str:
        candidates = FLAGSHIP_IMAGES.get(manufacturer.lower())
        if candidates:
            return self.rng.choice(candidates)
        return self.generated_image_url(manufacturer, model)

    def carousel_images(self, manufacturer: str, model: str) -> list[str]:
        images = CAROUSEL_IMAGES.get(manufacturer.lower())
        if images:
            return list(images)
        return [self.image_url(manufacturer, model)]
