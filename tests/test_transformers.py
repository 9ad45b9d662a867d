# =============================================================================
# tests/test_transformers.py - Import Transformer Tests
# =============================================================================
# Pure mapping from vendor JSON into catalog models. No network, no DB.
# =============================================================================

import random
from datetime import date

import pytest

from importers.mobileapi_transformer import (
    PRICE_NOT_AVAILABLE,
    MobileAPITransformer,
    extract_processor,
    extract_ram,
    extract_storage,
    parse_price,
    parse_release_date,
    select_images,
)
from importers.rapidapi_transformer import FLAGSHIP_IMAGES, DataTransformer
from importers.text import clean_html, slugify

RAPIDAPI_PHONE = {
    "manufacturer": "Samsung",
    "model": "Galaxy S24 Ultra",
    "internal": "256GB 12GB RAM, 512GB 12GB RAM",
    "mainCameraSpecs": "200 MP, f/1.7<br>12 MP ultrawide",
    "selfieCameraSpecs": "12 MP",
    "battery": "5000 mAh",
    "displaySize": "6.8 inches",
    "displayType": "Dynamic LTPO AMOLED 2X",
    "chipset": "Snapdragon 8 Gen 3",
    "androidVersion": "14",
}


# =============================================================================
# Text Helpers
# =============================================================================

class TestSlugify:

    @pytest.mark.parametrize("text,expected", [
        ("Samsung Galaxy S24 Ultra", "samsung-galaxy-s24-ultra"),
        ("  iPhone 15 Pro Max  ", "iphone-15-pro-max"),
        ("Pixel 8 (5G)", "pixel-8-5g"),
        ("Moto G -- Power", "moto-g-power"),
        ("---", ""),
    ])
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_slugify_is_idempotent(self):
        slug = slugify("OnePlus 12R & Friends!")
        assert slugify(slug) == slug


class TestCleanHtml:

    def test_br_becomes_space(self):
        assert clean_html("50 MP<br>12 MP") == "50 MP 12 MP"

    def test_tags_stripped_and_whitespace_collapsed(self):
        assert clean_html("<b>Fast</b>   <i>charging</i>") == "Fast charging"

    def test_empty_passthrough(self):
        assert clean_html(None) is None
        assert clean_html("") == ""


# =============================================================================
# RapidAPI Transformer
# =============================================================================

class TestDataTransformer:
    """GSMArena parser records."""

    def test_identity_fields(self):
        mobile = DataTransformer(random.Random(1)).transform_mobile(RAPIDAPI_PHONE)

        assert mobile.name == "Samsung Galaxy S24 Ultra"
        assert mobile.slug == "samsung-galaxy-s24-ultra"
        assert mobile.brand == "samsung"
        assert mobile.imagekit_path == "/mobiles/samsung/samsung-galaxy-s24-ultra.jpg"

    def test_short_specs_extracted(self):
        specs = DataTransformer().short_specs(RAPIDAPI_PHONE)

        assert specs.ram == "12GB"
        assert specs.storage == "256GB"
        assert specs.camera == "200 MP, f/1.7 12 MP ultrawide"
        assert specs.processor == "Snapdragon 8 Gen 3"

    def test_missing_internal_is_unknown(self):
        specs = DataTransformer().short_specs({"manufacturer": "X", "model": "Y"})

        assert specs.ram == "Unknown"
        assert specs.storage == "Unknown"
        assert specs.camera == "Unknown"

    def test_detailed_specs_drop_empty_categories(self):
        raw = {"manufacturer": "X", "model": "Y", "battery": "4000 mAh"}

        categories = DataTransformer().detailed_specs(raw)

        assert [c.category for c in categories] == ["Battery & Storage"]
        assert [s.feature for s in categories[0].specs] == ["Battery"]

    def test_detailed_specs_categories(self):
        categories = DataTransformer().detailed_specs(RAPIDAPI_PHONE)

        assert [c.category for c in categories] == [
            "Display", "Camera", "Performance", "Battery & Storage", "Features",
        ]

    @pytest.mark.parametrize("manufacturer,model,tier_price", [
        ("Samsung", "Galaxy S24 Ultra", "Rs 305,000 - 388,000"),
        ("Apple", "iPhone 15 Pro Max", "Rs 333,000 - 444,000"),
        ("Samsung", "Galaxy Z Fold5", "Rs 305,000 - 388,000"),
        ("Apple", "iPhone 15 Pro", "Rs 277,000 - 305,000"),
        ("Xiaomi", "Redmi Note 13", "Rs 166,000 - 222,000"),
        ("Apple", "iPhone SE", "Rs 119,000 - 139,000"),
        ("Samsung", "Galaxy A54", "Rs 55,000 - 83,000"),
        ("Google", "Pixel 8", "Rs 166,000 - 194,000"),
        ("Nothing", "Phone 2", "Rs 111,000 - 166,000"),
    ])
    def test_price_estimate(self, manufacturer, model, tier_price):
        assert DataTransformer.price_estimate(manufacturer, model) == f"{tier_price} (Est.)"

    def test_galaxy_is_not_budget(self):
        # "Galaxy" contains an "a" but is not an A-series model
        assert DataTransformer.price_estimate("Samsung", "Galaxy S24").startswith("Rs 111,000")

    def test_release_date_from_android_version(self):
        assert DataTransformer.release_date("13.0") == "2022-08-15"

    def test_release_date_defaults_to_today(self):
        today = date.today().isoformat()
        assert DataTransformer.release_date(None) == today
        assert DataTransformer.release_date("99") == today

    def test_seeded_rng_makes_image_deterministic(self):
        first = DataTransformer(random.Random(42)).image_url("Samsung", "Galaxy S24")
        second = DataTransformer(random.Random(42)).image_url("Samsung", "Galaxy S24")

        assert first == second
        assert first in FLAGSHIP_IMAGES["samsung"]

    def test_unknown_brand_gets_generated_image(self):
        transformer = DataTransformer()

        url = transformer.image_url("Nothing", "Phone (2a)")

        assert url == "https://fdn2.gsmarena.com/vv/bigpic/nothing-phone.jpg"
        assert transformer.carousel_images("Nothing", "Phone (2a)") == [url]

    def test_transform_brand(self):
        brand = DataTransformer().transform_brand("OnePlus", phone_count=12)

        assert brand.slug == "oneplus"
        assert brand.phone_count == "12"
        assert brand.description

    def test_missing_model_raises(self):
        with pytest.raises(KeyError):
            DataTransformer().transform_mobile({"manufacturer": "Samsung"})


# =============================================================================
# MobileAPI Transformer
# =============================================================================

MOBILEAPI_DEVICE = {
    "name": "Google Pixel 8 Pro",
    "brand_name": "Google",
    "model_name": "Pixel 8 Pro",
    "release_date": "Released 2023, October 12",
    "hardware": "Google Tensor G3, 12GB RAM",
    "storage": "128GB / 256GB / 1TB",
    "camera": "50 MP",
    "battery_capacity": "5050 mAh",
    "screen_size": "6.7 inches",
    "dimensions": "162.6 x 76.5 x 8.8 mm",
    "weight": "213 g",
    "images": ["https://img.example.com/1.jpg", "ftp://nope", "https://img.example.com/2.jpg"],
    "price": {"usd": 999},
}


class TestMobileAPITransformer:
    """MobileAPI.dev device records."""

    def test_transform_device(self):
        mobile = MobileAPITransformer.transform_device(MOBILEAPI_DEVICE)

        assert mobile.slug == "google-pixel-8-pro"
        assert mobile.brand == "google"
        assert mobile.model == "Pixel 8 Pro"
        assert mobile.price == "USD $999.00"
        assert mobile.image_url == "https://img.example.com/1.jpg"
        assert mobile.carousel_images == ["https://img.example.com/1.jpg", "https://img.example.com/2.jpg"]
        assert mobile.short_specs.ram == "12GB"
        assert mobile.short_specs.storage == "128GB, 256GB, 1TB"
        assert mobile.short_specs.battery == "5050 mAh"
        assert mobile.dimensions.height == "162.6 x 76.5 x 8.8 mm"
        assert mobile.dimensions.weight == "213 g"

    def test_specification_categories(self):
        mobile = MobileAPITransformer.transform_device(MOBILEAPI_DEVICE)

        assert [c.category for c in mobile.specifications] == [
            "Display", "Performance", "Camera", "Battery", "Body",
        ]

    @pytest.mark.parametrize("device,expected", [
        ({"price": {"usd": "$1,099"}}, "USD $1099.00"),
        ({"prices": {"PKR": "PKR 250000"}}, "USD $250000.00"),
        ({"price": {"usd": "Coming soon"}}, "Coming soon"),
        ({}, PRICE_NOT_AVAILABLE),
    ])
    def test_parse_price(self, device, expected):
        assert parse_price(device) == expected

    def test_placeholder_image_when_none(self):
        images = select_images({"name": "Nokia 3310"})

        assert len(images) == 1
        assert images[0].startswith("https://dummyimage.com/")
        assert "NOKIA-3310" in images[0]

    def test_images_capped_at_six(self):
        device = {"images": [f"https://img/{i}.jpg" for i in range(10)]}
        assert len(select_images(device)) == 6

    @pytest.mark.parametrize("raw,expected", [
        ("2024/02/01", "2024-02-01"),
        ("Announced 2022", "2022-01-01"),
        (2023, "2023-01-01"),
    ])
    def test_parse_release_date(self, raw, expected):
        assert parse_release_date({"release_date": raw}) == expected

    def test_release_date_defaults_to_today(self):
        assert parse_release_date({}) == date.today().isoformat()

    def test_extractors(self):
        assert extract_ram({"ram": "8 GB"}) == "8 GB"
        assert extract_ram({}) == "Unknown"
        assert extract_storage({"storage_options": ["128GB", "256GB"]}) == "128GB, 256GB"
        assert extract_processor({"hardware": "Snapdragon 8 Gen 2 octa-core"}).startswith("Snapdragon 8 Gen 2")
        assert extract_processor({"chipset": "Exynos 2400"}) == "Exynos 2400"

    def test_transform_brand(self):
        brand = MobileAPITransformer.transform_brand("Sony Ericsson")

        assert brand.slug == "sony-ericsson"
        assert brand.logo == "S"
