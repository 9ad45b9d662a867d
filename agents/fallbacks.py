# =============================================================================
# agents/fallbacks.py - Deterministic AI Fallbacks
# =============================================================================
# Used when no OpenAI key is configured or a call fails. Every function here
# is pure and returns the same shape as the model-backed path.
# =============================================================================

import re

from core.models.ai import EnhancedMobileData, MobileSpec, MobileSpecShort

DEFAULT_SPECS = {
    "ram": "8GB",
    "storage": "128GB",
    "camera": "50MP",
    "battery": "4000mAh",
    "display": '6.1" OLED',
    "processor": "Snapdragon 8 Gen 2",
}

# Overrides on DEFAULT_SPECS by brand tier; several aliases share one tier
BRAND_SPEC_OVERRIDES = {
    ("apple", "iphone"): {
        "ram": "8GB", "storage": "128GB", "processor": "A17 Pro",
        "display": '6.1" Super Retina XDR',
    },
    ("samsung",): {
        "ram": "8GB", "storage": "256GB", "processor": "Snapdragon 8 Gen 3",
        "display": '6.2" Dynamic AMOLED',
    },
    ("google", "pixel"): {
        "processor": "Google Tensor G3", "camera": "50MP + 12MP ultrawide",
    },
    ("xiaomi", "redmi"): {
        "ram": "12GB", "storage": "256GB", "camera": "108MP",
    },
    ("oneplus",): {
        "ram": "12GB", "storage": "256GB", "battery": "5400mAh",
    },
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: str | None) -> int | None:
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else None


def enhancement(mobile: MobileSpec) -> EnhancedMobileData:
    specs = mobile.short_specs
    battery_line = f"Powered by a {specs.battery} battery for all-day usage. " if specs.battery else ""

    key_features = [
        f"{specs.ram} RAM for smooth performance",
        f"{specs.storage} storage capacity",
        f"{specs.camera} camera system",
    ]
    if specs.battery:
        key_features.append(f"{specs.battery} battery life")
    if specs.display:
        key_features.append(f"{specs.display} display")

    comparison_points = [
        f"Performance: {specs.ram} RAM",
        f"Storage: {specs.storage}",
        f"Camera: {specs.camera}",
    ]
    if mobile.price:
        comparison_points.append(f"Price: {mobile.price}")

    return EnhancedMobileData(
        seo_description=(
            f"{mobile.name} with {specs.ram} RAM, {specs.storage} storage, and "
            f"{specs.camera} camera. Compare prices and specifications."
        ),
        marketing_description=(
            f"The {mobile.name} offers reliable performance with {specs.ram} of RAM and "
            f"{specs.storage} of storage space. {specs.camera} camera system captures your "
            f"memories with clarity. {battery_line}Perfect for users seeking quality and functionality."
        ),
        key_features=key_features[:5],
        target_audience="Users looking for a reliable smartphone with balanced features and performance",
        comparison_points=comparison_points[:4],
    )


def mobile_specs(brand: str, model: str, year: str | None = None) -> MobileSpec:
    brand_lower = brand.lower()
    specs = dict(DEFAULT_SPECS)
    for aliases, overrides in BRAND_SPEC_OVERRIDES.items():
        if brand_lower in aliases:
            specs.update(overrides)
            break

    return MobileSpec(
        name=f"{brand} {model}",
        brand=brand_lower,
        model=model,
        price="",
        short_specs=MobileSpecShort(**specs),
    )


def detailed_specs(mobile: MobileSpec) -> list[dict]:
    specs = mobile.short_specs
    is_apple = mobile.brand == "apple"

    def category(name: str, rows: list[tuple[str, str]]) -> dict:
        return {"category": name, "specs": [{"feature": f, "value": v} for f, v in rows]}

    return [
        category("Display", [
            ("Size", specs.display or "6.1 inches"),
            ("Resolution", "2532 x 1170 pixels"),
            ("Type", "OLED"),
            ("Refresh Rate", "120Hz"),
            ("Protection", "Corning Gorilla Glass"),
        ]),
        category("Camera", [
            ("Main Camera", specs.camera),
            ("Ultra Wide", "12MP, f/2.4"),
            ("Front Camera", "12MP, f/1.9"),
            ("Video Recording", "4K@30fps, 1080p@60fps"),
            ("Features", "Night Mode, Portrait Mode"),
        ]),
        category("Performance", [
            ("Processor", specs.processor or "High-end chipset"),
            ("RAM", specs.ram),
            ("Storage", specs.storage),
            ("GPU", "Integrated graphics"),
            ("AnTuTu Score", "800,000+"),
        ]),
        category("Battery & Charging", [
            ("Battery", specs.battery or "4000mAh"),
            ("Fast Charging", "25W wired"),
            ("Wireless Charging", "15W"),
            ("Battery Life", "All-day usage"),
        ]),
        category("Connectivity", [
            ("Network", "5G, 4G LTE"),
            ("Wi-Fi", "Wi-Fi 6 (802.11ax)"),
            ("Bluetooth", "5.3"),
            ("NFC", "Yes"),
            ("USB", "USB-C"),
        ]),
        category("Build & Design", [
            ("Materials", "Glass front and back, aluminum frame"),
            ("Dimensions", "147.6 x 71.6 x 7.8 mm"),
            ("Weight", "174g"),
            ("Colors", "Multiple color options available"),
            ("Water Resistance", "IP68"),
        ]),
        category("Software", [
            ("Operating System", "iOS 17" if is_apple else "Android 14"),
            ("UI", "iOS" if is_apple else "One UI 6.1"),
            ("Security", "Fingerprint, Face unlock"),
            ("Updates", "Regular security updates"),
        ]),
    ]


def similarity_score(mobile: MobileSpec, other: MobileSpec) -> int:
    """
    Score how alike two phones are.

    Same brand +3; same RAM +2 (within 2GB +1); same storage +2 (within
    64GB +1); main camera within 15MP +1.
    """
    a, b = mobile.short_specs, other.short_specs
    score = 0

    if other.brand == mobile.brand:
        score += 3

    if b.ram == a.ram:
        score += 2
    else:
        ram_a, ram_b = _leading_int(a.ram), _leading_int(b.ram)
        if ram_a is not None and ram_b is not None and abs(ram_a - ram_b) <= 2:
            score += 1

    if b.storage == a.storage:
        score += 2
    else:
        storage_a, storage_b = _leading_int(a.storage), _leading_int(b.storage)
        if storage_a is not None and storage_b is not None and abs(storage_a - storage_b) <= 64:
            score += 1

    camera_a, camera_b = _leading_int(a.camera), _leading_int(b.camera)
    if camera_a is not None and camera_b is not None and abs(camera_a - camera_b) <= 15:
        score += 1

    return score


def similar_phones(mobile: MobileSpec, candidates: list[MobileSpec], limit: int = 4) -> list[str]:
    scored = [
        (similarity_score(mobile, other), other.name)
        for other in candidates
        if other.name != mobile.name
    ]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [name for _, name in scored[:limit]]
