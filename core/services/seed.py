# =============================================================================
# core/services/seed.py - Sample Catalog
# =============================================================================
# Seeds six brands and three phones into an empty database. Called once from
# the FastAPI lifespan when SEED_SAMPLE_DATA is enabled; does nothing when
# any brand already exists.
# =============================================================================

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.orm import Brand, Mobile

logger = logging.getLogger(__name__)


SAMPLE_BRANDS = [
    {"name": "Samsung", "slug": "samsung", "logo": "S", "phone_count": "142",
     "description": "South Korean multinational electronics company"},
    {"name": "Apple", "slug": "apple", "logo": "A", "phone_count": "28",
     "description": "American multinational technology company"},
    {"name": "Xiaomi", "slug": "xiaomi", "logo": "X", "phone_count": "89",
     "description": "Chinese electronics company"},
    {"name": "Oppo", "slug": "oppo", "logo": "O", "phone_count": "67",
     "description": "Chinese consumer electronics company"},
    {"name": "Vivo", "slug": "vivo", "logo": "V", "phone_count": "52",
     "description": "Chinese technology company"},
    {"name": "OnePlus", "slug": "oneplus", "logo": "1+", "phone_count": "23",
     "description": "Chinese smartphone manufacturer"},
]


SAMPLE_MOBILES = [
    {
        "slug": "galaxy-s24-ultra",
        "name": "Samsung Galaxy S24 Ultra",
        "brand": "samsung",
        "model": "Galaxy S24 Ultra",
        "image_url": "https://fdn2.gsmarena.com/vv/bigpic/samsung-galaxy-s24-ultra-5g.jpg",
        "imagekit_path": "/mobiles/samsung/galaxy-s24-ultra.jpg",
        "release_date": "2024-01-17",
        "price": "Rs 449,999",
        "short_specs": {
            "ram": "12GB",
            "storage": "256GB",
            "camera": "200MP + 50MP + 10MP + 12MP",
            "battery": "5000mAh",
            "display": "6.8 inches",
            "processor": "Snapdragon 8 Gen 3",
        },
        "carousel_images": [
            "https://fdn2.gsmarena.com/vv/bigpic/samsung-galaxy-s24-ultra-5g.jpg",
            "https://fdn2.gsmarena.com/vv/pics/samsung/samsung-galaxy-s24-ultra-5g-2.jpg",
        ],
        "specifications": [
            {
                "category": "Display",
                "specs": [
                    {"feature": "Screen Size", "value": "6.8 inches"},
                    {"feature": "Resolution", "value": "3120 x 1440 pixels"},
                    {"feature": "Display Type", "value": "Dynamic LTPO AMOLED 2X"},
                    {"feature": "Refresh Rate", "value": "120Hz"},
                ],
            },
            {
                "category": "Camera",
                "specs": [
                    {"feature": "Main Camera", "value": "200MP, f/1.7"},
                    {"feature": "Ultra Wide", "value": "12MP, f/2.2"},
                    {"feature": "Telephoto", "value": "50MP, f/3.4"},
                    {"feature": "Front Camera", "value": "12MP, f/2.2"},
                ],
            },
        ],
        "dimensions": {
            "height": "162.3mm",
            "width": "79.0mm",
            "thickness": "8.6mm",
            "weight": "233g",
        },
        "build_materials": {
            "frame": "Aluminum",
            "back": "Glass (Gorilla Glass Victus 2)",
            "protection": "IP68",
        },
    },
    {
        "slug": "iphone-15-pro-max",
        "name": "Apple iPhone 15 Pro Max",
        "brand": "apple",
        "model": "iPhone 15 Pro Max",
        "image_url": "https://fdn2.gsmarena.com/vv/bigpic/apple-iphone-15-pro-max.jpg",
        "imagekit_path": "/mobiles/apple/iphone-15-pro-max.jpg",
        "release_date": "2023-09-22",
        "price": "Rs 529,999",
        "short_specs": {
            "ram": "8GB",
            "storage": "256GB",
            "camera": "48MP + 12MP + 12MP",
            "battery": "4441mAh",
            "display": "6.7 inches",
            "processor": "A17 Pro",
        },
        "carousel_images": [
            "https://fdn2.gsmarena.com/vv/bigpic/apple-iphone-15-pro-max.jpg",
            "https://fdn2.gsmarena.com/vv/pics/apple/apple-iphone-15-pro-max-2.jpg",
        ],
        "specifications": [
            {
                "category": "Display",
                "specs": [
                    {"feature": "Screen Size", "value": "6.7 inches"},
                    {"feature": "Resolution", "value": "2796 x 1290 pixels"},
                    {"feature": "Display Type", "value": "LTPO Super Retina XDR OLED"},
                    {"feature": "Refresh Rate", "value": "120Hz"},
                ],
            },
        ],
        "dimensions": None,
        "build_materials": None,
    },
    {
        "slug": "redmi-note-13-pro",
        "name": "Xiaomi Redmi Note 13 Pro",
        "brand": "xiaomi",
        "model": "Redmi Note 13 Pro",
        "image_url": "https://fdn2.gsmarena.com/vv/bigpic/xiaomi-redmi-note-13-pro-5g.jpg",
        "imagekit_path": "/mobiles/xiaomi/redmi-note-13-pro.jpg",
        "release_date": "2023-09-21",
        "price": "Rs 89,999",
        "short_specs": {
            "ram": "8GB",
            "storage": "256GB",
            "camera": "200MP + 8MP + 2MP",
            "battery": "5100mAh",
            "display": "6.67 inches",
            "processor": "Snapdragon 7s Gen 2",
        },
        "carousel_images": [
            "https://fdn2.gsmarena.com/vv/bigpic/xiaomi-redmi-note-13-pro-5g.jpg",
        ],
        "specifications": [
            {
                "category": "Display",
                "specs": [
                    {"feature": "Screen Size", "value": "6.82 inches"},
                    {"feature": "Resolution", "value": "3168 x 1440 pixels"},
                    {"feature": "Display Type", "value": "LTPO OLED"},
                    {"feature": "Refresh Rate", "value": "120Hz"},
                ],
            },
        ],
        "dimensions": None,
        "build_materials": None,
    },
]


def seed_sample_data(db: Session) -> bool:
    """
    Insert the sample catalog if the brands table is empty.

    Returns:
        True if data was inserted, False if the catalog already had brands
    """
    if db.scalar(select(Brand.id).limit(1)) is not None:
        logger.debug("Catalog already populated, skipping sample data")
        return False

    db.add_all(Brand(**brand) for brand in SAMPLE_BRANDS)
    db.add_all(Mobile(**mobile) for mobile in SAMPLE_MOBILES)
    db.commit()

    logger.info(f"Seeded {len(SAMPLE_BRANDS)} brands and {len(SAMPLE_MOBILES)} mobiles")
    return True
