"""Product catalogue offered in the bug-report dialog."""

from enum import Enum


class Product(str, Enum):
    """Products a bug can be reported against (5 values)."""

    HARRY_POTTER_CODING_KIT = "harry_potter_coding_kit"
    COMPUTER_KIT_TOUCH = "computer_kit_touch"
    COMPUTER_KIT_2018 = "computer_kit_2018"
    PIXEL_KIT = "pixel_kit"
    MOTION_SENSOR_KIT = "motion_sensor_kit"


# Dialog order matters: options are rendered in this order.
PRODUCT_LABELS: dict[Product, str] = {
    Product.HARRY_POTTER_CODING_KIT: "Harry Potter Coding Kit",
    Product.COMPUTER_KIT_TOUCH: "Computer Kit Touch",
    Product.COMPUTER_KIT_2018: "Computer Kit 2018",
    Product.PIXEL_KIT: "Pixel Kit",
    Product.MOTION_SENSOR_KIT: "Motion Sensor Kit",
}


def product_name(slug: str) -> str:
    """Return the human-readable name for a product slug.

    Known slugs map to their dialog label. Unknown slugs are rendered by
    replacing underscores with spaces in title case.
    """
    try:
        return PRODUCT_LABELS[Product(slug)]
    except ValueError:
        return slug.replace("_", " ").title()
