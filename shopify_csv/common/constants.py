"""
Shared constants for the project.

Column names and structural markers of the Shopify product CSV format that
the parser and exporter must agree on.
"""

# Parent logger for every module of the package
LOGGER_NAME = "shopify_csv"

# Option slot suffixes used in headers ("Option1 Name", "Option2 Value", ...)
OPTION_INDEXES = ("1", "2", "3")

# Columns that must be present in the header row
REQUIRED_COLUMNS = ("Handle",)

HANDLE_COLUMN = "Handle"

# Image columns
IMAGE_SRC_COLUMN = "Image Src"
IMAGE_POSITION_COLUMN = "Image Position"
IMAGE_ALT_COLUMN = "Image Alt Text"

# Variant columns
VARIANT_PREFIX = "Variant "
VARIANT_SKU_COLUMN = "Variant SKU"
VARIANT_IMAGE_COLUMN = "Variant Image"
VARIANT_PRICE_COLUMN = "Variant Price"
VARIANT_COMPARE_AT_PRICE_COLUMN = "Variant Compare At Price"
VARIANT_INVENTORY_QTY_COLUMN = "Variant Inventory Qty"

# Non-prefixed columns that belong to a variant row
VARIANT_EXTRA_COLUMNS = ("Cost per item", "Status")

# Option placeholder Shopify uses for single-variant products
DEFAULT_OPTION_NAME = "Title"
DEFAULT_OPTION_VALUE = "Default Title"


def option_name_column(index: str) -> str:
    return f"Option{index} Name"


def option_value_column(index: str) -> str:
    return f"Option{index} Value"


def option_linked_to_column(index: str) -> str:
    return f"Option{index} Linked To"


def is_variant_column(column: str) -> bool:
    """Return True if the column is stored on the variant rather than the product."""
    return column.startswith(VARIANT_PREFIX) or column in VARIANT_EXTRA_COLUMNS
