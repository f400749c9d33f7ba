"""
Shopify Product CSV Toolkit

Parses Shopify's grouped-row product CSV into products with images,
variants and live metafield views, and writes them back out.

Modules:
    models      - Data models (Product, ProductVariant, ProductImage, Metafield, ProductCollection)
    common      - Shared utilities (config loader, CSV utils, errors, logging)
    shopify     - CSV parsing, export and schema detection
    operations  - Editing and querying helpers for parsed collections
    cli         - Command line interface
"""

from .common.csv_utils import csv_headers_from_string, read_csv_headers
from .common.errors import (
    CSVProcessingError,
    InputAccessError,
    MalformedInputError,
    OutputAccessError,
    SchemaViolationError,
    SerializationError,
)
from .models import (
    Metafield,
    Product,
    ProductCollection,
    ProductImage,
    ProductVariant,
    VariantOption,
)
from .operations import (
    create_minimal_product_row,
    extract_market_pricing,
    get_available_markets,
    set_market_pricing,
    validate_core_fields,
)
from .shopify import (
    DetectedSchema,
    SchemaDetectionOptions,
    ShopifyCSVExporter,
    analyze_csv,
    detect_schema,
    generate_json_schema,
    generate_typed_dict,
    parse_csv,
    parse_csv_string,
    stringify_csv,
    write_csv,
)

__version__ = '1.0.0'
