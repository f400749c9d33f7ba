"""
Shopify product CSV format modules.

Modules:
    csv_parser - Grouped-row CSV to ProductCollection
    csv_exporter - ProductCollection to grouped-row CSV
    schema_detector - Header classification
    schema_generator - TypedDict and JSON Schema generation from headers
"""

from .csv_exporter import ShopifyCSVExporter, stringify_csv, write_csv
from .csv_parser import ProductAggregator, aggregate_rows, parse_csv, parse_csv_string
from .schema_detector import (
    DetectedSchema,
    SchemaDetectionOptions,
    SchemaDetector,
    detect_schema,
)
from .schema_generator import (
    CSVAnalysis,
    analyze_csv,
    generate_json_schema,
    generate_typed_dict,
)

__all__ = [
    # Parsing
    'ProductAggregator',
    'aggregate_rows',
    'parse_csv',
    'parse_csv_string',
    # Export
    'ShopifyCSVExporter',
    'stringify_csv',
    'write_csv',
    # Schema
    'DetectedSchema',
    'SchemaDetectionOptions',
    'SchemaDetector',
    'detect_schema',
    'CSVAnalysis',
    'analyze_csv',
    'generate_json_schema',
    'generate_typed_dict',
]
