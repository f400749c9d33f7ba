"""
Shopify CSV Parser

Aggregates the flat, multi-row Shopify product CSV into Product objects.

Row grouping rules:
- A row with a non-empty Handle different from the current one starts (or
  resumes) that product; the row's columns become the product's data.
- Rows with an empty Handle belong to the product above them. Rows before
  the first handle are skipped.
- Every row of a product may contribute one image (Image Src) and one
  variant (an option value in the first declared option slot, or a
  Variant SKU).
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from ..common.config_loader import get_core_fields
from ..common.constants import (
    DEFAULT_OPTION_NAME,
    DEFAULT_OPTION_VALUE,
    HANDLE_COLUMN,
    IMAGE_ALT_COLUMN,
    IMAGE_POSITION_COLUMN,
    IMAGE_SRC_COLUMN,
    OPTION_INDEXES,
    REQUIRED_COLUMNS,
    VARIANT_SKU_COLUMN,
    is_variant_column,
    option_linked_to_column,
    option_name_column,
    option_value_column,
)
from ..common.csv_utils import read_csv_file, tokenize_csv
from ..common.errors import SchemaViolationError
from ..models import Product, ProductCollection, ProductImage, ProductVariant, VariantOption
from .schema_detector import SchemaDetectionOptions, detect_schema, log_schema

logger = logging.getLogger(__name__)


class ProductAggregator:
    """
    Builds a ProductCollection from ordered rows.

    Usage:
        aggregator = ProductAggregator(fieldnames)
        for row in rows:
            aggregator.add_row(row)
        products = aggregator.collection
    """

    def __init__(self, fieldnames: Sequence[str], core_fields: Optional[Sequence[str]] = None):
        """
        Initialize the aggregator.

        Args:
            fieldnames: Header row of the source
            core_fields: Columns every product must carry (if None, loads from config)

        Raises:
            SchemaViolationError: If a required column is missing from the header
        """
        missing = [column for column in REQUIRED_COLUMNS if column not in fieldnames]
        if missing:
            raise SchemaViolationError(
                "Invalid CSV format: Missing required columns. "
                f"Must include: {', '.join(REQUIRED_COLUMNS)}"
            )

        if core_fields is None:
            core_fields = get_core_fields()

        self.fieldnames = list(fieldnames)
        self.fieldnames += [column for column in core_fields if column not in self.fieldnames]

        self.collection = ProductCollection()
        self.current_handle: Optional[str] = None
        self.rows_seen = 0
        self.rows_skipped = 0

    def normalize_row(self, row: Dict[str, str]) -> Dict[str, str]:
        """Return a fresh row with every known column, missing cells as ''."""
        return {column: row.get(column) or '' for column in self.fieldnames}

    def add_row(self, row: Dict[str, str]) -> None:
        self.rows_seen += 1
        row = self.normalize_row(row)
        handle = row[HANDLE_COLUMN]

        if handle and handle != self.current_handle:
            if handle in self.collection:
                logger.debug("Handle %r reappears after other products, merging rows", handle)
            else:
                self.collection.add(Product(data=row))
            self.current_handle = handle

        if self.current_handle is None:
            self.rows_skipped += 1
            logger.debug("Skipping row %d: no product handle yet", self.rows_seen)
            return

        product = self.collection[self.current_handle]
        self._add_image(product, row)
        self._add_variant(product, row)

    def _add_image(self, product: Product, row: Dict[str, str]) -> None:
        src = row.get(IMAGE_SRC_COLUMN, '')
        if not src or any(image.src == src for image in product.images):
            return

        product.images.append(ProductImage(
            src=src,
            position=row.get(IMAGE_POSITION_COLUMN, ''),
            alt=row.get(IMAGE_ALT_COLUMN, ''),
        ))

    def _add_variant(self, product: Product, row: Dict[str, str]) -> None:
        declared = [
            (index, product.data.get(option_name_column(index), ''))
            for index in OPTION_INDEXES
            if product.data.get(option_name_column(index))
        ]

        has_option_values = bool(declared) and bool(row.get(option_value_column(declared[0][0])))
        # Some exports omit option columns for single-variant products
        has_variant_sku = bool(row.get(VARIANT_SKU_COLUMN, '').strip())
        if not (has_option_values or has_variant_sku):
            return

        data = {column: value for column, value in row.items() if is_variant_column(column)}

        options = [
            VariantOption(
                name=name,
                value=row.get(option_value_column(index), ''),
                linked_to=row.get(option_linked_to_column(index)) or None,
            )
            for index, name in declared
        ]
        if not options:
            options = [VariantOption(name=DEFAULT_OPTION_NAME, value=DEFAULT_OPTION_VALUE)]

        product.variants.append(ProductVariant(options=options, data=data))


def _union_fieldnames(rows: List[Dict[str, str]]) -> List[str]:
    fieldnames: Dict[str, None] = {}
    for row in rows:
        for column in row:
            fieldnames.setdefault(column, None)
    return list(fieldnames)


def aggregate_rows(
    rows: Iterable[Dict[str, str]],
    fieldnames: Optional[Sequence[str]] = None,
    options: Optional[SchemaDetectionOptions] = None,
    source: str = "rows",
) -> ProductCollection:
    """
    Aggregate tokenized rows into products.

    Args:
        rows: Rows in file order
        fieldnames: Header row (default: union of the rows' keys in order)
        options: If given, detect the schema, log it and attach it to the
            collection; it never changes how rows are aggregated
        source: Description of the source for log messages

    Returns:
        ProductCollection keyed by handle in first-seen order

    Raises:
        SchemaViolationError: If the header lacks a Handle column
    """
    rows = list(rows)
    if fieldnames is None:
        fieldnames = _union_fieldnames(rows)

    if not fieldnames:
        return ProductCollection()

    aggregator = ProductAggregator(fieldnames)

    schema = None
    if options is not None:
        schema = detect_schema(fieldnames, options)
        log_schema(schema, source)

    for row in rows:
        aggregator.add_row(row)

    collection = aggregator.collection
    collection.schema = schema

    logger.info(
        "Parsed %d products from %d rows (%s)",
        len(collection), aggregator.rows_seen, source,
    )
    if aggregator.rows_skipped:
        logger.debug("Skipped %d rows before the first handle", aggregator.rows_skipped)

    return collection


def parse_csv_string(text: str, options: Optional[SchemaDetectionOptions] = None) -> ProductCollection:
    """
    Parse Shopify CSV text into a ProductCollection.

    Args:
        text: CSV content including the header row
        options: Optional schema detection switches (diagnostic only)

    Raises:
        MalformedInputError: If the CSV cannot be tokenized
        SchemaViolationError: If the header lacks a Handle column
    """
    fieldnames, rows = tokenize_csv(text)
    return aggregate_rows(rows, fieldnames, options, source="string")


def parse_csv(path: str | Path, options: Optional[SchemaDetectionOptions] = None) -> ProductCollection:
    """
    Parse a Shopify CSV file into a ProductCollection.

    Args:
        path: CSV file path
        options: Optional schema detection switches (diagnostic only)

    Raises:
        InputAccessError: If the file cannot be read
        MalformedInputError: If the CSV cannot be tokenized
        SchemaViolationError: If the header lacks a Handle column
    """
    text = read_csv_file(path)
    fieldnames, rows = tokenize_csv(text)
    return aggregate_rows(rows, fieldnames, options, source=str(path))
