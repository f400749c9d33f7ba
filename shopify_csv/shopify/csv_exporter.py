"""
Shopify CSV Exporter

Flattens a ProductCollection back into Shopify's grouped-row CSV format.

Row layout per product:
- No variants: a single row with the product's columns.
- Variants: the first row carries the product's columns and the first
  variant. Each further variant gets its own row holding only
  the handle, option names, variant columns and option values.
- The first row carries the first image only if the product's own
  "Image Src" is set.
- Images not written on a variant row get trailing image-only rows.

Every image is written exactly once and in list order, so parsing the
output yields the same images.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..common.constants import (
    HANDLE_COLUMN,
    IMAGE_ALT_COLUMN,
    IMAGE_POSITION_COLUMN,
    IMAGE_SRC_COLUMN,
    OPTION_INDEXES,
    VARIANT_IMAGE_COLUMN,
    option_linked_to_column,
    option_name_column,
    option_value_column,
)
from ..common.csv_utils import rows_to_csv, write_text_file
from ..models import Product, ProductCollection, ProductImage, ProductVariant

logger = logging.getLogger(__name__)

IMAGE_COLUMNS = (IMAGE_SRC_COLUMN, IMAGE_POSITION_COLUMN, IMAGE_ALT_COLUMN)


class ShopifyCSVExporter:
    """
    Exports a ProductCollection to Shopify-compatible CSV.

    Usage:
        exporter = ShopifyCSVExporter()
        text = exporter.stringify(products)
        exporter.export(products, "output/products.csv")
    """

    def __init__(self, fieldnames: Optional[Sequence[str]] = None):
        """
        Initialize the exporter.

        Args:
            fieldnames: Column order for the output. If None, the key order
                of the first product's columns is used.
        """
        self.fieldnames = list(fieldnames) if fieldnames is not None else None

    def fieldnames_for(self, collection: ProductCollection) -> List[str]:
        if self.fieldnames is not None:
            return self.fieldnames
        products = collection.values()
        if not products:
            return []
        return list(products[0].data.keys())

    def image_to_row(self, handle: str, image: ProductImage, fieldnames: Sequence[str]) -> Dict[str, str]:
        """
        Convert an additional image to a CSV row.

        Args:
            handle: Product handle (for association)
            image: Image to convert
            fieldnames: Output columns

        Returns:
            Dictionary of field values (mostly empty)
        """
        row = {field: '' for field in fieldnames}
        row[HANDLE_COLUMN] = handle
        self._apply_image(row, image)
        return row

    def product_to_rows(self, product: Product, fieldnames: Sequence[str]) -> List[Dict[str, str]]:
        """
        Convert a product to all of its CSV rows.

        Args:
            product: Product to convert
            fieldnames: Output columns, used for the empty rows' template

        Returns:
            List of row dictionaries (not yet projected onto fieldnames)
        """
        images = product.images

        if not product.variants:
            row = dict(product.data)
            next_image = self._apply_first_image(row, images)
            rows = [row]
        else:
            rows = []
            next_image = 0
            for index, variant in enumerate(product.variants):
                if index == 0:
                    row = dict(product.data)
                    row.update(variant.data)
                    self._apply_options(row, product, variant)
                    next_image = self._apply_first_image(row, images)
                else:
                    row = self._variant_row(product, variant, fieldnames)
                    if (next_image < len(images)
                            and row.get(VARIANT_IMAGE_COLUMN)
                            and row[VARIANT_IMAGE_COLUMN] == images[next_image].src):
                        self._apply_image(row, images[next_image])
                        next_image += 1
                rows.append(row)

        for image in images[next_image:]:
            rows.append(self.image_to_row(product.handle, image, fieldnames))

        return rows

    def collection_to_rows(self, collection: ProductCollection) -> List[Dict[str, str]]:
        """
        Convert every product to rows projected onto the output columns.

        Columns not in the output header are dropped with a single warning.
        """
        fieldnames = self.fieldnames_for(collection)
        known = set(fieldnames)
        dropped: Dict[str, None] = {}

        rows = []
        for product in collection:
            for row in self.product_to_rows(product, fieldnames):
                for column in row:
                    if column not in known:
                        dropped.setdefault(column, None)
                rows.append({field: row.get(field) or '' for field in fieldnames})

        if dropped:
            logger.warning(
                "Dropped %d columns not present in the header: %s",
                len(dropped), ', '.join(dropped),
            )

        return rows

    def stringify(self, collection: ProductCollection) -> str:
        """
        Serialize a collection to CSV text.

        Returns:
            CSV text, or an empty string for an empty collection

        Raises:
            SerializationError: If the CSV writer rejects a row
        """
        if not len(collection):
            return ''

        fieldnames = self.fieldnames_for(collection)
        rows = self.collection_to_rows(collection)
        logger.info("Serialized %d products to %d rows", len(collection), len(rows))
        return rows_to_csv(rows, fieldnames)

    def export(self, collection: ProductCollection, output_path: str | Path) -> None:
        """
        Export a collection to a CSV file.

        Args:
            collection: Products to export
            output_path: Output CSV file path

        Raises:
            SerializationError: If the CSV writer rejects a row
            OutputAccessError: If the file cannot be written
        """
        text = self.stringify(collection)
        write_text_file(output_path, text)
        logger.info("Wrote %d products to %s", len(collection), output_path)

    def _variant_row(self, product: Product, variant: ProductVariant,
                     fieldnames: Sequence[str]) -> Dict[str, str]:
        row = {field: '' for field in fieldnames}
        row[HANDLE_COLUMN] = product.handle
        for index in OPTION_INDEXES:
            name = product.data.get(option_name_column(index))
            if name:
                row[option_name_column(index)] = name
        row.update(variant.data)
        self._apply_options(row, product, variant)
        return row

    @staticmethod
    def _apply_options(row: Dict[str, str], product: Product, variant: ProductVariant) -> None:
        # Options are written to the slot declared for their name
        for option in variant.options:
            index = product.option_slot(option.name)
            if index is None:
                continue
            row[option_value_column(index)] = option.value
            if option.linked_to:
                row[option_linked_to_column(index)] = option.linked_to

    def _apply_first_image(self, row: Dict[str, str], images: Sequence[ProductImage]) -> int:
        """
        Write the first image onto the product row.

        The row only carries an image when the product's own "Image Src" is
        set, which is the case whenever its first CSV row had one. Otherwise
        its image columns are left untouched.

        Returns:
            Number of images consumed (0 or 1)
        """
        if not row.get(IMAGE_SRC_COLUMN):
            return 0
        self._apply_image(row, images[0] if images else None)
        return 1 if images else 0

    @staticmethod
    def _apply_image(row: Dict[str, str], image: Optional[ProductImage]) -> None:
        if image is None:
            for column in IMAGE_COLUMNS:
                if column in row:
                    row[column] = ''
            return
        row[IMAGE_SRC_COLUMN] = image.src
        row[IMAGE_POSITION_COLUMN] = str(image.position)
        row[IMAGE_ALT_COLUMN] = image.alt


def stringify_csv(collection: ProductCollection) -> str:
    """Serialize a collection to Shopify CSV text."""
    return ShopifyCSVExporter().stringify(collection)


def write_csv(path: str | Path, collection: ProductCollection) -> None:
    """
    Serialize a collection and write it to a file.

    Raises:
        SerializationError: If the CSV writer rejects a row
        OutputAccessError: If the file cannot be written
    """
    ShopifyCSVExporter().export(collection, path)
