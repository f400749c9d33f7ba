"""
Product-level operations on a ProductCollection.

Creating, adding, cloning and deleting products, plus helpers for building
and checking the core columns of a product row.
"""

import copy
import logging
import re
from typing import Dict, Iterable, Optional, Pattern, Union

from ..common.config_loader import get_core_fields, get_product_template
from ..common.constants import HANDLE_COLUMN
from ..models import Product, ProductCollection
from .tags import serialize_tags

logger = logging.getLogger(__name__)

HANDLE_INVALID_CHARS = re.compile(r'[^a-z0-9]+')


def create_product(handle: str, **columns: str) -> Product:
    """
    Create a product with Shopify's default columns.

    Columns whose names are not identifiers can be passed by unpacking a
    dict, e.g. ``create_product('shirt', **{'Body (HTML)': '<p>Hi</p>'})``.

    Args:
        handle: Product handle
        **columns: Column values overriding the template defaults

    Returns:
        New Product with no images or variants

    Raises:
        ValueError: If the handle is empty
    """
    data = get_product_template()
    data.update(columns)
    data[HANDLE_COLUMN] = handle
    return Product(data=data)


def add_product(collection: ProductCollection, product: Product) -> ProductCollection:
    """Insert a product under its handle, replacing any product with the same handle."""
    if product.handle in collection:
        logger.debug("Replacing existing product %s", product.handle)
    collection.add(product)
    return collection


def delete_product(collection: ProductCollection, handle: str) -> bool:
    """Remove a product; returns False if no product has the handle."""
    if handle not in collection:
        return False
    del collection[handle]
    return True


def clone_product(product: Product, handle: str, title: str) -> Product:
    """
    Deep-copy a product under a new handle and title.

    Images and variants are copied, so editing the clone never touches the
    original product.
    """
    clone = copy.deepcopy(product)
    clone.data[HANDLE_COLUMN] = handle
    clone.data['Title'] = title
    return clone


def bulk_find_and_replace(
    products: Iterable[Product],
    column: str,
    find: Union[str, Pattern[str]],
    replace_with: str,
) -> int:
    """
    Replace text in one product column of every product.

    Every occurrence is replaced: plain strings with str.replace, compiled
    patterns with Pattern.sub. Products without the column are skipped.

    Args:
        products: Products to update (a ProductCollection or any iterable)
        column: Product column, e.g. "Title" or "Body (HTML)"
        find: Text or compiled regular expression to search for
        replace_with: Replacement text

    Returns:
        Number of products whose value changed

    Raises:
        ValueError: If column is the Handle column
    """
    if column == HANDLE_COLUMN:
        raise ValueError("Handles cannot be rewritten in place; use clone_product instead.")

    changed = 0
    for product in products:
        original = product.data.get(column)
        if original is None:
            continue
        if isinstance(find, str):
            updated = original.replace(find, replace_with)
        else:
            updated = find.sub(replace_with, original)
        if updated != original:
            product.data[column] = updated
            changed += 1

    logger.debug("Replaced text in %r of %d products", column, changed)
    return changed


def sanitize_handle(text: str) -> str:
    """
    Turn arbitrary text into a Shopify handle.

    Example:
        >>> sanitize_handle("My Awesome & Cool Product!")
        'my-awesome-cool-product'
    """
    return HANDLE_INVALID_CHARS.sub('-', text.lower()).strip('-')


def validate_core_fields(row: Dict[str, str], core_fields: Optional[Iterable[str]] = None) -> bool:
    """
    Check that a row has every core column.

    Args:
        row: Row dictionary
        core_fields: Required columns (if None, loads from config)

    Returns:
        True if every core column is present and not None
    """
    if core_fields is None:
        core_fields = get_core_fields()
    return all(row.get(column) is not None for column in core_fields)


def create_minimal_product_row(
    handle: str,
    title: str,
    vendor: str = '',
    product_type: str = '',
    tags: Optional[Iterable[str]] = None,
    published: str = 'TRUE',
    body_html: str = '',
) -> Dict[str, str]:
    """
    Build a row holding only the core columns.

    Args:
        handle: Product handle
        title: Product title
        vendor: Vendor name
        product_type: Product type
        tags: Tags, joined with ", "
        published: "TRUE" or "FALSE"
        body_html: Product description HTML

    Returns:
        Row dictionary in core column order
    """
    return {
        'Handle': handle,
        'Title': title,
        'Body (HTML)': body_html,
        'Vendor': vendor,
        'Type': product_type,
        'Tags': serialize_tags(tags or []),
        'Published': published,
    }
