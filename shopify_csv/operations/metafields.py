"""
Metafield operations.

Metafields live in product columns, so creating or removing one means adding
or removing a column on every product of the collection to keep the CSV
rectangular. Reading and writing values goes through the products' live
metafield views.
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from ..models import (
    Metafield,
    Product,
    ProductCollection,
    build_metafield_header,
    parse_metafield_header,
)
from ..models.metafield import MetafieldValue, format_metafield_value

logger = logging.getLogger(__name__)


def add_metafield_column(
    collection: ProductCollection,
    namespace: str,
    key: str,
    type_: str,
    default: Optional[Union[str, Sequence[str]]] = None,
) -> str:
    """
    Add a "Metafield: namespace.key[type]" column to every product.

    Products that already have the column keep their value.

    Args:
        collection: Products to update
        namespace: Metafield namespace
        key: Metafield key
        type_: Shopify metafield type, e.g. "single_line_text_field" or
            "list.single_line_text_field"
        default: Initial value; sequences are joined with ","

    Returns:
        The column header
    """
    header = build_metafield_header(namespace, key, type_)
    value = format_metafield_value(default) if default is not None else ''

    added = 0
    for product in collection:
        if header not in product.data:
            product.data[header] = value
            added += 1

    logger.debug("Added metafield column %r to %d products", header, added)
    return header


def remove_metafield_column(collection: ProductCollection, namespace: str, key: str) -> List[str]:
    """
    Remove every column encoding namespace.key from every product.

    Both header syntaxes are matched.

    Returns:
        The removed column headers (empty if none were found)
    """
    removed = {}
    for product in collection:
        for column in list(product.data):
            header = parse_metafield_header(column)
            if header is not None and header.namespace == namespace and header.key == key:
                del product.data[column]
                removed.setdefault(column, None)

    if not removed:
        logger.warning("Metafield column for %s.%s not found", namespace, key)

    return list(removed)


def get_metafield(product: Product, namespace: str, key: str) -> Optional[Metafield]:
    return product.get_metafield(namespace, key)


def set_metafield_value(
    product: Product,
    namespace: str,
    key: str,
    value: Union[str, Sequence[str]],
) -> None:
    """
    Set an existing metafield on one product.

    Raises:
        ValueError: If the product has no column for the metafield
    """
    product.set_metafield(namespace, key, value)


def find_products_by_metafield(
    collection: ProductCollection,
    namespace: str,
    key: str,
    value: Union[str, Callable[[MetafieldValue], bool]],
) -> List[Product]:
    """
    Find products whose metafield matches a value.

    Args:
        collection: Products to search
        namespace: Metafield namespace
        key: Metafield key
        value: Exact parsed value to match, or a predicate called with the
            parsed value (a list for list metafields)

    Returns:
        Matching products in collection order; products without the
        metafield never match
    """
    if callable(value):
        predicate = value
    else:
        def predicate(parsed: MetafieldValue) -> bool:
            return parsed == value

    matches = []
    for product in collection:
        metafield = product.get_metafield(namespace, key)
        if metafield is not None and predicate(metafield.parsed_value):
            matches.append(product)
    return matches


def find_products_missing_metafield(collection: ProductCollection, namespace: str, key: str) -> List[Product]:
    return [product for product in collection if product.get_metafield(namespace, key) is None]
