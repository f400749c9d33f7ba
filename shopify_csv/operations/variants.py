"""
Variant operations.

Variants are identified by their SKU. Adding a variant with option names
the product has not declared yet claims free option slots on the product.
"""

import logging
from typing import Dict, List, NamedTuple, Optional

from ..common.constants import (
    OPTION_INDEXES,
    VARIANT_SKU_COLUMN,
    is_variant_column,
    option_name_column,
)
from ..models import Product, ProductCollection, ProductVariant, VariantOption

logger = logging.getLogger(__name__)


class VariantMatch(NamedTuple):
    """A variant found in a collection, with its product."""
    handle: str
    product: Product
    variant: ProductVariant


def find_variant(product: Product, sku: str) -> Optional[ProductVariant]:
    if not sku:
        return None
    for variant in product.variants:
        if variant.sku == sku:
            return variant
    return None


def add_variant(
    product: Product,
    options: Dict[str, str],
    linked_to: Optional[Dict[str, str]] = None,
    **columns: str,
) -> ProductVariant:
    """
    Add a variant to a product.

    Variant columns whose names are not identifiers are passed by unpacking
    a dict, e.g. ``add_variant(p, {'Size': 'M'}, **{'Variant SKU': 'S-M'})``.

    Args:
        product: Product to add the variant to
        options: Option name -> value
        linked_to: Option name -> metafield the value is linked to
        **columns: Variant columns ("Variant *", "Cost per item", "Status")

    Returns:
        The new ProductVariant

    Raises:
        ValueError: If a column is not a variant column, or the options need
            more than three option slots
    """
    product_columns = [column for column in columns if not is_variant_column(column)]
    if product_columns:
        raise ValueError(
            f"Not variant columns: {', '.join(product_columns)}. "
            f"Set product columns on product.data instead."
        )

    linked_to = linked_to or {}

    new_names = [name for name in options if product.option_slot(name) is None]
    free_slots = [i for i in OPTION_INDEXES if not product.data.get(option_name_column(i))]
    if len(new_names) > len(free_slots):
        raise ValueError(
            f'Cannot add variant with new option "{new_names[len(free_slots)]}" '
            f'to product "{product.handle}". '
            f'Product already has {len(OPTION_INDEXES) - len(free_slots)} options defined.'
        )

    slots = {name: product.ensure_option_slot(name) for name in options}
    ordered = sorted(options.items(), key=lambda item: slots[item[0]])

    variant = ProductVariant(
        options=[
            VariantOption(name=name, value=value, linked_to=linked_to.get(name))
            for name, value in ordered
        ],
        data=dict(columns),
    )
    product.variants.append(variant)
    return variant


def find_variant_by_options(product: Product, options: Dict[str, str]) -> Optional[ProductVariant]:
    """
    Find the variant whose options are exactly the given name -> value pairs.

    A variant with more or fewer options than given does not match.
    """
    for variant in product.variants:
        if len(variant.options) != len(options):
            continue
        if all(variant.option_value(name) == value for name, value in options.items()):
            return variant
    return None


def remove_variant(product: Product, sku: str) -> bool:
    """Remove every variant with the SKU; returns False if none matched."""
    remaining = [variant for variant in product.variants if variant.sku != sku]
    removed = len(product.variants) - len(remaining)
    product.variants[:] = remaining
    return removed > 0


def find_variant_by_sku(collection: ProductCollection, sku: str) -> Optional[VariantMatch]:
    """Find the first variant with the SKU across all products."""
    if not sku:
        return None
    for product in collection:
        variant = find_variant(product, sku)
        if variant is not None:
            return VariantMatch(product.handle, product, variant)
    return None


def find_duplicate_skus(collection: ProductCollection) -> Dict[str, List[str]]:
    """
    Find SKUs used by more than one variant.

    Returns:
        SKU -> handles of the products using it (one entry per variant)
    """
    usage: Dict[str, List[str]] = {}
    for product in collection:
        for variant in product.variants:
            sku = variant.data.get(VARIANT_SKU_COLUMN)
            if sku:
                usage.setdefault(sku, []).append(product.handle)

    duplicates = {sku: handles for sku, handles in usage.items() if len(handles) > 1}
    if duplicates:
        logger.debug("Found %d duplicate SKUs", len(duplicates))
    return duplicates
