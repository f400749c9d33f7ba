"""
Inventory, price and bulk variant-field updates.

The first variant of a product shares its CSV row with the product, so
parsing copies that variant's columns into ``product.data`` as well. Updates
to the first variant are mirrored there to keep parsed and edited products
comparable.
"""

import logging
from typing import Callable, Dict, Iterable, List, Union

from ..common.constants import (
    VARIANT_COMPARE_AT_PRICE_COLUMN,
    VARIANT_INVENTORY_QTY_COLUMN,
    VARIANT_PRICE_COLUMN,
)
from ..models import Product, ProductCollection, ProductVariant
from .variants import find_variant

logger = logging.getLogger(__name__)

VariantValue = Union[str, Callable[[ProductVariant, Product], str]]

PRICE_ADJUSTMENTS = ('percentage', 'fixed_amount')
PRICE_BASES = {
    'price': VARIANT_PRICE_COLUMN,
    'compare_at_price': VARIANT_COMPARE_AT_PRICE_COLUMN,
}


def _set_variant_field(product: Product, variant: ProductVariant, field: str, value: str) -> None:
    variant.data[field] = value
    if product.variants and product.variants[0] is variant:
        product.data[field] = value


def update_inventory_quantity(product: Product, sku: str, quantity: int) -> Product:
    """
    Set "Variant Inventory Qty" on one variant.

    Args:
        product: Product holding the variant
        sku: Variant SKU
        quantity: New inventory quantity

    Returns:
        The product, for chaining

    Raises:
        ValueError: If the product has no variant with the SKU
    """
    variant = find_variant(product, sku)
    if variant is None:
        raise ValueError(f'Variant with SKU "{sku}" not found on product "{product.handle}".')

    _set_variant_field(product, variant, VARIANT_INVENTORY_QTY_COLUMN, str(quantity))
    return product


def bulk_update_inventory(collection: ProductCollection, updates: Dict[str, int]) -> List[Product]:
    """
    Set inventory quantities by SKU across a collection.

    Only the first product holding a SKU is updated. Unknown SKUs are
    logged and skipped.

    Args:
        collection: Products to search
        updates: SKU -> new quantity

    Returns:
        Updated products, each listed once, in update order
    """
    updated: List[Product] = []

    for sku, quantity in updates.items():
        for product in collection:
            if find_variant(product, sku) is not None:
                update_inventory_quantity(product, sku, quantity)
                if not any(product is seen for seen in updated):
                    updated.append(product)
                break
        else:
            logger.warning("SKU %r not found in any product", sku)

    logger.info("Updated inventory for %d SKUs on %d products", len(updates), len(updated))
    return updated


def bulk_update_variant_field(collection: ProductCollection, field: str, value: VariantValue) -> List[Product]:
    """
    Set one variant column on every variant of every product.

    Args:
        collection: Products to update
        field: Variant column, e.g. "Variant Taxable"
        value: New value, or a callable ``(variant, product) -> str``

    Returns:
        Products where at least one variant changed
    """
    modified = []
    for product in collection:
        changed = False
        for variant in product.variants:
            new_value = value(variant, product) if callable(value) else value
            if variant.data.get(field) != new_value:
                _set_variant_field(product, variant, field, new_value)
                changed = True
        if changed:
            modified.append(product)

    logger.debug("Set %r on variants of %d products", field, len(modified))
    return modified


def bulk_update_prices(
    products: Iterable[Product],
    amount: float,
    adjustment: str = 'percentage',
    based_on: str = 'price',
    set_compare_at_price: bool = False,
) -> int:
    """
    Adjust "Variant Price" on every variant of the given products.

    Variants whose base column is not a number are left alone.

    Args:
        products: Products to update (a ProductCollection or any iterable)
        amount: Percent change for 'percentage' (-15 for 15% off), or the
            amount to add for 'fixed_amount'
        adjustment: 'percentage' or 'fixed_amount'
        based_on: Column the new price is computed from, 'price' or
            'compare_at_price'
        set_compare_at_price: Move the old price to "Variant Compare At Price"

    Returns:
        Number of variants updated

    Raises:
        ValueError: If adjustment or based_on is not recognized
    """
    if adjustment not in PRICE_ADJUSTMENTS:
        raise ValueError(f"Unknown price adjustment {adjustment!r}, expected one of {PRICE_ADJUSTMENTS}")
    if based_on not in PRICE_BASES:
        raise ValueError(f"Unknown price base {based_on!r}, expected one of {tuple(PRICE_BASES)}")

    updated = 0
    for product in products:
        for variant in product.variants:
            old_price = variant.data.get(VARIANT_PRICE_COLUMN, '')
            try:
                base = float(variant.data.get(PRICE_BASES[based_on], ''))
            except ValueError:
                continue

            if adjustment == 'percentage':
                new_price = base * (1 + amount / 100)
            else:
                new_price = base + amount

            if set_compare_at_price:
                _set_variant_field(product, variant, VARIANT_COMPARE_AT_PRICE_COLUMN, old_price)
            _set_variant_field(product, variant, VARIANT_PRICE_COLUMN, f"{new_price:.2f}")
            updated += 1

    logger.debug("Adjusted prices of %d variants", updated)
    return updated
