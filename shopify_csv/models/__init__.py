"""
Data models for parsed Shopify product CSVs.

This module contains the product hierarchy, metafield views and the
ordered product collection.
"""

from .collection import ProductCollection
from .metafield import (
    Metafield,
    MetafieldHeader,
    bind_metafield,
    bind_metafields,
    build_metafield_header,
    is_metafield_header,
    parse_metafield_header,
)
from .product import Product, ProductImage, ProductVariant, VariantOption

__all__ = [
    'Metafield',
    'MetafieldHeader',
    'Product',
    'ProductCollection',
    'ProductImage',
    'ProductVariant',
    'VariantOption',
    'bind_metafield',
    'bind_metafields',
    'build_metafield_header',
    'is_metafield_header',
    'parse_metafield_header',
]
