"""
Collection statistics.
"""

from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from ..models import ProductCollection
from .tags import get_tag_stats


@dataclass
class CollectionStats:
    """Counts and averages over a product collection."""
    total_products: int = 0
    total_variants: int = 0
    total_images: int = 0
    avg_variants_per_product: float = 0.0
    avg_images_per_product: float = 0.0
    product_types: Dict[str, int] = field(default_factory=dict)
    vendors: Dict[str, int] = field(default_factory=dict)
    tag_stats: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def count_products_by_type(collection: ProductCollection) -> Dict[str, int]:
    return dict(Counter(product.data.get('Type') or 'Uncategorized' for product in collection))


def count_products_by_vendor(collection: ProductCollection) -> Dict[str, int]:
    return dict(Counter(product.data.get('Vendor') or 'Unknown' for product in collection))


def get_collection_stats(collection: ProductCollection) -> CollectionStats:
    """
    Summarize a collection.

    Args:
        collection: Products to summarize

    Returns:
        CollectionStats; averages are 0 for an empty collection
    """
    total_products = len(collection)
    total_variants = sum(len(product.variants) for product in collection)
    total_images = sum(len(product.images) for product in collection)

    return CollectionStats(
        total_products=total_products,
        total_variants=total_variants,
        total_images=total_images,
        avg_variants_per_product=total_variants / total_products if total_products else 0.0,
        avg_images_per_product=total_images / total_products if total_products else 0.0,
        product_types=count_products_by_type(collection),
        vendors=count_products_by_vendor(collection),
        tag_stats=get_tag_stats(collection),
    )
