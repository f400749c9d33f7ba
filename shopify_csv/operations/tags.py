"""
Tag helpers.

Shopify stores tags as one comma-separated cell. Tags are compared
case-insensitively; parsing strips whitespace, drops empty entries and
removes exact duplicates while keeping first-seen order.
"""

from collections import Counter
from typing import Dict, Iterable, List, Union

from ..models import Product

TAGS_COLUMN = 'Tags'


def parse_tags(text: str) -> List[str]:
    if not text:
        return []
    tags = [tag.strip() for tag in text.split(',')]
    return list(dict.fromkeys(tag for tag in tags if tag))


def serialize_tags(tags: Iterable[str]) -> str:
    cleaned = (str(tag).strip() for tag in tags)
    return ', '.join(dict.fromkeys(tag for tag in cleaned if tag))


def get_tags(product: Product) -> List[str]:
    return parse_tags(product.data.get(TAGS_COLUMN, ''))


def has_tag(product: Product, tag: str) -> bool:
    """Return True if the product has the tag, ignoring case."""
    wanted = tag.strip().lower()
    if not wanted:
        return False
    return any(existing.lower() == wanted for existing in get_tags(product))


def add_tag(product: Product, tag: str) -> Product:
    """
    Add a tag unless it is already present (ignoring case).

    Returns:
        The product, for chaining
    """
    tag = tag.strip()
    if tag and not has_tag(product, tag):
        product.data[TAGS_COLUMN] = serialize_tags(get_tags(product) + [tag])
    return product


def remove_tag(product: Product, tag: str) -> Product:
    """
    Remove a tag, ignoring case.

    Returns:
        The product, for chaining
    """
    unwanted = tag.strip().lower()
    if unwanted:
        remaining = [existing for existing in get_tags(product) if existing.lower() != unwanted]
        product.data[TAGS_COLUMN] = serialize_tags(remaining)
    return product


def set_tags(product: Product, tags: Union[str, Iterable[str]]) -> Product:
    """Replace all tags; accepts a list or a comma-separated string."""
    if isinstance(tags, str):
        tags = parse_tags(tags)
    product.data[TAGS_COLUMN] = serialize_tags(tags)
    return product


def get_all_tags(products: Iterable[Product]) -> List[str]:
    """Sorted unique tags across products."""
    tags = set()
    for product in products:
        tags.update(get_tags(product))
    return sorted(tags)


def get_tag_stats(products: Iterable[Product]) -> Dict[str, int]:
    """Number of products using each tag."""
    counts = Counter()
    for product in products:
        counts.update(get_tags(product))
    return dict(counts)
