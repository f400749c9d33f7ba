"""
Image operations.
"""

from typing import List, NamedTuple, Optional

from ..common.constants import (
    IMAGE_ALT_COLUMN,
    IMAGE_POSITION_COLUMN,
    IMAGE_SRC_COLUMN,
    VARIANT_IMAGE_COLUMN,
)
from ..models import Product, ProductCollection, ProductImage
from .variants import find_variant


class ImageMatch(NamedTuple):
    """An image found in a collection, with its product."""
    handle: str
    product: Product
    image: ProductImage


def find_image(product: Product, src: str) -> Optional[ProductImage]:
    for image in product.images:
        if image.src == src:
            return image
    return None


def add_image(product: Product, src: str, alt: str = "", position: Optional[int] = None) -> ProductImage:
    """
    Add an image to a product.

    The first image of a product with an empty "Image Src" column is also
    written into the product's own image columns, as if it had been on the
    product's first CSV row.

    Args:
        product: Product to add the image to
        src: Image URL
        alt: Alt text
        position: Image position (default: next position after the existing images)

    Returns:
        The new image, or the existing one if the product already has the src
    """
    existing = find_image(product, src)
    if existing is not None:
        return existing

    image = ProductImage(
        src=src,
        position=str(position) if position else str(len(product.images) + 1),
        alt=alt,
    )
    if not product.images and product.data.get(IMAGE_SRC_COLUMN) == '':
        product.data[IMAGE_SRC_COLUMN] = image.src
        product.data[IMAGE_POSITION_COLUMN] = image.position
        product.data[IMAGE_ALT_COLUMN] = image.alt

    product.images.append(image)
    return image


def assign_image_to_variant(product: Product, src: str, sku: str) -> None:
    """
    Point a variant's "Variant Image" at one of the product's images.

    Raises:
        ValueError: If the product has no such image or no variant with the SKU
    """
    image = find_image(product, src)
    if image is None:
        raise ValueError(f'Image with src "{src}" not found on product "{product.handle}".')

    variant = find_variant(product, sku)
    if variant is None:
        raise ValueError(f'Variant with SKU "{sku}" not found on product "{product.handle}".')

    variant.data[VARIANT_IMAGE_COLUMN] = image.src


def find_images_without_alt_text(collection: ProductCollection) -> List[ImageMatch]:
    """Find images whose alt text is empty or whitespace, in collection order."""
    return [
        ImageMatch(product.handle, product, image)
        for product in collection
        for image in product.images
        if not image.alt.strip()
    ]


def find_orphaned_images(product: Product) -> List[ProductImage]:
    """
    Find images used neither as the product image nor as a variant image.

    Returns:
        Unused images, in image order
    """
    used = {product.data.get(IMAGE_SRC_COLUMN)}
    used.update(variant.data.get(VARIANT_IMAGE_COLUMN) for variant in product.variants)
    used.discard(None)
    used.discard('')
    return [image for image in product.images if image.src not in used]
