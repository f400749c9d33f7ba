"""
Operations for editing and querying parsed product collections.

Modules:
    products - create, add, clone and delete products; core column helpers
    variants - add, find and remove variants by SKU or options
    images - add images, assign them to variants, find unused or undescribed ones
    metafields - add or remove metafield columns, read, write and search values
    inventory - inventory quantities, prices and bulk variant column updates
    tags - parse, serialize and edit product tags
    markets - per-market pricing columns
    stats - collection statistics
"""

from .images import (
    ImageMatch,
    add_image,
    assign_image_to_variant,
    find_image,
    find_images_without_alt_text,
    find_orphaned_images,
)
from .inventory import (
    bulk_update_inventory,
    bulk_update_prices,
    bulk_update_variant_field,
    update_inventory_quantity,
)
from .markets import extract_market_pricing, get_available_markets, set_market_pricing
from .metafields import (
    add_metafield_column,
    find_products_by_metafield,
    find_products_missing_metafield,
    get_metafield,
    remove_metafield_column,
    set_metafield_value,
)
from .products import (
    add_product,
    bulk_find_and_replace,
    clone_product,
    create_minimal_product_row,
    create_product,
    delete_product,
    sanitize_handle,
    validate_core_fields,
)
from .stats import (
    CollectionStats,
    count_products_by_type,
    count_products_by_vendor,
    get_collection_stats,
)
from .tags import (
    add_tag,
    get_all_tags,
    get_tag_stats,
    get_tags,
    has_tag,
    parse_tags,
    remove_tag,
    serialize_tags,
    set_tags,
)
from .variants import (
    VariantMatch,
    add_variant,
    find_duplicate_skus,
    find_variant,
    find_variant_by_options,
    find_variant_by_sku,
    remove_variant,
)

__all__ = [
    'CollectionStats',
    'ImageMatch',
    'VariantMatch',
    'add_image',
    'add_metafield_column',
    'add_product',
    'add_tag',
    'add_variant',
    'assign_image_to_variant',
    'bulk_find_and_replace',
    'bulk_update_inventory',
    'bulk_update_prices',
    'bulk_update_variant_field',
    'clone_product',
    'count_products_by_type',
    'count_products_by_vendor',
    'create_minimal_product_row',
    'create_product',
    'delete_product',
    'extract_market_pricing',
    'find_duplicate_skus',
    'find_image',
    'find_images_without_alt_text',
    'find_orphaned_images',
    'find_products_by_metafield',
    'find_products_missing_metafield',
    'find_variant',
    'find_variant_by_options',
    'find_variant_by_sku',
    'get_all_tags',
    'get_available_markets',
    'get_collection_stats',
    'get_metafield',
    'get_tag_stats',
    'get_tags',
    'has_tag',
    'parse_tags',
    'remove_metafield_column',
    'remove_tag',
    'remove_variant',
    'sanitize_handle',
    'serialize_tags',
    'set_market_pricing',
    'set_metafield_value',
    'set_tags',
    'update_inventory_quantity',
    'validate_core_fields',
]
