"""
Product data models.

Hierarchical view of a Shopify product CSV: one Product per handle, holding
the raw columns of its first row, its unique images and its variants.

Raw column dictionaries are kept as plain ordered dicts so unknown columns
survive a parse/serialize round trip and header order can be rebuilt.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from ..common.constants import (
    DEFAULT_OPTION_VALUE,
    HANDLE_COLUMN,
    OPTION_INDEXES,
    VARIANT_SKU_COLUMN,
    option_name_column,
)
from .metafield import Metafield, MetafieldValue, bind_metafields


@dataclass
class ProductImage:
    """Product image with metadata."""
    src: str
    position: str = ""
    alt: str = ""


@dataclass
class VariantOption:
    """One axis of variation (e.g. Size = M)."""
    name: str
    value: str
    linked_to: Optional[str] = None


@dataclass
class ProductVariant:
    """
    Product variant data.

    ``data`` holds only the variant-scoped columns of the variant's row
    ("Variant *", "Cost per item", "Status"). Options are ordered by the
    product's declared option slot.
    """
    options: List[VariantOption] = field(default_factory=list)
    data: Dict[str, str] = field(default_factory=dict)

    @property
    def is_default(self) -> bool:
        return not self.options or any(
            option.value == DEFAULT_OPTION_VALUE for option in self.options
        )

    @property
    def sku(self) -> str:
        return self.data.get(VARIANT_SKU_COLUMN, '')

    @property
    def metadata(self) -> Dict[str, Metafield]:
        """Live metafield views over the variant's columns."""
        return bind_metafields(self.data)

    def option_value(self, name: str) -> Optional[str]:
        for option in self.options:
            if option.name == name:
                return option.value
        return None


@dataclass
class Product:
    """
    A product and everything its CSV rows contribute.

    Field Groups:
    - data: raw columns of the product's first row, including custom and
      metafield columns, in header order
    - images: unique images collected from all of the product's rows
    - variants: one entry per variant row
    - metadata: metafield views derived from ``data`` on every access
    """
    data: Dict[str, str]
    images: List[ProductImage] = field(default_factory=list)
    variants: List[ProductVariant] = field(default_factory=list)

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.data.get(HANDLE_COLUMN):
            raise ValueError("Product handle is required")

    @property
    def handle(self) -> str:
        return self.data[HANDLE_COLUMN]

    @property
    def metadata(self) -> Dict[str, Metafield]:
        """Live metafield views keyed by "namespace.key"."""
        return bind_metafields(self.data)

    @property
    def option_names(self) -> List[str]:
        """Declared option names by slot; empty string for an unused slot."""
        return [self.data.get(option_name_column(i), '') for i in OPTION_INDEXES]

    def option_slot(self, name: str) -> Optional[str]:
        """Return the slot index ("1".."3") declared for an option name."""
        for index in OPTION_INDEXES:
            if name and self.data.get(option_name_column(index)) == name:
                return index
        return None

    def ensure_option_slot(self, name: str) -> str:
        """
        Return the slot for an option name, claiming a free slot if needed.

        Raises:
            ValueError: If the name is new and all three slots are taken
        """
        index = self.option_slot(name)
        if index is not None:
            return index

        for index in OPTION_INDEXES:
            if not self.data.get(option_name_column(index)):
                self.data[option_name_column(index)] = name
                return index

        raise ValueError(
            f'Cannot add option "{name}" to product "{self.handle}". '
            f'Product already has {len(OPTION_INDEXES)} options defined.'
        )

    def get_metafield(self, namespace: str, key: str) -> Optional[Metafield]:
        return self.metadata.get(f"{namespace}.{key}")

    def set_metafield(self, namespace: str, key: str, value: Union[str, Sequence[str]]) -> None:
        """
        Set an existing metafield.

        Raises:
            ValueError: If the product has no column for the metafield
        """
        metafield = self.get_metafield(namespace, key)
        if metafield is None:
            raise ValueError(
                f'Metafield with namespace "{namespace}" and key "{key}" not found '
                f'on product "{self.handle}". Add the metafield column first.'
            )
        metafield.parsed_value = value

    def metafield_values(self) -> Dict[str, MetafieldValue]:
        """Snapshot of every metafield's parsed value."""
        return {full_key: metafield.parsed_value for full_key, metafield in self.metadata.items()}
