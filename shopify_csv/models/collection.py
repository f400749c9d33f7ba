"""
Handle-keyed, insertion-ordered product collection.

Iterating a collection yields products, not handles; use ``keys()`` or
``items()`` for handles. Both the parser and the exporter rely on insertion
order: it is the order products are written back out.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .product import Product


class ProductCollection:
    """Ordered mapping of handle -> Product."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: Dict[str, Product] = {}
        # Set by the parser when schema detection was requested
        self.schema = None
        for product in products or ():
            self.add(product)

    def add(self, product: Product) -> Product:
        """Insert or replace a product under its own handle."""
        self._products[product.handle] = product
        return product

    def get(self, handle: str, default: Optional[Product] = None) -> Optional[Product]:
        return self._products.get(handle, default)

    def pop(self, handle: str, *default):
        return self._products.pop(handle, *default)

    def keys(self) -> List[str]:
        return list(self._products.keys())

    def values(self) -> List[Product]:
        return list(self._products.values())

    def items(self) -> List[Tuple[str, Product]]:
        return list(self._products.items())

    def __getitem__(self, handle: str) -> Product:
        return self._products[handle]

    def __setitem__(self, handle: str, product: Product) -> None:
        if product.handle != handle:
            raise ValueError(
                f'Cannot store product "{product.handle}" under handle "{handle}"'
            )
        self._products[handle] = product

    def __delitem__(self, handle: str) -> None:
        del self._products[handle]

    def __contains__(self, handle: object) -> bool:
        return handle in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        # Iterate a snapshot so products can be deleted inside the loop
        return iter(list(self._products.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductCollection):
            return NotImplemented
        return list(self._products.items()) == list(other._products.items())

    def __repr__(self) -> str:
        return f"ProductCollection({self.keys()!r})"
