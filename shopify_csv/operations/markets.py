"""
Market pricing helpers.

Shopify Markets add per-market columns such as "Price / United States",
"Compare At Price / United States" and "Included / United States".
"""

import re
from typing import Dict, List, Optional

from ..models import ProductCollection

MARKET_COLUMN_PATTERNS = {
    'price': re.compile(r'^Price / (.+)$'),
    'compare_at_price': re.compile(r'^Compare At Price / (.+)$'),
    'included': re.compile(r'^Included / (.+)$'),
}

MARKET_COLUMN_PREFIXES = {
    'price': 'Price',
    'compare_at_price': 'Compare At Price',
    'included': 'Included',
}


def extract_market_pricing(row: Dict[str, str]) -> Dict[str, Dict[str, str]]:
    """
    Collect market pricing columns of a row.

    Returns:
        Market name -> {'price', 'compare_at_price', 'included'} for the
        columns present, in column order

    Example:
        >>> extract_market_pricing({'Price / Canada': '25.00'})
        {'Canada': {'price': '25.00'}}
    """
    markets: Dict[str, Dict[str, str]] = {}
    for column, value in row.items():
        for field_name, pattern in MARKET_COLUMN_PATTERNS.items():
            match = pattern.match(column)
            if match:
                markets.setdefault(match.group(1), {})[field_name] = value
                break
    return markets


def set_market_pricing(
    row: Dict[str, str],
    market: str,
    price: Optional[str] = None,
    compare_at_price: Optional[str] = None,
    included: Optional[str] = None,
) -> None:
    """Write the given market pricing columns; None leaves a column untouched."""
    values = {'price': price, 'compare_at_price': compare_at_price, 'included': included}
    for field_name, value in values.items():
        if value is not None:
            row[f"{MARKET_COLUMN_PREFIXES[field_name]} / {market}"] = value


def get_available_markets(collection: ProductCollection) -> List[str]:
    """Sorted names of every market with a pricing column on any product."""
    markets = set()
    for product in collection:
        markets.update(extract_market_pricing(product.data))
    return sorted(markets)
