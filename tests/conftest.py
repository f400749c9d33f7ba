"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

from shopify_csv.shopify.csv_parser import parse_csv

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() calls made by a test."""
    yield
    logger = logging.getLogger("shopify_csv")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def products_csv_path():
    """Path to a small Shopify export: a 3-variant tee, a mug and a gift card."""
    return FIXTURES_DIR / "products.csv"


@pytest.fixture
def products_csv_text(products_csv_path):
    return products_csv_path.read_text(encoding="utf-8")


@pytest.fixture
def products(products_csv_path):
    """Parsed products.csv fixture."""
    return parse_csv(products_csv_path)


@pytest.fixture
def shirt_rows():
    """Two rows of a shirt with a single Size option."""
    return [
        {
            "Handle": "shirt",
            "Title": "Shirt",
            "Option1 Name": "Size",
            "Option1 Value": "S",
            "Variant SKU": "S-1",
        },
        {
            "Handle": "shirt",
            "Option1 Value": "M",
            "Variant SKU": "S-2",
        },
    ]


@pytest.fixture
def metafield_csv_text():
    """Both metafield header syntaxes for the same namespace and key."""
    return (
        "Handle,Title,Metafield: custom.colors[list.color],Colors (product.metafields.custom.colors)\n"
        'mug,Mug,"red, blue,  blue",green\n'
    )
