"""
Configuration Loader

Loads the YAML configuration that describes the Shopify CSV vocabulary:
core and standard column names used by schema detection, and the default
column template for newly created products.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml

SCHEMA_CONFIG = 'schema.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Packaged config first
    module_dir = Path(__file__).parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'schema.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_schema_config() -> Dict[str, Any]:
    """Load the column vocabulary configuration."""
    return load_config(SCHEMA_CONFIG)


def get_core_fields(config: Dict[str, Any] = None) -> List[str]:
    """
    Get the required core product columns.

    Args:
        config: Schema config dict (if None, loads from config)

    Returns:
        Column names in their canonical order

    Example:
        ['Handle', 'Title', 'Body (HTML)', 'Vendor', 'Type', 'Tags', 'Published']
    """
    if config is None:
        config = load_schema_config()
    return list(config.get('core_fields', []))


def get_standard_fields(config: Dict[str, Any] = None) -> List[str]:
    """
    Get the known optional product columns that are not option slots.

    Args:
        config: Schema config dict (if None, loads from config)

    Returns:
        Column names, e.g. ['Product Category', 'Image Src', ...]
    """
    if config is None:
        config = load_schema_config()
    return list(config.get('standard_fields', []))


def get_product_template(config: Dict[str, Any] = None) -> Dict[str, str]:
    """
    Get the default columns of a newly created product.

    Args:
        config: Schema config dict (if None, loads from config)

    Returns:
        Ordered mapping of column name to default value. Values are
        coerced to strings, so YAML booleans are never leaked.
    """
    if config is None:
        config = load_schema_config()
    template = config.get('product_template', {}) or {}
    return {column: '' if value is None else str(value) for column, value in template.items()}
