"""
Schema Generation

Turns detected CSV headers into type definitions: Python TypedDict source
for static checking of row dictionaries, and a JSON Schema document for
runtime validation. Core fields are required, everything else optional.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..common.csv_utils import read_csv_headers
from .schema_detector import DetectedSchema, SchemaDetectionOptions, detect_schema

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_NAME = 'CustomCSVSchema'
JSON_SCHEMA_DIALECT = 'https://json-schema.org/draft/2020-12/schema'


def _ordered_fields(schema: DetectedSchema) -> List[str]:
    """Optional fields in output order: standard, Google, variant, market, metafield, custom."""
    return (
        schema.standard_fields
        + schema.google_shopping_fields
        + schema.variant_fields
        + schema.market_pricing_fields
        + schema.metafield_columns
        + schema.custom_fields
    )


def _check_name(name: str) -> None:
    if not name.isidentifier():
        raise ValueError(f"Schema name must be a valid Python identifier: {name!r}")


def generate_typed_dict(
    headers: Iterable[str],
    name: str = DEFAULT_SCHEMA_NAME,
    options: Optional[SchemaDetectionOptions] = None,
) -> str:
    """
    Generate Python source defining a TypedDict for the CSV's rows.

    Headers such as "Body (HTML)" are not identifiers, so the functional
    TypedDict syntax is used.

    Args:
        headers: Column headers
        name: Name of the generated type
        options: Schema detection switches

    Returns:
        Python source code
    """
    _check_name(name)
    schema = detect_schema(headers, options)

    lines = [
        "from typing import NotRequired, TypedDict",
        "",
        f"{name} = TypedDict(",
        f"    {name!r},",
        "    {",
    ]
    for field_name in schema.core_fields:
        lines.append(f"        {field_name!r}: str,")
    for field_name in _ordered_fields(schema):
        lines.append(f"        {field_name!r}: NotRequired[str],")
    lines.append("    },")
    lines.append(")")

    return "\n".join(lines) + "\n"


def generate_json_schema(
    headers: Iterable[str],
    name: str = DEFAULT_SCHEMA_NAME,
    options: Optional[SchemaDetectionOptions] = None,
) -> Dict[str, Any]:
    """
    Generate a JSON Schema describing one CSV row.

    Args:
        headers: Column headers
        name: Schema title
        options: Schema detection switches

    Returns:
        JSON Schema document as a dictionary
    """
    schema = detect_schema(headers, options)

    properties = {
        field_name: {'type': 'string'}
        for field_name in schema.core_fields + _ordered_fields(schema)
    }

    return {
        '$schema': JSON_SCHEMA_DIALECT,
        'title': name,
        'type': 'object',
        'properties': properties,
        'required': list(schema.core_fields),
        'additionalProperties': {'type': 'string'},
    }


@dataclass
class CSVAnalysis:
    """Headers, detected schema and generated definitions for one file."""
    headers: List[str]
    detected_schema: DetectedSchema
    typed_dict: str
    json_schema: Dict[str, Any]


def analyze_csv(
    path: str | Path,
    name: str = DEFAULT_SCHEMA_NAME,
    options: Optional[SchemaDetectionOptions] = None,
) -> CSVAnalysis:
    """
    Read a CSV's headers and produce its schema report and type definitions.

    Args:
        path: CSV file path
        name: Name used for the generated TypedDict and JSON Schema title
        options: Schema detection switches

    Returns:
        CSVAnalysis
    """
    headers = read_csv_headers(path)
    logger.debug("Read %d headers from %s", len(headers), path)

    return CSVAnalysis(
        headers=headers,
        detected_schema=detect_schema(headers, options),
        typed_dict=generate_typed_dict(headers, name, options),
        json_schema=generate_json_schema(headers, name, options),
    )
