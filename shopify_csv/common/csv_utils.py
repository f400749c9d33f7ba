"""
CSV Utilities

Thin wrappers around the csv module for reading and writing Shopify CSV text.
Handles large field sizes, byte-order marks and maps I/O and tokenizer
failures onto the library's error types.
"""

import csv
import io
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from .errors import (
    InputAccessError,
    MalformedInputError,
    OutputAccessError,
    SerializationError,
)

logger = logging.getLogger(__name__)

BOM = '\ufeff'


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields.

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def read_csv_file(file_path: str | Path, encoding: str = 'utf-8-sig') -> str:
    """
    Read a CSV file into text.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8 with optional BOM)

    Returns:
        File contents

    Raises:
        InputAccessError: If the file cannot be opened or read
        MalformedInputError: If the bytes are not valid for the encoding
    """
    try:
        with open(file_path, 'r', encoding=encoding, newline='') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Failed to decode {file_path}: {e}") from e
    except OSError as e:
        raise InputAccessError(f"Failed to read file at {file_path}: {e}") from e


def tokenize_csv(text: str) -> Tuple[List[str], List[Dict[str, str]]]:
    """
    Split CSV text into a header list and string-keyed rows.

    Short rows are padded with empty strings and cells beyond the header are
    dropped. Blank lines are skipped.

    Args:
        text: Full CSV content, header row first

    Returns:
        Tuple of (fieldnames, rows). Both are empty for empty input.

    Raises:
        MalformedInputError: If the tokenizer rejects the input
    """
    configure_csv()

    if text.startswith(BOM):
        text = text[len(BOM):]

    reader = csv.DictReader(io.StringIO(text, newline=''), restval='', strict=True)
    rows = []
    dropped = 0
    try:
        fieldnames = list(reader.fieldnames or [])
        for row in reader:
            extra = row.pop(None, None)
            if extra:
                dropped += 1
            rows.append(row)
    except csv.Error as e:
        raise MalformedInputError(f"CSV parsing failed: {e}") from e

    if dropped:
        logger.debug("Dropped trailing cells beyond the header on %d rows", dropped)

    return fieldnames, rows


def csv_headers_from_string(text: str) -> List[str]:
    """
    Extract the header row from CSV text without reading the data rows.

    Args:
        text: CSV content

    Returns:
        Column names, or an empty list for empty input
    """
    if text.startswith(BOM):
        text = text[len(BOM):]

    reader = csv.reader(io.StringIO(text, newline=''), strict=True)
    try:
        return next(reader, [])
    except csv.Error as e:
        raise MalformedInputError(f"CSV header parsing failed: {e}") from e


def read_csv_headers(file_path: str | Path) -> List[str]:
    """
    Read only the header row of a CSV file.

    Args:
        file_path: Path to CSV file

    Returns:
        Column names
    """
    try:
        with open(file_path, 'r', encoding='utf-8-sig', newline='') as f:
            reader = csv.reader(f, strict=True)
            return next(reader, [])
    except csv.Error as e:
        raise MalformedInputError(f"CSV header parsing failed: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Failed to decode {file_path}: {e}") from e
    except OSError as e:
        raise InputAccessError(f"Failed to read file at {file_path}: {e}") from e


def rows_to_csv(rows: Iterable[Dict[str, str]], fieldnames: List[str]) -> str:
    """
    Render rows as CSV text with a header row.

    Args:
        rows: Dictionaries keyed by column name
        fieldnames: Column order

    Returns:
        CSV text

    Raises:
        SerializationError: If the writer rejects a row
    """
    buffer = io.StringIO()
    try:
        writer = csv.DictWriter(buffer, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)
    except (csv.Error, ValueError) as e:
        raise SerializationError(f"CSV stringification failed: {e}") from e
    return buffer.getvalue()


def write_text_file(file_path: str | Path, text: str, encoding: str = 'utf-8') -> None:
    """
    Write text to a file, creating the parent directory if needed.

    Raises:
        OutputAccessError: If the file cannot be written
    """
    try:
        os.makedirs(os.path.dirname(str(file_path)) or '.', exist_ok=True)
        with open(file_path, 'w', encoding=encoding, newline='') as f:
            f.write(text)
    except OSError as e:
        raise OutputAccessError(f"Failed to write CSV to {file_path}: {e}") from e


# Initialize CSV configuration on module import
configure_csv()
