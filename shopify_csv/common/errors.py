"""
Error types raised while reading, parsing, serializing and writing CSV files.

Every error derives from CSVProcessingError so callers can catch one type and
still tell failures apart through the ``kind`` tag or the subclass.
"""


class CSVProcessingError(Exception):
    """Base error for CSV processing failures."""

    kind = "csv_processing"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InputAccessError(CSVProcessingError):
    """The source file could not be read."""

    kind = "input_access"


class MalformedInputError(CSVProcessingError):
    """The CSV tokenizer rejected the input (bad quoting, undecodable bytes)."""

    kind = "malformed_input"


class SchemaViolationError(CSVProcessingError):
    """A required column is missing from the header row."""

    kind = "schema_violation"


class SerializationError(CSVProcessingError):
    """The CSV writer rejected the rows produced from the collection."""

    kind = "serialization"


class OutputAccessError(CSVProcessingError):
    """The destination file could not be written."""

    kind = "output_access"
