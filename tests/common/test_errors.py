"""Tests for shopify_csv/common/errors.py"""

import pytest

from shopify_csv.common.errors import (
    CSVProcessingError,
    InputAccessError,
    MalformedInputError,
    OutputAccessError,
    SchemaViolationError,
    SerializationError,
)


@pytest.mark.parametrize("error_type, kind", [
    (InputAccessError, "input_access"),
    (MalformedInputError, "malformed_input"),
    (SchemaViolationError, "schema_violation"),
    (SerializationError, "serialization"),
    (OutputAccessError, "output_access"),
])
def test_kind_and_base_class(error_type, kind):
    error = error_type("boom")
    assert isinstance(error, CSVProcessingError)
    assert error.kind == kind
    assert error.message == "boom"
    assert str(error) == "boom"


def test_catch_all_with_base_class():
    with pytest.raises(CSVProcessingError):
        raise SchemaViolationError("Missing Handle")
