# Common utilities
from .config_loader import (
    get_core_fields,
    get_product_template,
    get_standard_fields,
    load_config,
    load_schema_config,
)
from .csv_utils import (
    configure_csv,
    csv_headers_from_string,
    read_csv_file,
    read_csv_headers,
    rows_to_csv,
    tokenize_csv,
    write_text_file,
)
from .errors import (
    CSVProcessingError,
    InputAccessError,
    MalformedInputError,
    OutputAccessError,
    SchemaViolationError,
    SerializationError,
)
from .log_config import setup_logging
