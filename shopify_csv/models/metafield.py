"""
Metafield column recognition and live metafield views.

Shopify encodes metafields as specially formatted column headers:

    Metafield: <namespace>.<key>[<type>]
    <Label> (product.metafields.<namespace>.<key>)

A Metafield view keeps a reference to the row dictionary that owns the
column, so reads always reflect the row's current value and writes go
straight back into the row (and therefore into any later serialization).
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

# "Metafield: my_fields.fabric[string]" -> namespace, key, type
METAFIELD_PATTERN = re.compile(r'Metafield: (.*?)\.(.*?)\[(.*)\]')

# "Fabric (product.metafields.my_fields.fabric)" -> label, namespace, key
METAFIELD_PARENTHESES_PATTERN = re.compile(
    r'(.+?)\s*\((?:product\.)?metafields\.([^.]+)\.(.+)\)'
)

# Type assumed for the parentheses syntax, which carries no type tag
DEFAULT_METAFIELD_TYPE = 'single_line_text_field'

LIST_TYPE_PREFIX = 'list.'

MetafieldValue = Union[str, List[str]]


@dataclass(frozen=True)
class MetafieldHeader:
    """Everything a metafield column header encodes."""
    column: str
    namespace: str
    key: str
    type: str
    label: str = ""

    @property
    def is_list(self) -> bool:
        return self.type.startswith(LIST_TYPE_PREFIX)

    @property
    def full_key(self) -> str:
        return f"{self.namespace}.{self.key}"


def parse_metafield_header(header: str) -> Optional[MetafieldHeader]:
    """
    Decode a column header as a metafield.

    Args:
        header: Column header

    Returns:
        MetafieldHeader, or None if the header is not a metafield column
    """
    match = METAFIELD_PATTERN.fullmatch(header)
    if match:
        namespace, key, type_ = match.groups()
        return MetafieldHeader(column=header, namespace=namespace, key=key, type=type_)

    match = METAFIELD_PARENTHESES_PATTERN.fullmatch(header)
    if match:
        label, namespace, key = match.groups()
        return MetafieldHeader(
            column=header,
            namespace=namespace,
            key=key,
            type=DEFAULT_METAFIELD_TYPE,
            label=label,
        )

    return None


def is_metafield_header(header: str) -> bool:
    return parse_metafield_header(header) is not None


def build_metafield_header(namespace: str, key: str, type_: str) -> str:
    """Build a "Metafield: namespace.key[type]" column header."""
    return f"Metafield: {namespace}.{key}[{type_}]"


def format_metafield_value(value: Union[str, Sequence[str]]) -> str:
    """Render a metafield value as a cell: sequences are joined with ','."""
    if isinstance(value, str):
        return value
    return ','.join(value)


class Metafield:
    """
    Live view of one metafield column on a row.

    ``value`` is the raw cell. ``parsed_value`` splits list types into a list
    of stripped, non-empty strings; assigning to it writes the cell back.
    """

    __slots__ = ('_header', '_row')

    def __init__(self, header: MetafieldHeader, row: Dict[str, str]):
        self._header = header
        self._row = row

    @property
    def namespace(self) -> str:
        return self._header.namespace

    @property
    def key(self) -> str:
        return self._header.key

    @property
    def type(self) -> str:
        return self._header.type

    @property
    def is_list(self) -> bool:
        return self._header.is_list

    @property
    def column(self) -> str:
        return self._header.column

    @property
    def full_key(self) -> str:
        return self._header.full_key

    @property
    def value(self) -> str:
        return self._row.get(self._header.column) or ''

    @property
    def parsed_value(self) -> MetafieldValue:
        raw = self.value
        if self.is_list:
            return [part.strip() for part in raw.split(',') if part.strip()]
        return raw

    @parsed_value.setter
    def parsed_value(self, new_value: Union[str, Sequence[str]]) -> None:
        self._row[self._header.column] = format_metafield_value(new_value)

    def __repr__(self) -> str:
        return (
            f"Metafield(namespace={self.namespace!r}, key={self.key!r}, "
            f"is_list={self.is_list}, value={self.value!r})"
        )


def bind_metafield(row: Dict[str, str], header: str) -> Optional[Metafield]:
    """Bind a view to ``row[header]`` if the header is a metafield column."""
    parsed = parse_metafield_header(header)
    if parsed is None:
        return None
    return Metafield(parsed, row)


def bind_metafields(row: Dict[str, str]) -> Dict[str, Metafield]:
    """
    Bind views for every metafield column of a row.

    Args:
        row: Row dictionary that owns the cells

    Returns:
        Mapping of "namespace.key" to Metafield in column order. If two
        columns decode to the same namespace and key, the later column wins.
    """
    metafields: Dict[str, Metafield] = {}
    for column in row:
        metafield = bind_metafield(row, column)
        if metafield is not None:
            metafields[metafield.full_key] = metafield
    return metafields
