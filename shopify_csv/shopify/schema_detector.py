"""
Shopify CSV Schema Detection

Buckets column headers into core, standard, variant, Google Shopping,
market pricing, metafield and custom fields. Exports differ by market,
metafield set and enabled optional columns, so detection is heuristic and
purely diagnostic: it never changes how rows are parsed, and unrecognized
headers always land in the custom bucket.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Pattern, Sequence, Union

from ..common.config_loader import get_core_fields, get_standard_fields, load_schema_config
from ..models.metafield import is_metafield_header

logger = logging.getLogger(__name__)

VARIANT_FIELD_PATTERN = re.compile(r'^Variant\s')
GOOGLE_SHOPPING_PATTERN = re.compile(r'^Google Shopping\s*/\s*')
MARKET_PRICING_PATTERN = re.compile(r'^(Price|Compare At Price|Included)\s*/\s*.+$')
OPTION_FIELD_PATTERN = re.compile(r'^Option[123]\s+(Name|Value|Linked To)$')


@dataclass
class SchemaDetectionOptions:
    """Switches for the optional detection rules."""
    detect_market_pricing: bool = True
    detect_google_shopping: bool = True
    detect_variant_fields: bool = True
    custom_patterns: Sequence[Union[str, Pattern]] = ()


@dataclass
class DetectedSchema:
    """Result of schema detection, one list per bucket in header order."""
    core_fields: List[str] = field(default_factory=list)
    standard_fields: List[str] = field(default_factory=list)
    google_shopping_fields: List[str] = field(default_factory=list)
    variant_fields: List[str] = field(default_factory=list)
    market_pricing_fields: List[str] = field(default_factory=list)
    metafield_columns: List[str] = field(default_factory=list)
    custom_fields: List[str] = field(default_factory=list)
    # Custom fields that matched a caller-supplied pattern (subset of custom_fields)
    pattern_matched_fields: List[str] = field(default_factory=list)
    all_columns: List[str] = field(default_factory=list)

    @property
    def total_columns(self) -> int:
        return len(self.all_columns)

    def counts(self) -> Dict[str, int]:
        return {
            'total_columns': self.total_columns,
            'core_fields': len(self.core_fields),
            'standard_fields': len(self.standard_fields),
            'google_shopping_fields': len(self.google_shopping_fields),
            'variant_fields': len(self.variant_fields),
            'market_pricing_fields': len(self.market_pricing_fields),
            'metafield_columns': len(self.metafield_columns),
            'custom_fields': len(self.custom_fields),
        }

    def summary(self) -> str:
        return ', '.join(f"{name}={count}" for name, count in self.counts().items())


class SchemaDetector:
    """
    Classifies headers using ordered rules.

    Usage:
        detector = SchemaDetector(SchemaDetectionOptions(detect_market_pricing=False))
        schema = detector.detect(headers)
    """

    def __init__(self, options: Optional[SchemaDetectionOptions] = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the detector.

        Args:
            options: Detection switches (default: everything enabled)
            config: Schema vocabulary (if None, loads schema.yaml)
        """
        self.options = options or SchemaDetectionOptions()
        if config is None:
            config = load_schema_config()
        self.core_field_names = set(get_core_fields(config))
        self.standard_field_names = set(get_standard_fields(config))
        self.custom_patterns = [
            re.compile(pattern) if isinstance(pattern, str) else pattern
            for pattern in self.options.custom_patterns
        ]

    def classify(self, header: str) -> str:
        """
        Return the bucket name for a single header.

        Metafield syntax is checked first so that a metafield column is never
        reclassified by a later prefix rule.
        """
        options = self.options

        if is_metafield_header(header):
            return 'metafield_columns'

        if header in self.core_field_names:
            return 'core_fields'

        if options.detect_google_shopping and GOOGLE_SHOPPING_PATTERN.search(header):
            return 'google_shopping_fields'

        if options.detect_variant_fields and VARIANT_FIELD_PATTERN.search(header):
            return 'variant_fields'

        if options.detect_market_pricing and MARKET_PRICING_PATTERN.search(header):
            return 'market_pricing_fields'

        if OPTION_FIELD_PATTERN.search(header) or header in self.standard_field_names:
            return 'standard_fields'

        return 'custom_fields'

    def matches_custom_pattern(self, header: str) -> bool:
        return any(pattern.search(header) for pattern in self.custom_patterns)

    def detect(self, headers: Iterable[str]) -> DetectedSchema:
        headers = list(headers)
        schema = DetectedSchema(all_columns=headers)
        for header in headers:
            bucket = self.classify(header)
            getattr(schema, bucket).append(header)
            if bucket == 'custom_fields' and self.matches_custom_pattern(header):
                schema.pattern_matched_fields.append(header)
        return schema


def detect_schema(headers: Iterable[str],
                  options: Optional[SchemaDetectionOptions] = None) -> DetectedSchema:
    """
    Detect the schema of a CSV from its headers.

    Args:
        headers: Column headers in file order
        options: Detection switches

    Returns:
        DetectedSchema with every header in exactly one bucket
    """
    return SchemaDetector(options).detect(headers)


def log_schema(schema: DetectedSchema, source: str) -> None:
    logger.info("Detected CSV schema from %s: %s", source, schema.summary())
