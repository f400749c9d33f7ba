"""
Command line interface for the Shopify product CSV toolkit.

Usage:
    shopify-csv analyze products.csv
    shopify-csv analyze products.csv --typed-dict --name StoreRow
    shopify-csv analyze products.csv --json-schema
    shopify-csv normalize products.csv output/products_clean.csv
    shopify-csv stats products.csv
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .common.errors import CSVProcessingError
from .common.log_config import setup_logging
from .operations import get_available_markets, get_collection_stats
from .shopify import SchemaDetectionOptions, analyze_csv, parse_csv, write_csv
from .shopify.schema_generator import DEFAULT_SCHEMA_NAME

logger = logging.getLogger(__name__)

SCHEMA_BUCKETS = (
    ('Core fields', 'core_fields'),
    ('Standard fields', 'standard_fields'),
    ('Google Shopping fields', 'google_shopping_fields'),
    ('Variant fields', 'variant_fields'),
    ('Market pricing fields', 'market_pricing_fields'),
    ('Metafield columns', 'metafield_columns'),
    ('Custom fields', 'custom_fields'),
)


def _print_banner(title: str) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)


def cmd_analyze(args: argparse.Namespace) -> int:
    analysis = analyze_csv(args.path, name=args.name)

    if args.typed_dict:
        print(analysis.typed_dict, end='')
        return 0
    if args.json_schema:
        print(json.dumps(analysis.json_schema, indent=2, ensure_ascii=False))
        return 0

    schema = analysis.detected_schema
    _print_banner(f"Schema: {args.path}")
    print(f"  Total columns: {schema.total_columns}")
    for label, attribute in SCHEMA_BUCKETS:
        fields = getattr(schema, attribute)
        print(f"  {label}: {len(fields)}")
        for field_name in fields:
            print(f"    - {field_name}")
    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    products = parse_csv(args.input, SchemaDetectionOptions())
    write_csv(args.output, products)

    print(f"  Input:    {args.input}")
    print(f"  Output:   {args.output}")
    print(f"  Products: {len(products)}")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    products = parse_csv(args.path)
    stats = get_collection_stats(products)

    _print_banner(f"Stats: {args.path}")
    print(f"  Products: {stats.total_products}")
    print(f"  Variants: {stats.total_variants}")
    print(f"  Images:   {stats.total_images}")
    print(f"  Avg variants per product: {stats.avg_variants_per_product:.2f}")
    print(f"  Avg images per product:   {stats.avg_images_per_product:.2f}")

    markets = get_available_markets(products)
    if markets:
        print(f"  Markets: {', '.join(markets)}")

    for label, counts in (('Types', stats.product_types), ('Vendors', stats.vendors)):
        print(f"  {label}:")
        for name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            print(f"    {name}: {count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopify-csv",
        description="Inspect, normalize and summarize Shopify product CSV files"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Detect the CSV schema from its headers")
    analyze.add_argument("path", help="CSV file path")
    output = analyze.add_mutually_exclusive_group()
    output.add_argument(
        "--typed-dict",
        action="store_true",
        help="Print a Python TypedDict definition for the rows"
    )
    output.add_argument(
        "--json-schema",
        action="store_true",
        help="Print a JSON Schema for the rows"
    )
    analyze.add_argument(
        "--name",
        default=DEFAULT_SCHEMA_NAME,
        help=f"Name of the generated type (default: {DEFAULT_SCHEMA_NAME})"
    )
    analyze.set_defaults(func=cmd_analyze)

    normalize = subparsers.add_parser("normalize", help="Parse a CSV and write it back out")
    normalize.add_argument("input", help="Input CSV file path")
    normalize.add_argument("output", help="Output CSV file path")
    normalize.set_defaults(func=cmd_normalize)

    stats = subparsers.add_parser("stats", help="Print collection statistics")
    stats.add_argument("path", help="CSV file path")
    stats.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        return args.func(args)
    except (CSVProcessingError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
