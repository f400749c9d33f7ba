"""Tests for shopify_csv/shopify/schema_detector.py"""

import re

import pytest

from shopify_csv.common.csv_utils import read_csv_headers
from shopify_csv.shopify.schema_detector import (
    SchemaDetectionOptions,
    SchemaDetector,
    detect_schema,
)


@pytest.fixture
def headers(products_csv_path):
    return read_csv_headers(products_csv_path)


class TestDetectSchema:
    def test_buckets(self, headers):
        schema = detect_schema(headers)
        assert schema.core_fields == [
            "Handle", "Title", "Body (HTML)", "Vendor", "Type", "Tags", "Published",
        ]
        assert schema.variant_fields == [
            "Variant SKU", "Variant Price", "Variant Compare At Price",
            "Variant Inventory Qty", "Variant Image",
        ]
        assert schema.google_shopping_fields == ["Google Shopping / Gender"]
        assert schema.market_pricing_fields == ["Price / Canada"]
        assert schema.metafield_columns == [
            "Metafield: custom.features[list.single_line_text_field]",
            "Fabric (product.metafields.custom.fabric)",
        ]
        assert schema.custom_fields == ["Cost per item", "Status", "Internal Notes"]

    def test_option_columns_are_standard(self, headers):
        schema = detect_schema(headers)
        assert "Option1 Linked To" in schema.standard_fields
        assert "Option2 Value" in schema.standard_fields
        assert "Image Src" in schema.standard_fields

    def test_every_header_in_exactly_one_bucket(self, headers):
        schema = detect_schema(headers)
        counts = schema.counts()
        total = counts.pop("total_columns")
        assert total == len(headers) == 30
        assert sum(counts.values()) == total

    def test_summary(self, headers):
        summary = detect_schema(headers).summary()
        assert "total_columns=30" in summary
        assert "metafield_columns=2" in summary

    def test_empty_headers(self):
        schema = detect_schema([])
        assert schema.total_columns == 0
        assert schema.custom_fields == []


class TestClassificationOrder:
    @pytest.fixture
    def detector(self):
        return SchemaDetector()

    def test_metafield_checked_before_variant_prefix(self, detector):
        assert detector.classify("Variant Color (product.metafields.custom.color)") == "metafield_columns"

    def test_google_shopping_spacing(self, detector):
        assert detector.classify("Google Shopping/Condition") == "google_shopping_fields"

    @pytest.mark.parametrize("header", [
        "Price / United States",
        "Compare At Price / Germany",
        "Included / Canada",
    ])
    def test_market_pricing(self, detector, header):
        assert detector.classify(header) == "market_pricing_fields"

    def test_unknown_header_is_custom(self, detector):
        assert detector.classify("Warehouse Bin") == "custom_fields"

    def test_variant_requires_space(self, detector):
        assert detector.classify("Variants") == "custom_fields"


class TestDetectionOptions:
    def test_disabled_rules_fall_through_to_custom(self, headers):
        options = SchemaDetectionOptions(
            detect_market_pricing=False,
            detect_google_shopping=False,
            detect_variant_fields=False,
        )
        schema = detect_schema(headers, options)
        assert schema.market_pricing_fields == []
        assert schema.google_shopping_fields == []
        assert schema.variant_fields == []
        assert "Price / Canada" in schema.custom_fields
        assert "Variant SKU" in schema.custom_fields

    def test_custom_patterns_mark_custom_fields(self, headers):
        options = SchemaDetectionOptions(custom_patterns=["^Internal", re.compile("per item$")])
        schema = detect_schema(headers, options)
        assert schema.pattern_matched_fields == ["Cost per item", "Internal Notes"]
        assert schema.custom_fields == ["Cost per item", "Status", "Internal Notes"]

    def test_custom_vocabulary(self):
        detector = SchemaDetector(config={"core_fields": ["SKU"], "standard_fields": []})
        assert detector.classify("SKU") == "core_fields"
        assert detector.classify("Handle") == "custom_fields"
