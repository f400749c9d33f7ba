"""Tests for shopify_csv/cli.py"""

import json

import pytest

from shopify_csv.cli import main
from shopify_csv.shopify.csv_parser import parse_csv


class TestAnalyze:
    def test_schema_report(self, products_csv_path, capsys):
        assert main(["analyze", str(products_csv_path)]) == 0
        out = capsys.readouterr().out
        assert "Total columns: 30" in out
        assert "Metafield columns: 2" in out
        assert "    - Price / Canada" in out

    def test_typed_dict(self, products_csv_path, capsys):
        assert main(["analyze", str(products_csv_path), "--typed-dict", "--name", "StoreRow"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("from typing import NotRequired, TypedDict")
        assert "StoreRow = TypedDict(" in out

    def test_json_schema(self, products_csv_path, capsys):
        assert main(["analyze", str(products_csv_path), "--json-schema"]) == 0
        schema = json.loads(capsys.readouterr().out)
        assert schema["title"] == "CustomCSVSchema"
        assert "Internal Notes" in schema["properties"]

    def test_output_flags_are_exclusive(self, products_csv_path):
        with pytest.raises(SystemExit):
            main(["analyze", str(products_csv_path), "--typed-dict", "--json-schema"])

    def test_invalid_name(self, products_csv_path, capsys):
        assert main(["analyze", str(products_csv_path), "--typed-dict", "--name", "bad name"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestNormalize:
    def test_round_trips_file(self, products_csv_path, products, tmp_path, capsys):
        output_path = tmp_path / "out" / "products.csv"
        assert main(["--quiet", "normalize", str(products_csv_path), str(output_path)]) == 0
        assert parse_csv(output_path) == products
        assert "Products: 3" in capsys.readouterr().out

    def test_missing_handle_column(self, tmp_path, capsys):
        input_path = tmp_path / "bad.csv"
        input_path.write_text("Title,Vendor\nTee,Acme\n", encoding="utf-8")
        assert main(["normalize", str(input_path), str(tmp_path / "out.csv")]) == 1
        assert "Missing required columns" in capsys.readouterr().err
        assert not (tmp_path / "out.csv").exists()


class TestStats:
    def test_stats_output(self, products_csv_path, capsys):
        assert main(["stats", str(products_csv_path)]) == 0
        out = capsys.readouterr().out
        assert "Products: 3" in out
        assert "Variants: 4" in out
        assert "Images:   5" in out
        assert "Markets: Canada" in out
        assert "    Acme: 2" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["stats", str(tmp_path / "missing.csv")]) == 1
        assert "Error: Failed to read file" in capsys.readouterr().err


class TestArguments:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
