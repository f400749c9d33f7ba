"""Tests for shopify_csv/common/csv_utils.py"""

import pytest

from shopify_csv.common.csv_utils import (
    csv_headers_from_string,
    read_csv_file,
    read_csv_headers,
    rows_to_csv,
    tokenize_csv,
    write_text_file,
)
from shopify_csv.common.errors import (
    InputAccessError,
    MalformedInputError,
    OutputAccessError,
    SerializationError,
)


class TestTokenizeCSV:
    def test_header_and_rows(self):
        fieldnames, rows = tokenize_csv("Handle,Title\nmug,Mug\n")
        assert fieldnames == ["Handle", "Title"]
        assert rows == [{"Handle": "mug", "Title": "Mug"}]

    def test_short_rows_padded(self):
        _, rows = tokenize_csv("Handle,Title,Vendor\nmug\n")
        assert rows == [{"Handle": "mug", "Title": "", "Vendor": ""}]

    def test_extra_cells_dropped(self):
        _, rows = tokenize_csv("Handle,Title\nmug,Mug,extra\n")
        assert rows == [{"Handle": "mug", "Title": "Mug"}]

    def test_quoted_newlines(self):
        _, rows = tokenize_csv('Handle,Body (HTML)\nmug,"<p>a</p>\n<p>b</p>"\n')
        assert rows[0]["Body (HTML)"] == "<p>a</p>\n<p>b</p>"

    def test_bom_stripped(self):
        fieldnames, _ = tokenize_csv("\ufeffHandle,Title\n")
        assert fieldnames == ["Handle", "Title"]

    def test_empty_text(self):
        assert tokenize_csv("") == ([], [])

    def test_malformed_quoting(self):
        with pytest.raises(MalformedInputError) as excinfo:
            tokenize_csv('Handle\n"mug"x\n')
        assert excinfo.value.kind == "malformed_input"


class TestHeaders:
    def test_headers_from_string(self):
        assert csv_headers_from_string("\ufeffHandle,Title\nmug,Mug\n") == ["Handle", "Title"]

    def test_headers_from_empty_string(self):
        assert csv_headers_from_string("") == []

    def test_read_headers(self, products_csv_path):
        headers = read_csv_headers(products_csv_path)
        assert headers[0] == "Handle"
        assert headers[-1] == "Internal Notes"

    def test_read_headers_missing_file(self, tmp_path):
        with pytest.raises(InputAccessError):
            read_csv_headers(tmp_path / "missing.csv")


class TestReadCSVFile:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "a.csv"
        path.write_text("Handle\nчаша\n", encoding="utf-8")
        assert read_csv_file(path) == "Handle\nчаша\n"

    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes(b"Handle\n\xff\xfe\xfa\n")
        with pytest.raises(MalformedInputError):
            read_csv_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputAccessError) as excinfo:
            read_csv_file(tmp_path / "missing.csv")
        assert excinfo.value.kind == "input_access"


class TestRowsToCSV:
    def test_writes_header_and_rows(self):
        text = rows_to_csv([{"Handle": "mug", "Title": "Mug, Enamel"}], ["Handle", "Title"])
        assert text == 'Handle,Title\r\nmug,"Mug, Enamel"\r\n'

    def test_unknown_key_rejected(self):
        with pytest.raises(SerializationError):
            rows_to_csv([{"Handle": "mug", "Other": "x"}], ["Handle"])


class TestWriteTextFile:
    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "out.csv"
        write_text_file(path, "Handle\r\nmug\r\n")
        assert path.read_bytes() == b"Handle\r\nmug\r\n"

    def test_directory_target(self, tmp_path):
        with pytest.raises(OutputAccessError):
            write_text_file(tmp_path, "x")
