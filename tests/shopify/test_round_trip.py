"""Parse -> serialize -> parse tests across csv_parser and csv_exporter."""

from shopify_csv.shopify.csv_exporter import stringify_csv, write_csv
from shopify_csv.shopify.csv_parser import aggregate_rows, parse_csv, parse_csv_string


class TestRoundTrip:
    def test_fixture_round_trip(self, products):
        reparsed = parse_csv_string(stringify_csv(products))
        assert reparsed == products
        assert reparsed.keys() == products.keys()

    def test_row_count_preserved(self, products, products_csv_text):
        original_rows = products_csv_text.strip().splitlines()
        output_rows = stringify_csv(products).strip().splitlines()
        assert len(output_rows) == len(original_rows)

    def test_header_order_preserved(self, products, products_csv_text):
        assert stringify_csv(products).splitlines()[0] == products_csv_text.splitlines()[0]

    def test_shirt_round_trip(self, shirt_rows):
        products = aggregate_rows(shirt_rows)
        assert parse_csv_string(stringify_csv(products)) == products

    def test_file_round_trip(self, products, tmp_path):
        output_path = tmp_path / "products.csv"
        write_csv(output_path, products)
        assert parse_csv(output_path) == products

    def test_second_pass_is_stable(self, products):
        first = stringify_csv(products)
        second = stringify_csv(parse_csv_string(first))
        assert first == second


class TestEditsSurviveRoundTrip:
    def test_metafield_list_edit(self, products):
        products["classic-tee"].metadata["custom.features"].parsed_value = ["a", "b"]
        reparsed = parse_csv_string(stringify_csv(products))
        column = "Metafield: custom.features[list.single_line_text_field]"
        assert reparsed["classic-tee"].data[column] == "a,b"
        assert reparsed["classic-tee"].metadata["custom.features"].parsed_value == ["a", "b"]

    def test_dual_syntax_columns_stay_independent(self, metafield_csv_text):
        products = parse_csv_string(metafield_csv_text)
        mug = products["mug"]
        bracket = "Metafield: custom.colors[list.color]"
        parentheses = "Colors (product.metafields.custom.colors)"

        assert mug.data[bracket] == "red, blue,  blue"
        mug.data[bracket] = "black"

        reparsed = parse_csv_string(stringify_csv(products))["mug"]
        assert reparsed.data[bracket] == "black"
        assert reparsed.data[parentheses] == "green"

    def test_deleted_product_not_written(self, products):
        del products["enamel-mug"]
        reparsed = parse_csv_string(stringify_csv(products))
        assert reparsed.keys() == ["classic-tee", "gift-card"]


class TestImagePlacementRoundTrip:
    def test_first_row_without_image(self, shirt_rows):
        shirt_rows[1].update({"Image Src": "http://x/a.jpg", "Image Position": "1"})
        products = aggregate_rows(shirt_rows)
        assert products["shirt"].data["Image Src"] == ""

        reparsed = parse_csv_string(stringify_csv(products))
        assert reparsed["shirt"].data["Image Src"] == ""
        assert [image.src for image in reparsed["shirt"].images] == ["http://x/a.jpg"]
        assert reparsed == products

    def test_simple_product_image_on_later_row(self):
        products = aggregate_rows([
            {"Handle": "poster", "Title": "Poster", "Image Src": ""},
            {"Handle": "poster", "Image Src": "http://x/poster.jpg", "Image Alt Text": "Poster"},
        ])
        reparsed = parse_csv_string(stringify_csv(products))
        assert reparsed == products
        assert reparsed["poster"].images[0].alt == "Poster"

    def test_variant_image_on_later_row(self, shirt_rows):
        shirt_rows[1].update({"Variant Image": "http://x/m.jpg", "Image Src": "http://x/m.jpg"})
        products = aggregate_rows(shirt_rows)
        text = stringify_csv(products)

        assert len(text.strip().splitlines()) == 3
        assert parse_csv_string(text) == products

    def test_reordered_images_keep_new_order(self, products):
        tee = products["classic-tee"]
        tee.images.reverse()

        reparsed = parse_csv_string(stringify_csv(products))["classic-tee"]
        assert reparsed.images == tee.images
        assert reparsed.data["Image Src"] == "https://cdn.example.com/tee-back.jpg"
        assert reparsed.variants == tee.variants
