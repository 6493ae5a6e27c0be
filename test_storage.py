import json

import pandas as pd
import pytest

import main
from product_categorizer.categorizer import ProductCategorizer
from product_categorizer.exceptions import CategorizerError, ProductFileError
from product_categorizer.storage import load_products, save_results


def write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_load_products_from_json(tmp_path, sample_products):
    products_file = write_json(tmp_path / "data.json", sample_products)

    assert load_products(str(products_file)) == sample_products


def test_load_products_keeps_missing_titles_as_none(tmp_path):
    products_file = write_json(tmp_path / "data.json", [
        {"title": "Leite Italac Integral", "supermarket": "A"},
        {"title": None, "supermarket": "B"},
    ])

    records = load_products(str(products_file))

    assert records[1]["title"] is None


def test_load_products_from_csv(tmp_path):
    products_file = tmp_path / "data.csv"
    products_file.write_text("title,supermarket\nLeite Italac Integral,A\n,B\n", encoding="utf-8")

    records = load_products(str(products_file))

    assert records == [
        {"title": "Leite Italac Integral", "supermarket": "A"},
        {"title": None, "supermarket": "B"},
    ]


def test_load_products_keeps_json_value_types(tmp_path):
    products_file = write_json(tmp_path / "data.json", [
        {"title": "Leite Italac Integral", "supermarket": 7},
        {"title": "Leite Ninho Integral"},
    ])

    records = load_products(str(products_file))
    categories = ProductCategorizer().categorize(records)

    assert records[0]["supermarket"] == 7
    assert "supermarket" not in records[1]
    assert categories[0].products[0].supermarket == "7"
    assert categories[1].products[0].supermarket == ""


@pytest.mark.parametrize("name, content", [
    ("data.json", "{not json"),
    ("data.json", json.dumps({"title": "Leite Italac Integral"})),
    ("data.csv", "title,supermarket\n\"Leite Italac,A\n"),
])
def test_load_products_malformed_file(tmp_path, name, content):
    products_file = tmp_path / name
    products_file.write_text(content, encoding="utf-8")

    with pytest.raises(ProductFileError) as excinfo:
        load_products(str(products_file))

    assert isinstance(excinfo.value, CategorizerError)


def test_load_products_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_products(str(tmp_path / "missing.json"))


def test_save_results_writes_json_and_summary(tmp_path, sample_products):
    categories = ProductCategorizer().categorize(sample_products)

    paths = save_results(categories, str(tmp_path / "output"), "data")

    saved = json.loads(paths["json"].read_text(encoding="utf-8"))
    assert saved[0] == {
        "category": "Leite Integral Piracanjuba 1L",
        "count": 2,
        "products": [
            {"title": "Leite Integral Piracanjuba 1L", "supermarket": "A"},
            {"title": "piracanjuba leite integral 1l", "supermarket": "B"},
        ],
    }
    assert sum(category["count"] for category in saved) == len(sample_products)

    summary = pd.read_csv(paths["summary"])
    assert len(summary) == len(sample_products)
    assert summary["category_id"].nunique() == len(categories)


def test_save_results_with_no_categories(tmp_path):
    paths = save_results([], str(tmp_path), "empty")

    assert json.loads(paths["json"].read_text(encoding="utf-8")) == []
    assert paths["summary"].exists()


def test_cli_end_to_end(tmp_path, sample_products):
    products_file = write_json(tmp_path / "data.json", sample_products)
    output_dir = tmp_path / "output"

    exit_code = main.main([
        str(products_file),
        "--output-dir", str(output_dir),
        "--logs-dir", str(tmp_path / "logs"),
    ])

    assert exit_code == 0
    saved = json.loads((output_dir / "data_categories.json").read_text(encoding="utf-8"))
    assert len(saved) == 6
    assert (output_dir / "data_category_summary.csv").exists()


def test_cli_fails_on_invalid_product(tmp_path):
    products_file = write_json(tmp_path / "data.json", [{"title": None, "supermarket": "A"}])

    exit_code = main.main([
        str(products_file),
        "--output-dir", str(tmp_path / "output"),
        "--logs-dir", str(tmp_path / "logs"),
    ])

    assert exit_code == 1
    assert not (tmp_path / "output").exists()


def test_cli_skip_invalid(tmp_path):
    products_file = write_json(tmp_path / "data.json", [
        {"title": None, "supermarket": "A"},
        {"title": "Leite Italac Integral", "supermarket": "B"},
    ])

    exit_code = main.main([
        str(products_file),
        "--skip-invalid",
        "--output-dir", str(tmp_path / "output"),
        "--logs-dir", str(tmp_path / "logs"),
    ])

    assert exit_code == 0


def test_cli_rejects_bad_threshold(tmp_path, sample_products):
    products_file = write_json(tmp_path / "data.json", sample_products)

    exit_code = main.main([
        str(products_file),
        "--threshold", "3",
        "--logs-dir", str(tmp_path / "logs"),
        "--output-dir", str(tmp_path / "output"),
    ])

    assert exit_code == 1


def test_cli_fails_on_malformed_product_file(tmp_path):
    products_file = tmp_path / "data.json"
    products_file.write_text("{not json", encoding="utf-8")

    exit_code = main.main([
        str(products_file),
        "--output-dir", str(tmp_path / "output"),
        "--logs-dir", str(tmp_path / "logs"),
    ])

    assert exit_code == 1
    assert not (tmp_path / "output").exists()
