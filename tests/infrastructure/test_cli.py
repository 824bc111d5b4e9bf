"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from posledger.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args, **kwargs):
        return runner.invoke(cli, ["--data-dir", str(tmp_path / "data"), *args], **kwargs)

    return invoke


def test_add_and_list_products(run):
    result = run("product", "add", "--id", "1", "--name", "Coffee", "--cost", "0.50",
                 "--price", "2.50", "--inventory", "50")
    assert result.exit_code == 0, result.output
    assert "Coffee" in result.output

    result = run("product", "list")
    assert result.exit_code == 0
    assert "Coffee" in result.output
    assert "$2.50" in result.output


def test_invalid_product_is_reported(run):
    result = run("product", "add", "--id", "1", "--name", "Coffee", "--cost", "-1", "--price", "2")
    assert result.exit_code != 0
    assert "cost cannot be negative" in result.output


def test_checkout_and_report(run):
    assert run("data", "seed").exit_code == 0

    result = run("sale", "checkout", "--items", "1:2,2", "--payment", "card")
    assert result.exit_code == 0, result.output
    assert "Order C-" in result.output
    assert "$11.99" in result.output

    result = run("report", "show")
    assert result.exit_code == 0
    assert "$11.99" in result.output
    assert "Coffee" in result.output

    assert "Ledger is consistent." in run("sale", "audit").output


def test_checkout_unknown_product(run):
    result = run("sale", "checkout", "--items", "missing:1")
    assert result.exit_code != 0
    assert "No product with ID or barcode 'missing'" in result.output


def test_inventory_adjust(run):
    run("data", "seed")
    result = run("inventory", "adjust", "--id", "4", "--quantity", "20", "--direction", "subtract")
    assert result.exit_code == 0, result.output
    assert "now 0 units" in result.output


def test_report_with_no_sales(run):
    result = run("report", "show")
    assert result.exit_code == 0
    assert "No sales in this period." in result.output


def test_report_rejects_reversed_range(run):
    result = run("report", "show", "--start", "2024-03-08", "--end", "2024-03-07")
    assert result.exit_code != 0
    assert "after end date" in result.output


def test_export_import_clear(run, tmp_path):
    run("data", "seed")
    run("company", "set", "--name", "Corner Café")
    backup = tmp_path / "backup.json"

    result = run("data", "export", "-o", str(backup))
    assert result.exit_code == 0, result.output
    document = json.loads(backup.read_text())
    assert len(document["products"]) == 5

    assert run("data", "clear", "--yes").exit_code == 0
    assert "No products found." in run("product", "list").output

    result = run("data", "import", str(backup))
    assert result.exit_code == 0, result.output
    assert "Imported 5 product(s) and 0 sale(s)" in result.output
    assert "Corner Café" in run("company", "show").output


def test_import_rejects_malformed_backup(run, tmp_path):
    run("data", "seed")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"products": []}))
    result = run("data", "import", str(bad))
    assert result.exit_code != 0
    assert "missing 'sales'" in result.output
    assert "Coffee" in run("product", "list").output


def test_search_and_categories(run):
    run("data", "seed")
    result = run("product", "search", "juice")
    assert "Juice" in result.output
    assert "Coffee" not in result.output
    assert run("product", "categories").output.splitlines() == ["Beverages", "Food"]
