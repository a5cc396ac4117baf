"""Integration tests for the convert CLI command."""

import json
import tempfile
from pathlib import Path

import pytest

from listing_converter.cli.main import main


@pytest.fixture
def workdir():
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


def _write_csv(workdir: Path, content: str) -> Path:
    path = workdir / "products.csv"
    path.write_text(content, encoding="utf-8")
    return path


class TestConvertCommand:
    """Tests for `listing-converter convert`."""

    def test_all_rows_convert(self, workdir: Path, sample_csv_content: str, capsys) -> None:
        """Valid rows are printed as normalized requests; exit is clean."""
        input_path = _write_csv(workdir, sample_csv_content)
        main(["convert", "--input", str(input_path)])
        result = json.loads(capsys.readouterr().out)
        assert [r["name"] for r in result["converted"]] == ["Widget", "Gadget"]
        assert result["converted"][0]["category_id"] == "50000123"
        assert result["errors"] == []

    def test_failed_row_reported_and_exit_code(self, workdir: Path, sample_row: dict, capsys) -> None:
        """A bad row is listed under errors and the command exits 1."""
        bad = {**sample_row, "판매가": ""}
        content = ",".join(sample_row) + "\n" + ",".join(f'"{v}"' for v in sample_row.values()) + "\n"
        content += ",".join(f'"{v}"' for v in bad.values()) + "\n"
        input_path = _write_csv(workdir, content)
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "--input", str(input_path)])
        assert exc_info.value.code == 1
        result = json.loads(capsys.readouterr().out)
        assert len(result["converted"]) == 1
        assert result["errors"] == [
            {"row": 3, "field": "sale price", "reason": "판매가 is required and must be greater than 0"}
        ]

    def test_payload_output_with_categories_and_config(
        self, workdir: Path, sample_row: dict, capsys
    ) -> None:
        """--payload emits registration bodies using category map and settings."""
        row = {**sample_row, "카테고리": "생활/건강 > 주방용품 > 컵"}
        content = ",".join(row) + "\n" + ",".join(f'"{v}"' for v in row.values()) + "\n"
        input_path = _write_csv(workdir, content)
        categories = workdir / "categories.yaml"
        categories.write_text('"생활/건강 > 주방용품 > 컵": "50000999"\n', encoding="utf-8")
        config = workdir / "settings.yaml"
        config.write_text("defaults:\n  default_delivery_fee: 3000\n", encoding="utf-8")

        main([
            "convert",
            "--input", str(input_path),
            "--categories", str(categories),
            "--config", str(config),
            "--payload",
        ])
        result = json.loads(capsys.readouterr().out)
        product = result["converted"][0]["originProduct"]
        assert product["leafCategoryId"] == "50000999"
        assert product["deliveryInfo"]["deliveryFee"]["baseFee"] == 3000

    def test_category_tree_json(self, workdir: Path, sample_row: dict, capsys) -> None:
        """A .json category tree export is accepted."""
        row = {**sample_row, "카테고리": "식품>농산물>과일"}
        content = ",".join(row) + "\n" + ",".join(f'"{v}"' for v in row.values()) + "\n"
        input_path = _write_csv(workdir, content)
        tree = workdir / "categories.json"
        tree.write_text(
            json.dumps([{"id": "50000006", "wholeCategoryName": "식품>농산물>과일", "last": True}]),
            encoding="utf-8",
        )
        main(["convert", "--input", str(input_path), "--categories", str(tree)])
        result = json.loads(capsys.readouterr().out)
        assert result["converted"][0]["category_id"] == "50000006"

    def test_output_file(self, workdir: Path, sample_csv_content: str, capsys) -> None:
        """--output writes the JSON result to a file."""
        input_path = _write_csv(workdir, sample_csv_content)
        output = workdir / "out.json"
        main(["convert", "--input", str(input_path), "--output", str(output)])
        assert "Converted 2 of 2 rows" in capsys.readouterr().out
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data["converted"]) == 2

    def test_missing_input(self, workdir: Path) -> None:
        """Nonexistent input exits with a message."""
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "--input", str(workdir / "missing.csv")])
        assert "Input file not found" in str(exc_info.value.code)
