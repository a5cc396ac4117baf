"""Unit tests for spreadsheet readers."""

import tempfile
from pathlib import Path

import pytest
from openpyxl import Workbook

from listing_converter.readers import read_csv_rows, read_rows, read_xlsx_rows


@pytest.fixture
def csv_path(sample_csv_content: str):
    """CSV file as Excel exports it (with BOM)."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".csv", delete=False, encoding="utf-8-sig", newline="") as f:
        f.write(sample_csv_content)
        path = Path(f.name)
    yield path
    path.unlink()


@pytest.fixture
def xlsx_path(sample_row: dict):
    """Workbook with header row, a data row, an empty row and a second sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = "상품"
    ws.append(list(sample_row.keys()))
    ws.append(["Widget", 50000123, 10000, 5, "detail", "https://example.com/widget.jpg"])
    ws.append([None] * len(sample_row))
    ws.append(["Gadget", 50000123, 12000, 1, "detail", "https://example.com/gadget.jpg"])
    other = wb.create_sheet("기타")
    other.append(["상품명"])
    other.append(["Other"])
    with tempfile.NamedTemporaryFile(suffix=".xlsx", delete=False) as f:
        path = Path(f.name)
    wb.save(path)
    yield path
    path.unlink()


class TestReadCsvRows:
    """Tests for read_csv_rows."""

    def test_rows_and_indexes(self, csv_path: Path) -> None:
        """Data rows keep their spreadsheet row numbers; blank rows are skipped."""
        rows = read_csv_rows(csv_path)
        assert [r.row_index for r in rows] == [2, 4]
        assert rows[0].get("상품명") == "Widget"
        assert rows[0].get("판매가") == "10,000"
        assert rows[1].get("상품명") == "Gadget"

    def test_bom_stripped_from_header(self, csv_path: Path) -> None:
        """Excel's BOM does not end up in the first header."""
        assert "상품명" in read_csv_rows(csv_path)[0].data

    def test_header_only(self) -> None:
        """Header without data gives no rows."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".csv", delete=False, encoding="utf-8") as f:
            f.write("상품명,카테고리\n")
            path = Path(f.name)
        try:
            assert read_csv_rows(path) == []
        finally:
            path.unlink()


class TestReadXlsxRows:
    """Tests for read_xlsx_rows."""

    def test_first_sheet(self, xlsx_path: Path) -> None:
        """First sheet is read with typed cell values."""
        rows = read_xlsx_rows(xlsx_path)
        assert [r.row_index for r in rows] == [2, 4]
        assert rows[0].get("카테고리") == 50000123
        assert rows[1].get("상품명") == "Gadget"

    def test_named_sheet(self, xlsx_path: Path) -> None:
        """sheet_name selects another sheet."""
        rows = read_xlsx_rows(xlsx_path, sheet_name="기타")
        assert len(rows) == 1
        assert rows[0].get("상품명") == "Other"


class TestReadRows:
    """Tests for read_rows dispatch."""

    def test_dispatch_by_suffix(self, csv_path: Path, xlsx_path: Path) -> None:
        """.csv and .xlsx are both accepted."""
        assert len(read_rows(csv_path)) == 2
        assert len(read_rows(xlsx_path)) == 2

    def test_unsupported_suffix(self) -> None:
        """Other extensions are rejected."""
        with pytest.raises(ValueError):
            read_rows(Path("products.txt"))
