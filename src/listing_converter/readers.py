"""Read upload spreadsheets (.csv, .xlsx) into RawRow records."""

import csv
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

try:
    from openpyxl import load_workbook
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "openpyxl is required for .xlsx reading. Run: poetry install"
    ) from e

from listing_converter.models.raw import RawRow

logger = logging.getLogger(__name__)

# Row 1 holds the headers, so data starts at spreadsheet row 2
FIRST_DATA_ROW = 2


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _rows_from(headers: list[str], records: Iterable[tuple[int, Iterable[Any]]]) -> list[RawRow]:
    rows: list[RawRow] = []
    for row_index, values in records:
        data = dict(zip(headers, values))
        if all(_is_blank(v) for v in data.values()):
            logger.debug("Skipping empty row %d", row_index)
            continue
        rows.append(RawRow(data=data, row_index=row_index))
    return rows


def read_csv_rows(path: str | Path) -> list[RawRow]:
    """Read a CSV upload; row_index is the spreadsheet row number (header is row 1)."""
    path = Path(path)
    # utf-8-sig strips the BOM Excel writes on "CSV UTF-8" export
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header_row = next(reader, None)
        if header_row is None:
            return []
        headers = [h.strip() for h in header_row]
        rows = _rows_from(headers, enumerate(reader, start=FIRST_DATA_ROW))
    logger.info("Read %d rows from %s", len(rows), path)
    return rows


def read_xlsx_rows(path: str | Path, sheet_name: Optional[str] = None) -> list[RawRow]:
    """Read an .xlsx upload (first sheet unless sheet_name is given); formulas read as cached values."""
    path = Path(path)
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        values = ws.iter_rows(values_only=True)
        header_row = next(values, None)
        if header_row is None:
            return []
        headers = [
            str(h).strip() if h is not None else f"col_{i}"
            for i, h in enumerate(header_row, start=1)
        ]
        rows = _rows_from(headers, enumerate(values, start=FIRST_DATA_ROW))
    finally:
        wb.close()
    logger.info("Read %d rows from %s", len(rows), path)
    return rows


def read_rows(path: str | Path, sheet_name: Optional[str] = None) -> list[RawRow]:
    """Dispatch on file extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return read_csv_rows(path)
    if suffix in (".xlsx", ".xlsm"):
        return read_xlsx_rows(path, sheet_name)
    raise ValueError(f"Unsupported input file type: {suffix} (expected .csv or .xlsx)")
