"""Pytest fixtures for listing-converter tests."""

import csv
from io import StringIO
from typing import Any

import pytest

from listing_converter.categories import CategoryIndex
from listing_converter.config import ConverterSettings
from listing_converter.converter import RowConverter
from listing_converter.models.raw import RawRow


def _build_csv(rows: list[dict]) -> str:
    """Build CSV string from list of row dicts."""
    if not rows:
        return ""
    out = StringIO()
    writer = csv.DictWriter(out, fieldnames=rows[0].keys())
    writer.writeheader()
    writer.writerows(rows)
    return out.getvalue()


@pytest.fixture
def sample_row() -> dict[str, Any]:
    """Upload-template row with every required column filled in."""
    return {
        "상품명": "Widget",
        "카테고리": "50000123",
        "판매가": "10,000",
        "재고수량": "5",
        "상세설명": "<p>Widget detail</p>",
        "대표이미지URL": "https://example.com/widget.jpg",
    }


@pytest.fixture
def full_row(sample_row: dict[str, Any]) -> dict[str, Any]:
    """Row with optional columns filled in as sellers usually write them."""
    return {
        **sample_row,
        "카테고리": "생활/건강 > 주방용품 > 컵",
        "추가이미지URL1": "https://example.com/widget-2.jpg",
        "판매상태": "판매중",
        "전시상태": "전시중",
        "배송방법": "택배",
        "택배사": "한진택배",
        "배송비": "3,000",
        "브랜드": " Acme ",
        "모델명": "W-100",
        "제조사": "Acme Corp",
        "원산지": "국내산",
        "과세구분": "tax",
    }


@pytest.fixture
def raw_row(sample_row: dict[str, Any]) -> RawRow:
    """RawRow built from sample row, as the readers produce it."""
    return RawRow(data=sample_row, row_index=2)


@pytest.fixture
def category_index() -> CategoryIndex:
    """Small category snapshot."""
    return CategoryIndex(
        {
            "생활/건강 > 주방용품 > 컵": "50000999",
            "식품 > 수산물 > 생선": "50002001",
            "출산/육아 > 완구 > 블록": "50004100",
        }
    )


@pytest.fixture
def settings() -> ConverterSettings:
    return ConverterSettings()


@pytest.fixture
def converter(category_index: CategoryIndex, settings: ConverterSettings) -> RowConverter:
    """Converter with the small category snapshot and default settings."""
    return RowConverter(resolver=category_index, settings=settings)


@pytest.fixture
def sample_csv_content(sample_row: dict[str, Any]) -> str:
    """CSV upload: a valid row, a blank row, then a second valid row."""
    blank = {k: "" for k in sample_row}
    second = {**sample_row, "상품명": "Gadget"}
    return _build_csv([sample_row, blank, second])
