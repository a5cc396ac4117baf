"""Row-to-request conversion."""

from listing_converter.converter.row_converter import RowConverter

__all__ = ["RowConverter"]
