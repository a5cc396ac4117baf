"""Raw spreadsheet row representation before conversion."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawRow(BaseModel):
    """
    One loosely-typed spreadsheet record.
    Readers populate this from CSV/Excel rows; values may be str, int, Decimal or None.
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)
    row_index: int = Field(default=0, description="Spreadsheet row number, for error reporting")

    def get(self, column: str) -> Any:
        return self.data.get(column)
