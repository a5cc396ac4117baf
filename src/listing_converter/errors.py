"""Error types raised (or logged) while converting spreadsheet rows."""

from typing import Any, Optional


class ValidationError(ValueError):
    """
    A required input on one row is missing or malformed.
    Always attributable to a single row; never retried.
    """

    def __init__(self, row_index: int, field: str, reason: str):
        self.row_index = row_index
        self.field = field
        self.reason = reason
        super().__init__(f"Row {row_index}: {field}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        """Structured form for batch callers that aggregate failures."""
        return {"row": self.row_index, "field": self.field, "reason": self.reason}


class ResolutionMiss(ValidationError):
    """Category path could not be mapped to a category id."""

    DEFAULT_HINT = (
        "Use a numeric category id in the category column, "
        "or the exact category path shown in the seller center."
    )

    def __init__(self, row_index: int, field: str, category: str, hint: Optional[str] = None):
        self.category = category
        self.hint = hint or self.DEFAULT_HINT
        super().__init__(row_index, field, f"no category mapping for '{category}'. {self.hint}")


class CoercionWarning(UserWarning):
    """
    A present value could not be parsed as a number.
    Logged, never raised: the field is treated as absent.
    """

    def __init__(self, row_index: int, field: str, value: Any):
        self.row_index = row_index
        self.field = field
        self.value = value
        super().__init__(f"Row {row_index}: could not parse {field} from {value!r}")


class UnknownLabelError(ValueError):
    """Free text is not part of a closed vocabulary's translation table."""

    def __init__(self, kind: str, label: str, accepted: list[str]):
        self.kind = kind
        self.label = label
        self.accepted = accepted
        super().__init__(f"Unknown {kind} label '{label}'. Accepted: {accepted}")
