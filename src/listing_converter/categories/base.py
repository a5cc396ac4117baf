"""Abstract interface for category-path resolution."""

import re
from abc import ABC, abstractmethod
from typing import Optional

_NUMERIC_ID = re.compile(r"^[0-9]+$")


class CategoryResolver(ABC):
    """
    Maps a human-readable category path to a marketplace leaf category id.
    Implementations may be backed by a cached category tree or a remote lookup.
    """

    @abstractmethod
    def resolve(self, path: str) -> Optional[str]:
        """
        Return the category id for path, or None when not found.
        """
        pass

    def is_numeric(self, text: Optional[str]) -> bool:
        """True when text is already a bare numeric category id."""
        return bool(text) and bool(_NUMERIC_ID.match(text.strip()))
