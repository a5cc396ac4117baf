"""In-memory category index: path -> leaf category id."""

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

import yaml

from listing_converter.categories.base import CategoryResolver

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"\s*>\s*")
_ID_KEYS = ("id", "categoryId", "leafCategoryId")


def _path_variants(path: str) -> list[str]:
    """The path as given, compact "A>B" form and spaced "A > B" form."""
    trimmed = path.strip()
    variants: list[str] = []
    for variant in (trimmed, _SEPARATOR.sub(">", trimmed), _SEPARATOR.sub(" > ", trimmed)):
        if variant not in variants:
            variants.append(variant)
    return variants


class CategoryIndex(CategoryResolver):
    """
    Snapshot of leaf category paths.
    Lookup is exact, then separator-insensitive, then case-insensitive; never fuzzy.
    """

    def __init__(self, mapping: Mapping[str, Any]):
        entries: dict[str, str] = {}
        self._size = 0
        for path, category_id in mapping.items():
            if not path or category_id is None:
                continue
            self._size += 1
            for variant in _path_variants(str(path)):
                entries.setdefault(variant, str(category_id).strip())
        casefolded: dict[str, str] = {}
        for variant, category_id in entries.items():
            casefolded.setdefault(variant.casefold(), category_id)
        self._entries: Mapping[str, str] = MappingProxyType(entries)
        self._casefolded: Mapping[str, str] = MappingProxyType(casefolded)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.resolve(path) is not None

    def resolve(self, path: str) -> Optional[str]:
        if not path or not path.strip():
            return None
        for variant in _path_variants(path):
            category_id = self._entries.get(variant)
            if category_id is not None:
                return category_id
        for variant in _path_variants(path):
            category_id = self._casefolded.get(variant.casefold())
            if category_id is not None:
                logger.debug("Category matched ignoring case: %s -> %s", path, category_id)
                return category_id
        return None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CategoryIndex":
        """Load a flat `path: id` YAML mapping (optionally under a `categories:` key)."""
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if isinstance(data.get("categories"), dict):
            data = data["categories"]
        return cls(data)

    @classmethod
    def from_category_tree(cls, categories: Iterable[dict[str, Any]]) -> "CategoryIndex":
        """
        Build from the marketplace category listing.
        Items carry an id, a `wholeCategoryName` ("A>B>C") or `name`, and either a
        `last` leaf flag or nested `children`. Only leaves are indexed.
        """
        mapping: dict[str, str] = {}
        _collect_leaves(categories, "", mapping)
        logger.info("Category index built: %d leaf categories", len(mapping))
        return cls(mapping)


def _is_leaf(category: dict[str, Any]) -> bool:
    last = category.get("last")
    if last is not None:
        return last is True or str(last).lower() == "true"
    return not category.get("children")


def _collect_leaves(categories: Iterable[dict[str, Any]], parent_path: str, out: dict[str, str]) -> None:
    for category in categories or []:
        category_id = next((category[k] for k in _ID_KEYS if category.get(k) is not None), None)
        if category_id is None:
            logger.warning("Category entry without id skipped: %s", category)
            continue

        whole = category.get("wholeCategoryName")
        if whole:
            path = _SEPARATOR.sub(" > ", str(whole).strip())
        else:
            name = str(category.get("name") or "").strip()
            path = f"{parent_path} > {name}" if parent_path else name

        if _is_leaf(category):
            if path:
                out[path] = str(category_id)
        else:
            _collect_leaves(category.get("children") or [], path, out)
