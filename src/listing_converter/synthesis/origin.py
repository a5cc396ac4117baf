"""Country-of-origin block synthesis."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml

from listing_converter.categories.classifier import CategoryClassifier
from listing_converter.config import ConverterSettings
from listing_converter.models.request import OriginInfoBlock
from listing_converter.vocabulary.constants import (
    DOMESTIC_ORIGIN_MARKERS,
    ORIGIN_DOMESTIC,
    ORIGIN_IMPORT_PREFIX,
)

logger = logging.getLogger(__name__)


class OriginCodeTable:
    """
    Origin name -> origin code lookup, e.g. {"베트남": "0200036"}.
    Keys are lowercased once; insertion order is the substring-match tie-break.
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        entries: dict[str, str] = {}
        for name, code in (mapping or {}).items():
            key = str(name).strip().lower()
            if key and code is not None:
                entries.setdefault(key, str(code).strip())
        self._entries: Mapping[str, str] = MappingProxyType(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def exact(self, origin: str) -> Optional[str]:
        return self._entries.get(origin.strip().lower())

    def partial(self, origin: str) -> Optional[tuple[str, str]]:
        """First (key, code) where key contains origin or origin contains key."""
        lowered = origin.strip().lower()
        for key, code in self._entries.items():
            if key in lowered or lowered in key:
                return key, code
        return None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "OriginCodeTable":
        """
        Load a flat `name: code` YAML mapping (optionally under an `origins:` key).
        Codes must be quoted: YAML reads unquoted `0200036` as an octal integer.
        """
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if isinstance(data.get("origins"), dict):
            data = data["origins"]
        for name, code in data.items():
            if not isinstance(code, str):
                raise ValueError(
                    f"Origin code for '{name}' in {path} must be a quoted string "
                    f"(got {code!r}); write it as {name}: \"<code>\""
                )
        return cls({str(k): v for k, v in data.items()})


def determine_origin_code(origin_text: Optional[str]) -> str:
    """
    Keyword heuristic: domestic markers (국내/한국/국산, domestic/korea) -> "00",
    anything else -> generic import "02". Blank -> "00".
    """
    if not origin_text or not origin_text.strip():
        return ORIGIN_DOMESTIC
    lowered = origin_text.strip().lower()
    if any(marker in lowered for marker in DOMESTIC_ORIGIN_MARKERS):
        return ORIGIN_DOMESTIC
    logger.debug("Treating origin %r as imported (%s)", origin_text, ORIGIN_IMPORT_PREFIX)
    return ORIGIN_IMPORT_PREFIX


class OriginInfoSynthesizer:
    """Builds the origin block from the row's origin text and category."""

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        settings: Optional[ConverterSettings] = None,
    ):
        self.classifier = classifier or CategoryClassifier()
        self.settings = settings or ConverterSettings()

    def resolve_code(self, origin_text: str, table: Optional[OriginCodeTable]) -> str:
        """Exact table match, then substring table match, then keyword heuristic."""
        if table:
            code = table.exact(origin_text)
            if code is not None:
                logger.info("Origin code from table: %s -> %s", origin_text, code)
                return code
            hit = table.partial(origin_text)
            if hit is not None:
                key, code = hit
                logger.info("Origin code from partial table match: %s -> %s (key: %s)", origin_text, code, key)
                return code
        code = determine_origin_code(origin_text)
        logger.debug("No origin table match for %s, heuristic gives %s", origin_text, code)
        return code

    def synthesize(
        self,
        origin_text: Optional[str],
        category_path: Optional[str],
        name_to_code: Optional[Mapping[str, str] | OriginCodeTable] = None,
    ) -> OriginInfoBlock:
        table = name_to_code if isinstance(name_to_code, OriginCodeTable) else OriginCodeTable(name_to_code)

        code: Optional[str] = None
        content = self.settings.default_origin_label
        importer: Optional[str] = None

        if origin_text is not None and str(origin_text).strip():
            content = str(origin_text).strip()
            code = self.resolve_code(content, table)

            if code.startswith(ORIGIN_IMPORT_PREFIX):
                # Required by the API for imports; the real importer is not sourced yet
                importer = self.settings.default_importer
                logger.info("Imported origin: %s (%s), importer=%s", content, code, importer)

            # Ocean fields are never emitted; the check only records whether that is safe
            if self.classifier.is_marine_category(category_path):
                logger.warning(
                    "Marine category %s registered without ocean-area fields (no source for them)",
                    category_path,
                )
            else:
                logger.debug("Non-marine category %s: ocean-area fields omitted", category_path)
        else:
            code = ORIGIN_DOMESTIC

        if not code:
            logger.error("No origin code resolved for %r, using domestic", origin_text)
            code = ORIGIN_DOMESTIC

        return OriginInfoBlock(origin_area_code=code, content=content, importer=importer)
