"""Translate free-text spreadsheet labels into marketplace enum codes."""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from listing_converter.errors import UnknownLabelError

from listing_converter.vocabulary.constants import (
    CARRIER_KEYWORDS,
    DELIVERY_TYPE_LABELS,
    DISPLAY_STATUS_LABELS,
    SALE_STATUS_LABELS,
    DeliveryCompany,
    DeliveryType,
    DisplayStatus,
    SaleStatus,
    VocabularyKind,
)

logger = logging.getLogger(__name__)

_TABLES: dict[VocabularyKind, Mapping[str, Enum]] = {
    VocabularyKind.SALE_STATUS: SALE_STATUS_LABELS,
    VocabularyKind.DISPLAY_STATUS: DISPLAY_STATUS_LABELS,
    VocabularyKind.DELIVERY_TYPE: DELIVERY_TYPE_LABELS,
}


class VocabularyTranslator:
    """
    Maps localized labels to canonical codes.
    Status, display and delivery-method labels are exact-match only;
    carrier names are matched by ordered keyword containment.
    """

    def __init__(
        self,
        default_sale_status: SaleStatus = SaleStatus.SALE,
        default_display_status: DisplayStatus = DisplayStatus.ON,
        default_delivery_type: DeliveryType = DeliveryType.DELIVERY,
    ):
        self._defaults: dict[VocabularyKind, Optional[Enum]] = {
            VocabularyKind.SALE_STATUS: default_sale_status,
            VocabularyKind.DISPLAY_STATUS: default_display_status,
            VocabularyKind.DELIVERY_TYPE: default_delivery_type,
            VocabularyKind.DELIVERY_COMPANY: None,
        }

    def default_for(self, kind: VocabularyKind) -> Optional[Enum]:
        return self._defaults[kind]

    def translate(self, kind: VocabularyKind, raw_text: Any) -> Optional[Enum]:
        """
        Translate raw_text within one vocabulary.
        Blank input returns the kind's default (None for carriers).
        Raises UnknownLabelError for unrecognized status/display/method labels.
        """
        text = "" if raw_text is None else str(raw_text).strip()
        if not text:
            return self._defaults[kind]

        if kind is VocabularyKind.DELIVERY_COMPANY:
            return infer_delivery_company(text)

        table = _TABLES[kind]
        code = table.get(text)
        if code is None:
            raise UnknownLabelError(kind.value, text, list(table.keys()))
        return code

    def sale_status(self, raw_text: Any) -> SaleStatus:
        return self.translate(VocabularyKind.SALE_STATUS, raw_text)  # type: ignore[return-value]

    def display_status(self, raw_text: Any) -> DisplayStatus:
        return self.translate(VocabularyKind.DISPLAY_STATUS, raw_text)  # type: ignore[return-value]

    def delivery_type(self, raw_text: Any) -> DeliveryType:
        return self.translate(VocabularyKind.DELIVERY_TYPE, raw_text)  # type: ignore[return-value]

    def delivery_company(self, raw_text: Any) -> Optional[DeliveryCompany]:
        return self.translate(VocabularyKind.DELIVERY_COMPANY, raw_text)  # type: ignore[return-value]


def infer_delivery_company(text: Optional[str]) -> Optional[DeliveryCompany]:
    """
    Carrier code from free text ("한진택배", "CJ대한통운", "epost", ...).
    Keyword containment in table order first, then exact code (case-insensitive).
    Returns None when nothing matches.
    """
    if not text or not text.strip():
        return None
    normalized = text.strip()
    for keyword, code in CARRIER_KEYWORDS:
        if keyword in normalized:
            return code
    upper = normalized.upper()
    for code in DeliveryCompany:
        if upper == code.value:
            return code
    logger.debug("No carrier recognized in %r", normalized)
    return None
