"""Category predicates: certification requirements and marine products."""

import logging
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_NUMERIC_ID = re.compile(r"^[0-9]+$")


class CategoryRules(BaseModel):
    """Keyword and id-range rules; immutable configuration data."""

    model_config = ConfigDict(frozen=True)

    # KC safety: path must name a digital/appliance group AND a device keyword
    kc_group_keywords: tuple[str, ...] = ("디지털", "가전")
    kc_item_keywords: tuple[str, ...] = (
        "모니터", "노트북", "pc", "컴퓨터", "tv", "스마트폰", "태블릿", "카메라", "전기", "전자",
    )
    kc_id_ranges: tuple[tuple[int, int], ...] = ((50000003, 50002000), (50001000, 50003000))

    child_keywords: tuple[str, ...] = (
        "출산", "육아", "완구", "인형", "유아", "아동", "어린이", "키즈", "장난감", "아기",
    )
    child_id_ranges: tuple[tuple[int, int], ...] = (
        (50004000, 50005000),
        (50016000, 50017000),
        (50016500, 50016700),
    )

    marine_keywords: tuple[str, ...] = (
        "해산물", "수산물", "어류", "조개류", "seafood", "shellfish", "fish", "marine",
    )


def _id_in_ranges(category_id: Optional[str], ranges: tuple[tuple[int, int], ...]) -> bool:
    if not category_id or not _NUMERIC_ID.match(category_id.strip()):
        return False
    value = int(category_id.strip())
    return any(low <= value <= high for low, high in ranges)


class CategoryClassifier:
    """Answers category-conditioned questions by path keywords or id ranges."""

    def __init__(self, rules: Optional[CategoryRules] = None):
        self.rules = rules or CategoryRules()

    def is_safety_cert_required(self, category_path: Optional[str], category_id: Optional[str]) -> bool:
        """KC safety certification: digital/appliance path with a device keyword, or id in KC ranges."""
        path = (category_path or "").strip().lower()
        if path and any(k in path for k in self.rules.kc_group_keywords) and any(
            k in path for k in self.rules.kc_item_keywords
        ):
            logger.info("KC certification category (path): %s", category_path)
            return True
        if _id_in_ranges(category_id, self.rules.kc_id_ranges):
            logger.info("KC certification category (id): %s", category_id)
            return True
        return False

    def is_child_cert_required(self, category_path: Optional[str], category_id: Optional[str]) -> bool:
        """Child-product certification: childcare/toy path keyword, or id in child ranges."""
        path = (category_path or "").strip().lower()
        if path and any(k in path for k in self.rules.child_keywords):
            logger.info("Child certification category (path): %s", category_path)
            return True
        if _id_in_ranges(category_id, self.rules.child_id_ranges):
            logger.info("Child certification category (id): %s", category_id)
            return True
        return False

    def is_marine_category(self, category_path: Optional[str]) -> bool:
        """
        Seafood category by path keyword.
        A bare numeric id says nothing about the category, so it is never marine.
        """
        path = (category_path or "").strip()
        if not path or _NUMERIC_ID.match(path):
            return False
        lowered = path.lower()
        return any(k in lowered for k in self.rules.marine_keywords)
