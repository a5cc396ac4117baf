"""Closed vocabularies (status, display, delivery, carrier) and their translator."""

from listing_converter.vocabulary.constants import (
    DeliveryCompany,
    DeliveryType,
    DisplayStatus,
    KcExclusion,
    SaleStatus,
    VocabularyKind,
)
from listing_converter.vocabulary.translator import VocabularyTranslator, infer_delivery_company

__all__ = [
    "DeliveryCompany",
    "DeliveryType",
    "DisplayStatus",
    "KcExclusion",
    "SaleStatus",
    "VocabularyKind",
    "VocabularyTranslator",
    "infer_delivery_company",
]
