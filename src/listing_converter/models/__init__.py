"""Data models for raw rows and normalized product requests."""

from listing_converter.models.raw import RawRow
from listing_converter.models.request import (
    CertificationExclusion,
    CertificationInfoBlock,
    DeliveryInfoBlock,
    NormalizedProductRequest,
    OriginInfoBlock,
)

__all__ = [
    "CertificationExclusion",
    "CertificationInfoBlock",
    "DeliveryInfoBlock",
    "NormalizedProductRequest",
    "OriginInfoBlock",
    "RawRow",
]
