"""Category-conditioned auxiliary blocks (origin, certification)."""

from listing_converter.synthesis.certification import CertificationInfoSynthesizer
from listing_converter.synthesis.origin import OriginCodeTable, OriginInfoSynthesizer, determine_origin_code

__all__ = [
    "CertificationInfoSynthesizer",
    "OriginCodeTable",
    "OriginInfoSynthesizer",
    "determine_origin_code",
]
