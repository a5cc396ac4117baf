"""Certification-target exclusion block synthesis."""

import logging
from typing import Optional

from listing_converter.categories.classifier import CategoryClassifier
from listing_converter.config import ConverterSettings
from listing_converter.models.request import CertificationExclusion, CertificationInfoBlock

logger = logging.getLogger(__name__)


class CertificationInfoSynthesizer:
    """
    Declares products out of scope for KC and child-product certification.
    Certification record ids are not known for any product yet, so both the
    "required" and "not required" branches emit the exclusion defaults.
    """

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        settings: Optional[ConverterSettings] = None,
    ):
        self.classifier = classifier or CategoryClassifier()
        self.settings = settings or ConverterSettings()

    def synthesize(self, category_path: Optional[str], category_id: Optional[str]) -> CertificationInfoBlock:
        label = category_path or category_id
        kc_required = self.classifier.is_safety_cert_required(category_path, category_id)
        child_required = self.classifier.is_child_cert_required(category_path, category_id)

        if kc_required:
            # Extension point: attach the KC certification record once ids are supplied
            kc_flag = self.settings.default_kc_certification_exclusion
            logger.warning("KC certification category %s: no certification id, excluding from KC target", label)
        else:
            kc_flag = self.settings.default_kc_certification_exclusion
            logger.debug("KC exclusion flag set for %s", label)

        if child_required:
            # Extension point: attach the child-product certification record
            child_flag = self.settings.default_child_certification_exclusion
            logger.warning("Child certification category %s: no certification id, excluding from child target", label)
        else:
            child_flag = self.settings.default_child_certification_exclusion
            logger.debug("Child exclusion flag set for %s", label)

        return CertificationInfoBlock(
            product_certification_infos=(),
            exclusion=CertificationExclusion(
                kc_certified_product_exclusion_yn=kc_flag,
                child_certified_product_exclusion_yn=child_flag,
            ),
        )
