"""Normalized product-registration request and its owned blocks."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from listing_converter.vocabulary.constants import (
    ORIGIN_IMPORT_PREFIX,
    DeliveryCompany,
    DeliveryType,
    DisplayStatus,
    KcExclusion,
    SaleStatus,
)

_BLOCK_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class DeliveryInfoBlock(BaseModel):
    """Delivery method, carrier (courier only) and fee."""

    model_config = _BLOCK_CONFIG

    delivery_type: DeliveryType = Field(default=DeliveryType.DELIVERY, alias="deliveryType")
    delivery_company: Optional[DeliveryCompany] = Field(default=None, alias="deliveryCompany")
    delivery_fee: Optional[int] = Field(default=None, ge=0, alias="deliveryFee")

    @model_validator(mode="after")
    def _courier_needs_carrier(self) -> "DeliveryInfoBlock":
        if self.delivery_type is DeliveryType.DELIVERY and self.delivery_company is None:
            raise ValueError("delivery_company is required when delivery_type is DELIVERY")
        return self


class OriginInfoBlock(BaseModel):
    """
    Country-of-origin metadata.
    Carries no ocean (marine-area) fields: no source for them exists yet.
    """

    model_config = _BLOCK_CONFIG

    origin_area_code: str = Field(..., min_length=2, alias="originAreaCode")
    content: str = ""
    importer: Optional[str] = None

    @property
    def is_imported(self) -> bool:
        return self.origin_area_code.startswith(ORIGIN_IMPORT_PREFIX)

    @model_validator(mode="after")
    def _importer_iff_imported(self) -> "OriginInfoBlock":
        if self.is_imported and not self.importer:
            raise ValueError("importer is required for imported origin codes")
        if not self.is_imported and self.importer is not None:
            raise ValueError("importer is only allowed for imported origin codes")
        return self


class CertificationExclusion(BaseModel):
    """The two certification-target exclusion flags; both always present."""

    model_config = _BLOCK_CONFIG

    kc_certified_product_exclusion_yn: KcExclusion = Field(
        default=KcExclusion.TRUE, alias="kcCertifiedProductExclusionYn"
    )
    child_certified_product_exclusion_yn: bool = Field(
        default=True, alias="childCertifiedProductExclusionYn"
    )


class CertificationInfoBlock(BaseModel):
    """Certification records (always empty for now) plus exclusion flags."""

    model_config = _BLOCK_CONFIG

    product_certification_infos: tuple[dict, ...] = Field(
        default_factory=tuple, alias="productCertificationInfos"
    )
    exclusion: CertificationExclusion = Field(
        default_factory=CertificationExclusion, alias="certificationTargetExcludeContent"
    )


class NormalizedProductRequest(BaseModel):
    """Canonical product request produced from one spreadsheet row."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1, description="Resolved leaf category id")
    category_path: str = Field(..., description="Category text as given on the row")

    sale_price: Decimal = Field(..., gt=0)
    stock_quantity: int = Field(..., ge=0)
    detail_content: str = Field(..., min_length=1)
    images: list[str] = Field(..., min_length=1, description="images[0] is the main image")

    sale_status: SaleStatus = SaleStatus.SALE
    display_status: DisplayStatus = DisplayStatus.ON
    delivery_info: Optional[DeliveryInfoBlock] = None

    brand_name: Optional[str] = None
    model_name: Optional[str] = None
    manufacturer: Optional[str] = None
    origin_area: Optional[str] = None
    tax_type: Optional[str] = None

    origin_info: OriginInfoBlock
    certification_info: CertificationInfoBlock = Field(default_factory=CertificationInfoBlock)

    @property
    def main_image(self) -> str:
        return self.images[0]

    @property
    def additional_images(self) -> list[str]:
        return self.images[1:]

    @model_validator(mode="after")
    def _no_blank_text(self) -> "NormalizedProductRequest":
        for field in ("name", "category_id", "detail_content"):
            if not getattr(self, field).strip():
                raise ValueError(f"{field} must not be blank")
        if any(not url.strip() for url in self.images):
            raise ValueError("image URLs must not be blank")
        return self
