"""Render a NormalizedProductRequest as the marketplace registration JSON body."""

from typing import Any, Optional

from listing_converter.config import ConverterSettings
from listing_converter.models.request import DeliveryInfoBlock, NormalizedProductRequest
from listing_converter.vocabulary.constants import DeliveryType

MAX_OPTIONAL_IMAGES = 19
SALE_TYPE_NEW = "NEW"
DELIVERY_ATTRIBUTE_NORMAL = "NORMAL"


def _delivery_fee(fee: Optional[int], settings: ConverterSettings) -> dict[str, Any]:
    if fee == 0:
        return {"deliveryFeeType": "FREE"}
    return {
        "deliveryFeeType": "PAID",
        "baseFee": settings.default_delivery_fee if fee is None else fee,
        "deliveryFeePayType": "PREPAID",
    }


def _delivery_info(block: Optional[DeliveryInfoBlock], settings: ConverterSettings) -> dict[str, Any]:
    if block is None:
        block = DeliveryInfoBlock(
            delivery_type=DeliveryType.DELIVERY,
            delivery_company=settings.default_delivery_company,
        )

    info: dict[str, Any] = {
        "deliveryType": block.delivery_type.value,
        "deliveryAttributeType": DELIVERY_ATTRIBUTE_NORMAL,
    }
    if block.delivery_company is not None:
        info["deliveryCompany"] = block.delivery_company.value
    info["deliveryFee"] = _delivery_fee(block.delivery_fee, settings)
    info["claimDeliveryInfo"] = {
        "deliveryType": block.delivery_type.value,
        "deliveryAttributeType": DELIVERY_ATTRIBUTE_NORMAL,
        "deliveryFee": {"deliveryFeeType": "FREE"},
        "returnDeliveryFee": 0,
        "exchangeDeliveryFee": 0,
    }
    return info


def _images(request: NormalizedProductRequest) -> dict[str, Any]:
    images: dict[str, Any] = {"representativeImage": {"url": request.main_image}}
    optional = request.additional_images[:MAX_OPTIONAL_IMAGES]
    if optional:
        images["optionalImageList"] = [{"url": url} for url in optional]
    return images


def _search_info(request: NormalizedProductRequest) -> dict[str, str]:
    search_info = {}
    if request.brand_name:
        search_info["brandName"] = request.brand_name
    if request.model_name:
        search_info["modelName"] = request.model_name
    if request.manufacturer:
        search_info["manufacturerName"] = request.manufacturer
    return search_info


def build_registration_payload(
    request: NormalizedProductRequest,
    settings: Optional[ConverterSettings] = None,
) -> dict[str, Any]:
    """
    Build the registration body: `originProduct` plus `smartstoreChannelProduct`.
    Pure function; the HTTP call is the caller's business.
    """
    settings = settings or ConverterSettings()

    detail_attribute: dict[str, Any] = {
        "originAreaInfo": request.origin_info.model_dump(by_alias=True, exclude_none=True),
        "productCertificationInfos": list(request.certification_info.product_certification_infos),
        "certificationTargetExcludeContent": request.certification_info.exclusion.model_dump(
            mode="json", by_alias=True
        ),
    }
    search_info = _search_info(request)
    if search_info:
        detail_attribute["naverShoppingSearchInfo"] = search_info
    if request.tax_type:
        detail_attribute["taxType"] = request.tax_type

    origin_product = {
        "statusType": request.sale_status.value,
        "saleType": SALE_TYPE_NEW,
        "leafCategoryId": request.category_id,
        "name": request.name,
        "detailContent": request.detail_content,
        "salePrice": int(request.sale_price),
        "stockQuantity": request.stock_quantity,
        "images": _images(request),
        "deliveryInfo": _delivery_info(request.delivery_info, settings),
        "detailAttribute": detail_attribute,
    }
    return {
        "originProduct": origin_product,
        "smartstoreChannelProduct": {
            "naverShoppingRegistration": False,
            "channelProductDisplayStatusType": request.display_status.value,
        },
    }
