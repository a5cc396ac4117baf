"""Marketplace enum codes and the label tables that translate into them."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class VocabularyKind(str, Enum):
    """Closed vocabularies a spreadsheet column can be translated through."""

    SALE_STATUS = "sale_status"
    DISPLAY_STATUS = "display_status"
    DELIVERY_TYPE = "delivery_type"
    DELIVERY_COMPANY = "delivery_company"


class SaleStatus(str, Enum):
    SALE = "SALE"
    OUTOFSTOCK = "OUTOFSTOCK"
    SUSPENSION = "SUSPENSION"
    WAIT = "WAIT"


class DisplayStatus(str, Enum):
    ON = "ON"
    SUSPENSION = "SUSPENSION"
    WAIT = "WAIT"


class DeliveryType(str, Enum):
    DELIVERY = "DELIVERY"  # courier
    DIRECT = "DIRECT"
    QUICK = "QUICK"


class DeliveryCompany(str, Enum):
    CJGLS = "CJGLS"  # CJ대한통운
    HANJIN = "HANJIN"  # 한진택배
    KGB = "KGB"  # 로젠택배
    HYUNDAI = "HYUNDAI"  # 롯데택배
    EPOST = "EPOST"  # 우체국택배


class KcExclusion(str, Enum):
    FALSE = "FALSE"  # subject to KC certification
    TRUE = "TRUE"  # not subject
    KC_EXEMPTION_OBJECT = "KC_EXEMPTION_OBJECT"  # safety-standard, purchase agency, parallel import


# Statuses the registration endpoint accepts; anything else is sent as the first entry
REGISTRABLE_SALE_STATUSES = (SaleStatus.SALE,)
REGISTRABLE_DISPLAY_STATUSES = (DisplayStatus.ON, DisplayStatus.SUSPENSION)

SALE_STATUS_LABELS: Mapping[str, SaleStatus] = MappingProxyType(
    {
        "판매중": SaleStatus.SALE,
        "판매": SaleStatus.SALE,
        "SALE": SaleStatus.SALE,
        "품절": SaleStatus.OUTOFSTOCK,
        "OUTOFSTOCK": SaleStatus.OUTOFSTOCK,
        "SOLD_OUT": SaleStatus.OUTOFSTOCK,
        "판매중지": SaleStatus.SUSPENSION,
        "SUSPENSION": SaleStatus.SUSPENSION,
        "UNSALE": SaleStatus.SUSPENSION,
        "판매대기": SaleStatus.WAIT,
        "WAIT": SaleStatus.WAIT,
    }
)

DISPLAY_STATUS_LABELS: Mapping[str, DisplayStatus] = MappingProxyType(
    {
        "전시": DisplayStatus.ON,
        "전시중": DisplayStatus.ON,
        "ON": DisplayStatus.ON,
        "전시중지": DisplayStatus.SUSPENSION,
        "전시안함": DisplayStatus.SUSPENSION,
        "SUSPENSION": DisplayStatus.SUSPENSION,
        "전시대기": DisplayStatus.WAIT,
        "WAIT": DisplayStatus.WAIT,
    }
)

# Carrier names are accepted as delivery methods: one column may carry both
DELIVERY_TYPE_LABELS: Mapping[str, DeliveryType] = MappingProxyType(
    {
        "택배": DeliveryType.DELIVERY,
        "택배배송": DeliveryType.DELIVERY,
        "배송": DeliveryType.DELIVERY,
        "DELIVERY": DeliveryType.DELIVERY,
        "CJ대한통운": DeliveryType.DELIVERY,
        "대한통운": DeliveryType.DELIVERY,
        "한진택배": DeliveryType.DELIVERY,
        "로젠택배": DeliveryType.DELIVERY,
        "롯데택배": DeliveryType.DELIVERY,
        "우체국택배": DeliveryType.DELIVERY,
        "직접배송": DeliveryType.DIRECT,
        "직접전달": DeliveryType.DIRECT,
        "DIRECT": DeliveryType.DIRECT,
        "퀵배송": DeliveryType.QUICK,
        "퀵서비스": DeliveryType.QUICK,
        "QUICK": DeliveryType.QUICK,
    }
)

# Checked in order, first containment wins
CARRIER_KEYWORDS: tuple[tuple[str, DeliveryCompany], ...] = (
    ("한진", DeliveryCompany.HANJIN),
    ("HANJIN", DeliveryCompany.HANJIN),
    ("CJ", DeliveryCompany.CJGLS),
    ("대한통운", DeliveryCompany.CJGLS),
    ("CJGLS", DeliveryCompany.CJGLS),
    ("로젠", DeliveryCompany.KGB),
    ("KGB", DeliveryCompany.KGB),
    ("롯데", DeliveryCompany.HYUNDAI),
    ("HYUNDAI", DeliveryCompany.HYUNDAI),
    ("우체국", DeliveryCompany.EPOST),
    ("EPOST", DeliveryCompany.EPOST),
)

# Origin area codes
ORIGIN_DOMESTIC = "00"
ORIGIN_IMPORT_PREFIX = "02"
DOMESTIC_ORIGIN_MARKERS: tuple[str, ...] = ("국내", "한국", "국산", "domestic", "korea")
