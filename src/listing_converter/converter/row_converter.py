"""Convert one spreadsheet row into a NormalizedProductRequest."""

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

import pydantic

from listing_converter.categories.base import CategoryResolver
from listing_converter.categories.classifier import CategoryClassifier
from listing_converter.config import ConverterSettings
from listing_converter.errors import CoercionWarning, ResolutionMiss, UnknownLabelError, ValidationError
from listing_converter.models.raw import RawRow
from listing_converter.models.request import DeliveryInfoBlock, NormalizedProductRequest
from listing_converter.synthesis.certification import CertificationInfoSynthesizer
from listing_converter.synthesis.origin import OriginCodeTable, OriginInfoSynthesizer
from listing_converter.vocabulary.constants import (
    REGISTRABLE_DISPLAY_STATUSES,
    REGISTRABLE_SALE_STATUSES,
    DeliveryType,
    DisplayStatus,
    SaleStatus,
    VocabularyKind,
)
from listing_converter.vocabulary.translator import VocabularyTranslator

from listing_converter.converter import columns
from listing_converter.converter.coercion import Unparsable, clean_text, parse_decimal, parse_int, parse_strict_int

logger = logging.getLogger(__name__)


def _field(column: str) -> str:
    return columns.FIELD_NAMES.get(column, column)


class RowConverter:
    """
    Turns loosely-typed rows into validated product requests.
    Holds only read-only collaborators, so one instance can convert rows concurrently.
    """

    def __init__(
        self,
        resolver: CategoryResolver,
        classifier: Optional[CategoryClassifier] = None,
        settings: Optional[ConverterSettings] = None,
        origin_codes: Optional[Mapping[str, str] | OriginCodeTable] = None,
    ):
        self.resolver = resolver
        self.classifier = classifier or CategoryClassifier()
        self.settings = settings or ConverterSettings()
        self.origin_codes = (
            origin_codes if isinstance(origin_codes, OriginCodeTable) else OriginCodeTable(origin_codes)
        )
        self.translator = VocabularyTranslator(
            default_sale_status=self.settings.default_sale_status,
            default_display_status=self.settings.default_display_status,
            default_delivery_type=self.settings.default_delivery_type,
        )
        self.origin_synthesizer = OriginInfoSynthesizer(self.classifier, self.settings)
        self.certification_synthesizer = CertificationInfoSynthesizer(self.classifier, self.settings)

    def convert(self, row: RawRow | Mapping[str, Any]) -> NormalizedProductRequest:
        """
        Convert one row. Required fields are checked in input order and the first
        failure raises ValidationError carrying the row index and field name.
        """
        if not isinstance(row, RawRow):
            row = RawRow(data=dict(row or {}))
        row_index = _row_index(row)
        if not row.data:
            raise ValidationError(row_index, "row", "row is empty")
        logger.debug("Converting row %d", row_index)

        name = self._required_text(row, row_index, columns.NAME)
        category_path, category_id = self._category(row, row_index)
        sale_price = self._sale_price(row, row_index)
        stock_quantity = self._stock_quantity(row, row_index)
        detail_content = self._required_text(row, row_index, columns.DETAIL_CONTENT)
        main_image = self._required_text(row, row_index, columns.MAIN_IMAGE_URL)

        images = [main_image]
        additional_image = clean_text(row.get(columns.ADDITIONAL_IMAGE_URL))
        if additional_image:
            images.append(additional_image)

        sale_status = self._registrable_sale_status(
            self._translate(row, row_index, VocabularyKind.SALE_STATUS, columns.SALE_STATUS), row_index
        )
        display_status = self._registrable_display_status(
            self._translate(row, row_index, VocabularyKind.DISPLAY_STATUS, columns.DISPLAY_STATUS), row_index
        )
        delivery_info = self._delivery_info(row, row_index)

        origin_area = clean_text(row.get(columns.ORIGIN_AREA))
        tax_type = clean_text(row.get(columns.TAX_TYPE))

        try:
            origin_info = self.origin_synthesizer.synthesize(origin_area, category_path, self.origin_codes)
        except pydantic.ValidationError as e:
            raise ValidationError(row_index, "origin", str(e)) from e
        try:
            certification_info = self.certification_synthesizer.synthesize(category_path, category_id)
        except pydantic.ValidationError as e:
            raise ValidationError(row_index, "certification", str(e)) from e

        try:
            request = NormalizedProductRequest(
                name=name,
                category_id=category_id,
                category_path=category_path,
                sale_price=sale_price,
                stock_quantity=stock_quantity,
                detail_content=detail_content,
                images=images,
                sale_status=sale_status,
                display_status=display_status,
                delivery_info=delivery_info,
                brand_name=clean_text(row.get(columns.BRAND)),
                model_name=clean_text(row.get(columns.MODEL_NAME)),
                manufacturer=clean_text(row.get(columns.MANUFACTURER)),
                origin_area=origin_area,
                tax_type=tax_type.upper() if tax_type else None,
                origin_info=origin_info,
                certification_info=certification_info,
            )
        except pydantic.ValidationError as e:
            raise ValidationError(row_index, "row", str(e)) from e

        logger.debug("Converted row %d: name=%s category=%s", row_index, name, category_id)
        return request

    def _required_text(self, row: RawRow, row_index: int, column: str) -> str:
        text = clean_text(row.get(column))
        if text is None:
            raise ValidationError(row_index, _field(column), f"{column} is required")
        return text

    def _category(self, row: RawRow, row_index: int) -> tuple[str, str]:
        """Returns (category_path as given, resolved category id)."""
        text = self._required_text(row, row_index, columns.CATEGORY)
        if self.resolver.is_numeric(text):
            return text, text
        category_id = self.resolver.resolve(text)
        if category_id is None:
            raise ResolutionMiss(row_index, _field(columns.CATEGORY), text)
        logger.info("Row %d: category path resolved: %s -> %s", row_index, text, category_id)
        return text, category_id

    def _number(self, row: RawRow, row_index: int, column: str, parser) -> Any:
        value = row.get(column)
        try:
            return parser(value)
        except Unparsable:
            logger.warning("%s", CoercionWarning(row_index, _field(column), value))
            return None

    def _sale_price(self, row: RawRow, row_index: int) -> Decimal:
        price = self._number(row, row_index, columns.SALE_PRICE, parse_decimal)
        if price is None or price <= 0:
            raise ValidationError(
                row_index, _field(columns.SALE_PRICE), f"{columns.SALE_PRICE} is required and must be greater than 0"
            )
        return price

    def _stock_quantity(self, row: RawRow, row_index: int) -> int:
        stock = self._number(row, row_index, columns.STOCK_QUANTITY, parse_int)
        if stock is None or stock < 0:
            raise ValidationError(
                row_index, _field(columns.STOCK_QUANTITY), f"{columns.STOCK_QUANTITY} is required and must be 0 or more"
            )
        return stock

    def _translate(self, row: RawRow, row_index: int, kind: VocabularyKind, column: str):
        try:
            return self.translator.translate(kind, row.get(column))
        except UnknownLabelError as e:
            raise ValidationError(row_index, _field(column), str(e)) from e

    def _registrable_sale_status(self, status: SaleStatus, row_index: int) -> SaleStatus:
        if status in REGISTRABLE_SALE_STATUSES:
            return status
        # Out-of-stock is set by the marketplace itself when stock reaches 0
        logger.warning(
            "Row %d: sale status %s cannot be used at registration, sending %s",
            row_index, status.value, REGISTRABLE_SALE_STATUSES[0].value,
        )
        return REGISTRABLE_SALE_STATUSES[0]

    def _registrable_display_status(self, status: DisplayStatus, row_index: int) -> DisplayStatus:
        if status in REGISTRABLE_DISPLAY_STATUSES:
            return status
        logger.warning(
            "Row %d: display status %s cannot be used at registration, sending %s",
            row_index, status.value, REGISTRABLE_DISPLAY_STATUSES[0].value,
        )
        return REGISTRABLE_DISPLAY_STATUSES[0]

    def _delivery_info(self, row: RawRow, row_index: int) -> Optional[DeliveryInfoBlock]:
        """
        Delivery block only when a method or fee cell is filled in; otherwise None and
        default delivery handling is left to the payload builder.
        """
        method_text = clean_text(row.get(columns.DELIVERY_TYPE))
        fee_value = row.get(columns.DELIVERY_FEE)
        if method_text is None and clean_text(fee_value) is None:
            return None

        delivery_type = self._translate(row, row_index, VocabularyKind.DELIVERY_TYPE, columns.DELIVERY_TYPE)

        delivery_company = None
        if delivery_type is DeliveryType.DELIVERY:
            # The method column may name the carrier ("한진택배") when no carrier column is given
            delivery_company = (
                self.translator.delivery_company(row.get(columns.DELIVERY_COMPANY))
                or self.translator.delivery_company(method_text)
                or self.settings.default_delivery_company
            )

        delivery_fee = self._number(row, row_index, columns.DELIVERY_FEE, parse_strict_int)
        if delivery_fee is not None and delivery_fee < 0:
            logger.warning("%s", CoercionWarning(row_index, _field(columns.DELIVERY_FEE), fee_value))
            delivery_fee = None

        return DeliveryInfoBlock(
            delivery_type=delivery_type,
            delivery_company=delivery_company,
            delivery_fee=delivery_fee,
        )


def _row_index(row: RawRow) -> int:
    """Row index from the RawRow, or from a `_rowNumber` cell set by older readers."""
    if row.row_index:
        return row.row_index
    legacy = row.get(columns.ROW_NUMBER)
    try:
        return int(legacy) if legacy is not None else 0
    except (TypeError, ValueError):
        return 0
