"""Spreadsheet column labels (upload template headers)."""

ROW_NUMBER = "_rowNumber"

# Required
NAME = "상품명"
CATEGORY = "카테고리"
SALE_PRICE = "판매가"
STOCK_QUANTITY = "재고수량"
DETAIL_CONTENT = "상세설명"
MAIN_IMAGE_URL = "대표이미지URL"

# Optional
ADDITIONAL_IMAGE_URL = "추가이미지URL1"
SALE_STATUS = "판매상태"
DISPLAY_STATUS = "전시상태"
DELIVERY_TYPE = "배송방법"
DELIVERY_COMPANY = "택배사"
DELIVERY_FEE = "배송비"
BRAND = "브랜드"
MODEL_NAME = "모델명"
MANUFACTURER = "제조사"
ORIGIN_AREA = "원산지"
TAX_TYPE = "과세구분"

# Names used in error messages
FIELD_NAMES = {
    NAME: "name",
    CATEGORY: "category",
    SALE_PRICE: "sale price",
    STOCK_QUANTITY: "stock quantity",
    DETAIL_CONTENT: "detail content",
    MAIN_IMAGE_URL: "main image URL",
    SALE_STATUS: "sale status",
    DISPLAY_STATUS: "display status",
    DELIVERY_TYPE: "delivery method",
    DELIVERY_FEE: "delivery fee",
}
