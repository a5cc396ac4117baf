"""Converter defaults, loadable from YAML."""

from pathlib import Path

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, ConfigDict, Field

from listing_converter.vocabulary.constants import (
    DeliveryCompany,
    DeliveryType,
    DisplayStatus,
    KcExclusion,
    SaleStatus,
)


class ConverterSettings(BaseModel):
    """Defaults the converter and payload builder fall back to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    default_sale_status: SaleStatus = SaleStatus.SALE
    default_display_status: DisplayStatus = DisplayStatus.ON
    default_delivery_type: DeliveryType = DeliveryType.DELIVERY
    default_delivery_company: DeliveryCompany = DeliveryCompany.CJGLS
    default_delivery_fee: int = Field(default=4500, ge=0, description="Won, used when a row has no delivery block")

    default_origin_label: str = "국내산"
    default_importer: str = Field(default="수입사명", description="Placeholder until importers are sourced")

    default_kc_certification_exclusion: KcExclusion = KcExclusion.TRUE
    default_child_certification_exclusion: bool = True

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ConverterSettings":
        """Load settings from YAML. Supports nested (defaults:) or flat structure."""
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        flat = dict(data)
        nested = flat.pop("defaults", None) or {}
        flat.update(nested)
        return cls.model_validate(flat)
