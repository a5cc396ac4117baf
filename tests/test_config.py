"""Unit tests for ConverterSettings."""

import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from listing_converter.config import ConverterSettings
from listing_converter.vocabulary import DeliveryCompany, KcExclusion, SaleStatus


def _write_yaml(content: str) -> Path:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8") as f:
        f.write(content)
        return Path(f.name)


class TestConverterSettings:
    """Tests for ConverterSettings."""

    def test_defaults(self) -> None:
        """Defaults match the marketplace registration conventions."""
        settings = ConverterSettings()
        assert settings.default_sale_status is SaleStatus.SALE
        assert settings.default_delivery_company is DeliveryCompany.CJGLS
        assert settings.default_delivery_fee == 4500
        assert settings.default_origin_label == "국내산"
        assert settings.default_importer == "수입사명"
        assert settings.default_kc_certification_exclusion is KcExclusion.TRUE
        assert settings.default_child_certification_exclusion is True

    def test_from_yaml_nested(self) -> None:
        """Keys under defaults: are loaded."""
        path = _write_yaml(
            "defaults:\n"
            "  default_delivery_company: HANJIN\n"
            "  default_delivery_fee: 3000\n"
            "  default_importer: \"(주)수입상사\"\n"
        )
        try:
            settings = ConverterSettings.from_yaml(path)
            assert settings.default_delivery_company is DeliveryCompany.HANJIN
            assert settings.default_delivery_fee == 3000
            assert settings.default_importer == "(주)수입상사"
        finally:
            path.unlink()

    def test_from_yaml_flat_and_unknown_keys(self) -> None:
        """Flat keys are loaded; unknown keys are ignored; nested wins over flat."""
        path = _write_yaml(
            "default_delivery_fee: 2500\n"
            "default_origin_label: Korea\n"
            "api_base_url: https://example.com\n"
            "defaults:\n"
            "  default_delivery_fee: 3500\n"
        )
        try:
            settings = ConverterSettings.from_yaml(path)
            assert settings.default_delivery_fee == 3500
            assert settings.default_origin_label == "Korea"
        finally:
            path.unlink()

    def test_empty_yaml_gives_defaults(self) -> None:
        """Empty file is the default settings."""
        path = _write_yaml("")
        try:
            assert ConverterSettings.from_yaml(path) == ConverterSettings()
        finally:
            path.unlink()

    def test_negative_fee_rejected(self) -> None:
        """Default fee cannot be negative."""
        with pytest.raises(ValidationError):
            ConverterSettings(default_delivery_fee=-1)
