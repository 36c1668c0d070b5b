"""Tests for environment-driven settings."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.config import load_settings


class TestLoadSettings:

    def test_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "missing.env")

        assert settings.app_url == "https://gimmedrip.lovable.app"
        assert settings.catalog_shipping == Money.of("8.00")
        assert settings.fundraiser_shipping == Money.of("5.00")
        assert settings.cart_tax_rate == Decimal("0.05")
        assert settings.medallion_price == Money.of("49.99")
        assert settings.log_level == "WARNING"
        assert settings.stripe_secret_key == ""

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CATALOG_SHIPPING", "9.50")
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")

        settings = load_settings(tmp_path / "missing.env")

        assert settings.catalog_shipping == Money.of("9.50")
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.pricing.catalog_cart.shipping_cost == Money.of("9.50")

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("STRIPE_SECRET_KEY=sk_test_123\nSTOREFRONT_CART_TAX_RATE=0.08\n")

        settings = load_settings(env_file)

        assert settings.stripe_secret_key == "sk_test_123"
        assert settings.pricing.catalog_cart.tax_rate == Decimal("0.08")

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("STOREFRONT_APP_URL=https://from-file.example\n")
        monkeypatch.setenv("STOREFRONT_APP_URL", "https://from-env.example")

        assert load_settings(env_file).app_url == "https://from-env.example"

    def test_bad_number_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_MEDALLION_PRICE", "cheap")
        with pytest.raises(ValidationError, match="STOREFRONT_MEDALLION_PRICE must be a number"):
            load_settings(tmp_path / "missing.env")

    def test_negative_shipping_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_FUNDRAISER_SHIPPING", "-1")
        with pytest.raises(ValidationError, match="cannot be negative"):
            load_settings(tmp_path / "missing.env")

    def test_not_a_number_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CATALOG_SHIPPING", "NaN")
        with pytest.raises(ValidationError, match="must be a number"):
            load_settings(tmp_path / "missing.env")

    @pytest.mark.parametrize("rate", ["5", "1", "-0.01"])
    def test_tax_rate_must_be_a_fraction(self, tmp_path, monkeypatch, rate):
        monkeypatch.setenv("STOREFRONT_CART_TAX_RATE", rate)
        with pytest.raises(ValidationError, match=r"must be a fraction in \[0, 1\)"):
            load_settings(tmp_path / "missing.env")
