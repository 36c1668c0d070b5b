"""Runtime configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import (
    CART_TAX_RATE,
    CATALOG_SHIPPING_COST,
    FUNDRAISER_SHIPPING_COST,
    PricingPolicies,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_APP_URL = "https://gimmedrip.lovable.app"
DEFAULT_MEDALLION_PRICE = Money(Decimal("49.99"))


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    stripe_webhook_secret: str
    app_url: str
    data_dir: Path
    catalog_shipping: Money
    fundraiser_shipping: Money
    cart_tax_rate: Decimal
    medallion_price: Money
    log_level: str

    @property
    def pricing(self) -> PricingPolicies:
        return PricingPolicies.build(
            catalog_shipping=self.catalog_shipping,
            fundraiser_shipping=self.fundraiser_shipping,
            cart_tax_rate=self.cart_tax_rate,
        )


def _decimal_env(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"{name} must be a number, got {raw!r}")
    return value


def _money_env(name: str, default: Money) -> Money:
    value = _decimal_env(name, default.amount)
    if value < 0:
        raise ValidationError(f"{name} cannot be negative, got {value}")
    return Money(value)


def _rate_env(name: str, default: Decimal) -> Decimal:
    value = _decimal_env(name, default)
    if not Decimal("0") <= value < Decimal("1"):
        raise ValidationError(f"{name} must be a fraction in [0, 1), got {value}")
    return value


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build settings from the process environment.

    Values already in the environment win over those in the .env file.
    """
    load_dotenv(env_file)

    return Settings(
        stripe_secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        stripe_webhook_secret=os.getenv("STRIPE_WEBHOOK_SECRET", ""),
        app_url=os.getenv("STOREFRONT_APP_URL", DEFAULT_APP_URL),
        data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
        catalog_shipping=_money_env("STOREFRONT_CATALOG_SHIPPING", CATALOG_SHIPPING_COST),
        fundraiser_shipping=_money_env("STOREFRONT_FUNDRAISER_SHIPPING", FUNDRAISER_SHIPPING_COST),
        cart_tax_rate=_rate_env("STOREFRONT_CART_TAX_RATE", CART_TAX_RATE),
        medallion_price=_money_env("STOREFRONT_MEDALLION_PRICE", DEFAULT_MEDALLION_PRICE),
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
    )
