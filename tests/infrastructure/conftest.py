import os

import pytest

SETTINGS_ENV = (
    "STRIPE_SECRET_KEY",
    "STRIPE_WEBHOOK_SECRET",
    "STOREFRONT_APP_URL",
    "STOREFRONT_DATA_DIR",
    "STOREFRONT_CATALOG_SHIPPING",
    "STOREFRONT_FUNDRAISER_SHIPPING",
    "STOREFRONT_CART_TAX_RATE",
    "STOREFRONT_MEDALLION_PRICE",
    "STOREFRONT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Start from an empty configuration and drop anything a .env file loaded."""
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    yield
    for key in SETTINGS_ENV:
        os.environ.pop(key, None)
