"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.add_to_cart import (
    AddFundraiserItemToCartHandler,
    AddMedallionToCartHandler,
)
from storefront.application.buy_now import BuyNowHandler
from storefront.application.checkout_cart import CheckoutCartHandler
from storefront.application.complete_checkout import CompleteCheckoutHandler
from storefront.application.fundraiser_checkout import FundraiserCheckoutHandler
from storefront.application.image_uploads import BackgroundImageUploads
from storefront.application.record_fundraiser_sale import RecordFundraiserSaleHandler
from storefront.application.submit_checkout import CheckoutSubmitter
from storefront.domain.service.checkout_composer import CheckoutRequestComposer
from storefront.infrastructure.config import Settings
from storefront.infrastructure.payments.stripe_gateway import StripeGateway
from storefront.infrastructure.persistence.json_cart_store import JsonCartStore
from storefront.infrastructure.persistence.json_fundraiser_repository import (
    JsonFundraiserRepository,
)
from storefront.infrastructure.persistence.json_fundraiser_sale_repository import (
    JsonFundraiserSaleRepository,
)
from storefront.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.storage.local_image_store import LocalImageStore


# --- Adapters -----------------------------------------------------------------


def cart_store(settings: Settings) -> JsonCartStore:
    return JsonCartStore(settings.data_dir / "cart.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def fundraiser_repository(settings: Settings) -> JsonFundraiserRepository:
    return JsonFundraiserRepository(settings.data_dir / "fundraisers.json")


def fundraiser_sale_repository(settings: Settings) -> JsonFundraiserSaleRepository:
    return JsonFundraiserSaleRepository(settings.data_dir / "fundraiser_sales.json")


def inventory_repository(settings: Settings) -> JsonInventoryRepository:
    return JsonInventoryRepository(settings.data_dir / "inventory.json")


def payment_gateway(settings: Settings) -> StripeGateway:
    return StripeGateway(
        api_key=settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
    )


def image_uploads(settings: Settings) -> BackgroundImageUploads:
    return BackgroundImageUploads(LocalImageStore(settings.data_dir / "images"))


def checkout_composer(settings: Settings) -> CheckoutRequestComposer:
    return CheckoutRequestComposer(settings.app_url)


# --- Use cases with more than one collaborator ------------------------------


def add_medallion_handler(settings: Settings) -> AddMedallionToCartHandler:
    return AddMedallionToCartHandler(cart_store(settings), settings.medallion_price)


def add_fundraiser_item_handler(settings: Settings) -> AddFundraiserItemToCartHandler:
    return AddFundraiserItemToCartHandler(cart_store(settings), fundraiser_repository(settings))


def checkout_cart_handler(
    settings: Settings, uploads: BackgroundImageUploads | None = None
) -> CheckoutCartHandler:
    return CheckoutCartHandler(
        cart_store=cart_store(settings),
        submitter=CheckoutSubmitter(payment_gateway(settings)),
        composer=checkout_composer(settings),
        policies=settings.pricing,
        uploads=uploads,
    )


def buy_now_handler(
    settings: Settings, uploads: BackgroundImageUploads | None = None
) -> BuyNowHandler:
    return BuyNowHandler(
        submitter=CheckoutSubmitter(payment_gateway(settings)),
        composer=checkout_composer(settings),
        policies=settings.pricing,
        medallion_price=settings.medallion_price,
        uploads=uploads,
    )


def fundraiser_checkout_handler(settings: Settings) -> FundraiserCheckoutHandler:
    return FundraiserCheckoutHandler(
        fundraiser_repo=fundraiser_repository(settings),
        submitter=CheckoutSubmitter(payment_gateway(settings)),
        composer=checkout_composer(settings),
        policies=settings.pricing,
    )


def complete_checkout_handler(settings: Settings) -> CompleteCheckoutHandler:
    fundraisers = fundraiser_repository(settings)
    return CompleteCheckoutHandler(
        order_repo=order_repository(settings),
        fundraiser_repo=fundraisers,
        gateway=payment_gateway(settings),
        record_sale=RecordFundraiserSaleHandler(
            fundraisers, fundraiser_sale_repository(settings)
        ),
    )
