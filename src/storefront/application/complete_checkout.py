"""Application service: Complete Checkout use case.

Records a paid checkout session reported by the payment provider's
webhook: one Order per purchased product line, plus a fundraiser ledger
entry per line when the session was a fundraiser sale.

Recording is idempotent per session id, so a redelivered webhook does not
double-count orders or donations.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.application.record_fundraiser_sale import RecordFundraiserSaleHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.gateway.payment_gateway import (
    CompletedCheckout,
    PaymentGateway,
    SessionLineItem,
)
from storefront.domain.model.checkout import SHIPPING_LINE_NAME
from storefront.domain.model.order import INITIAL_ORDER_STATUS, Order, OrderStatus
from storefront.domain.model.value_objects import Money, ShippingAddress
from storefront.domain.repository.fundraiser_repository import FundraiserRepository
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CompleteCheckoutHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        fundraiser_repo: FundraiserRepository,
        gateway: PaymentGateway,
        record_sale: RecordFundraiserSaleHandler,
    ) -> None:
        self._order_repo = order_repo
        self._fundraiser_repo = fundraiser_repo
        self._gateway = gateway
        self._record_sale = record_sale

    def handle(self, checkout: CompletedCheckout) -> list[OrderDTO]:
        if self._order_repo.exists_for_session(checkout.id):
            logger.info("Checkout session %s already recorded, skipping", checkout.id)
            return []

        metadata = checkout.metadata
        fundraiser_id = metadata.get("fundraiser_id") or None
        variation_id = metadata.get("variation_id") or None
        is_fundraiser = metadata.get("is_fundraiser") == "true" and fundraiser_id is not None

        # Resolve the fundraiser before writing anything so a bad reference
        # fails the whole webhook and the provider redelivers it.
        if is_fundraiser and self._fundraiser_repo.get_by_id(fundraiser_id) is None:
            raise EntityNotFoundError(f"Fundraiser '{fundraiser_id}' not found")

        lines = self._gateway.list_line_items(checkout.id)
        shipping_lines = [line for line in lines if line.description == SHIPPING_LINE_NAME]
        product_lines = [line for line in lines if line.description != SHIPPING_LINE_NAME]

        if shipping_lines:
            shipping_cost = Money.from_minor_units(sum(line.amount_total for line in shipping_lines))
        else:
            shipping_cost = Money.from_minor_units(checkout.amount_shipping)

        status = OrderStatus.parse(metadata.get("order_status") or INITIAL_ORDER_STATUS.value)
        address = ShippingAddress.from_raw(checkout.shipping_details)

        results: list[OrderDTO] = []
        for index, line in enumerate(product_lines):
            customization = _customization(line, metadata, first=index == 0)
            order = Order.create(
                product_name=line.description,
                price=Money.from_minor_units(line.amount_total),
                quantity=line.quantity,
                customer_email=checkout.customer_email,
                shipping_cost=shipping_cost,
                tax_amount=Money.from_minor_units(checkout.amount_tax),
                total_amount=Money.from_minor_units(checkout.amount_total),
                status=status,
                shipping_address=address,
                is_fundraiser=is_fundraiser,
                fundraiser_id=fundraiser_id if is_fundraiser else None,
                variation_id=variation_id if is_fundraiser else None,
                **customization,
                checkout_session_id=checkout.id,
            )
            self._order_repo.save(order)

            if is_fundraiser:
                self._record_sale.handle(
                    fundraiser_id=fundraiser_id,  # type: ignore[arg-type]
                    variation_id=variation_id,
                    quantity=line.quantity,
                    unit_price=Money(Decimal(line.pre_tax_amount) / 100 / line.quantity),
                    order_id=order.id,
                    checkout_session_id=checkout.id,
                )

            results.append(order_to_dto(order))

        logger.info(
            "Recorded %d order(s) for checkout session %s (fundraiser=%s)",
            len(results),
            checkout.id,
            fundraiser_id if is_fundraiser else "-",
        )
        return results


def _customization(line: SessionLineItem, metadata: dict[str, str], first: bool) -> dict[str, str]:
    """Medallion customization for one order, from the line's product metadata.

    Lines reported without product metadata fall back to the session's
    ``item_*`` keys, which describe the first item of the checkout.
    """
    if line.metadata:
        source = line.metadata
    elif first:
        source = {key[len("item_"):]: value for key, value in metadata.items() if key.startswith("item_")}
    else:
        source = {}

    return {
        "chain_color": source.get("chain_color", ""),
        "team_name": source.get("team_name", ""),
        "team_location": source.get("team_location", ""),
        "image_path": source.get("image_url") or source.get("image_path", ""),
        "image_upload_key": source.get("image_upload_key", ""),
    }
