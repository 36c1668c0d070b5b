"""Application service: Record Fundraiser Sale use case.

Writes the authoritative ledger entry for a fundraiser sale. The donation
comes from ``compute_donation``, the same function behind the preview a
buyer sees before paying.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.fundraiser import FundraiserSale
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.fundraiser_repository import FundraiserRepository
from storefront.domain.repository.fundraiser_sale_repository import FundraiserSaleRepository
from storefront.domain.service.donation import compute_donation

logger = logging.getLogger(__name__)


class RecordFundraiserSaleHandler:

    def __init__(
        self,
        fundraiser_repo: FundraiserRepository,
        sale_repo: FundraiserSaleRepository,
    ) -> None:
        self._fundraiser_repo = fundraiser_repo
        self._sale_repo = sale_repo

    def handle(
        self,
        fundraiser_id: str,
        variation_id: str | None,
        quantity: int,
        unit_price: Money,
        order_id: int | None = None,
        checkout_session_id: str | None = None,
    ) -> FundraiserSale:
        fundraiser = self._fundraiser_repo.get_by_id(fundraiser_id)
        if fundraiser is None:
            raise EntityNotFoundError(f"Fundraiser '{fundraiser_id}' not found")

        sale = FundraiserSale(
            id=None,
            fundraiser_id=fundraiser.id,
            variation_id=variation_id,
            quantity=quantity,
            amount=unit_price * quantity,
            donation_amount=compute_donation(fundraiser.policy, unit_price, quantity),
            order_id=order_id,
            checkout_session_id=checkout_session_id,
        )
        self._sale_repo.add(sale)
        logger.info(
            "Recorded fundraiser sale %s for %s: %d item(s), donation %s",
            sale.id,
            fundraiser.id,
            quantity,
            sale.donation_amount,
        )
        return sale
