"""Application service: Fundraiser Totals use case (query)."""

from __future__ import annotations

from storefront.application.dto import FundraiserTotalsDTO
from storefront.application.show_fundraiser import total_raised
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.fundraiser_repository import FundraiserRepository
from storefront.domain.repository.fundraiser_sale_repository import FundraiserSaleRepository


class FundraiserTotalsHandler:

    def __init__(
        self,
        fundraiser_repo: FundraiserRepository,
        sale_repo: FundraiserSaleRepository,
    ) -> None:
        self._fundraiser_repo = fundraiser_repo
        self._sale_repo = sale_repo

    def handle(self, fundraiser_id: str) -> FundraiserTotalsDTO:
        if self._fundraiser_repo.get_by_id(fundraiser_id) is None:
            raise EntityNotFoundError(f"Fundraiser '{fundraiser_id}' not found")

        sales = self._sale_repo.list_by_fundraiser(fundraiser_id)
        # Sales recorded without an order each count as their own order.
        orders = {sale.order_id if sale.order_id is not None else f"sale-{sale.id}" for sale in sales}

        return FundraiserTotalsDTO(
            fundraiser_id=fundraiser_id,
            total_raised=str(total_raised(sales)),
            total_orders=len(orders),
            total_items_sold=sum(sale.quantity for sale in sales),
        )
