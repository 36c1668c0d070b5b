"""Application service: Show Fundraiser use case (query).

Includes the public donation banner text and, for each variation, the
donation a purchase of ``quantity`` items would earn. The preview uses
the same calculator as the ledger.
"""

from __future__ import annotations

from storefront.application.dto import FundraiserDTO, VariationDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.fundraiser import Fundraiser, FundraiserSale
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.fundraiser_repository import FundraiserRepository
from storefront.domain.repository.fundraiser_sale_repository import FundraiserSaleRepository
from storefront.domain.service.donation import compute_donation


def total_raised(sales: list[FundraiserSale]) -> Money:
    result = Money.zero()
    for sale in sales:
        result = result + sale.donation_amount
    return result


def fundraiser_to_dto(fundraiser: Fundraiser, raised: Money, quantity: int = 1) -> FundraiserDTO:
    return FundraiserDTO(
        id=fundraiser.id,
        title=fundraiser.title,
        custom_link=fundraiser.custom_link,
        base_price=str(fundraiser.base_price),
        status=fundraiser.status,
        donation_text=fundraiser.donation_text(raised),
        pickup_available=fundraiser.pickup_available,
        variations=[
            VariationDTO(
                id=v.id,
                title=v.title,
                price=str(v.price),
                donation_preview=str(compute_donation(fundraiser.policy, v.price, quantity)),
            )
            for v in fundraiser.variations
        ],
    )


class ShowFundraiserHandler:

    def __init__(
        self,
        fundraiser_repo: FundraiserRepository,
        sale_repo: FundraiserSaleRepository,
    ) -> None:
        self._fundraiser_repo = fundraiser_repo
        self._sale_repo = sale_repo

    def handle(self, id_or_link: str, quantity: int = 1) -> FundraiserDTO:
        fundraiser = self._fundraiser_repo.get_by_id(id_or_link)
        if fundraiser is None:
            fundraiser = self._fundraiser_repo.get_by_custom_link(id_or_link.lower())
        if fundraiser is None:
            raise EntityNotFoundError(f"Fundraiser '{id_or_link}' not found")

        raised = total_raised(self._sale_repo.list_by_fundraiser(fundraiser.id))
        return fundraiser_to_dto(fundraiser, raised, quantity)
