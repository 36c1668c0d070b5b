"""Abstract repository for the fundraiser donation ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.fundraiser import FundraiserSale


class FundraiserSaleRepository(ABC):

    @abstractmethod
    def add(self, sale: FundraiserSale) -> None:
        """Append a ledger entry, assigning its ID."""

    @abstractmethod
    def list_by_fundraiser(self, fundraiser_id: str) -> list[FundraiserSale]:
        """Return every ledger entry recorded for a fundraiser."""
