"""Abstract repository for Fundraiser aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.fundraiser import Fundraiser


class FundraiserRepository(ABC):

    @abstractmethod
    def get_by_id(self, fundraiser_id: str) -> Fundraiser | None:
        """Return a fundraiser by its ID, or None if not found."""

    @abstractmethod
    def get_by_custom_link(self, custom_link: str) -> Fundraiser | None:
        """Return the fundraiser published under a custom link, or None."""

    @abstractmethod
    def list_all(self) -> list[Fundraiser]:
        """Return every fundraiser."""

    @abstractmethod
    def save(self, fundraiser: Fundraiser) -> None:
        """Persist a new or updated fundraiser."""
