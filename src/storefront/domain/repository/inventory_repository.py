"""Abstract repository for InventoryItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem | None:
        """Return an inventory item by its ID, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> InventoryItem | None:
        """Return an inventory item by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every inventory item."""

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Persist a new or updated inventory item."""
