"""Application service: Add Inventory Item use case."""

from __future__ import annotations

import uuid

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.inventory import InventoryItem
from storefront.domain.repository.inventory_repository import InventoryRepository


class AddInventoryItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, name: str, category: str | None = None, par_level: int = 0) -> InventoryItem:
        """Add a new stocked item with no variations yet."""
        if name and self._inventory_repo.get_by_name(name) is not None:
            raise ValidationError(f"Inventory item '{name.strip()}' already exists")

        item = InventoryItem.create(uuid.uuid4().hex, name, category, par_level)
        self._inventory_repo.save(item)
        return item
