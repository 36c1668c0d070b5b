"""Application service: Add Inventory Variation use case."""

from __future__ import annotations

from storefront.application.show_inventory import InventoryLineDTO, get_item, inventory_line
from storefront.domain.repository.inventory_repository import InventoryRepository


class AddInventoryVariationHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self, item_ref: str, name: str, quantity: int = 0, par_level: int = 0
    ) -> InventoryLineDTO:
        item = get_item(self._inventory_repo, item_ref)
        variation = item.add_variation(name, quantity, par_level)
        self._inventory_repo.save(item)
        return inventory_line(item, variation)
