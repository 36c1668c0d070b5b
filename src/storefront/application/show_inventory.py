"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.inventory import InventoryItem, InventoryVariation
from storefront.domain.repository.inventory_repository import InventoryRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    item_id: str
    item_name: str
    category: str
    variation_id: str
    variation_name: str
    quantity: int
    par_level: int
    below_par: bool


def inventory_line(item: InventoryItem, variation: InventoryVariation) -> InventoryLineDTO:
    return InventoryLineDTO(
        item_id=item.id,
        item_name=item.name,
        category=item.category or "",
        variation_id=variation.id,
        variation_name=variation.name,
        quantity=variation.quantity,
        par_level=item.par_for(variation),
        below_par=item.is_below_par(variation),
    )


def get_item(inventory_repo: InventoryRepository, ref: str) -> InventoryItem:
    """Find an inventory item by id or by name."""
    item = inventory_repo.get_by_id(ref) or inventory_repo.get_by_name(ref)
    if item is None:
        raise EntityNotFoundError(f"Inventory item not found: '{ref}'")
    return item


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, low_stock_only: bool = False) -> list[InventoryLineDTO]:
        lines = [
            inventory_line(item, variation)
            for item in self._inventory_repo.list_all()
            for variation in item.variations
        ]
        if low_stock_only:
            lines = [line for line in lines if line.below_par]
        return lines
