"""Application service: Set Inventory use case.

Sets or adjusts the stock of one variation, or changes a par level. When a
change takes a variation below its par level a low-inventory warning is
logged so the workshop knows to restock.
"""

from __future__ import annotations

import logging

from storefront.application.show_inventory import InventoryLineDTO, get_item, inventory_line
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class SetInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self,
        item_ref: str,
        variation_ref: str,
        quantity: int | None = None,
        adjust: int | None = None,
    ) -> InventoryLineDTO:
        """Set the quantity on hand (``quantity``) or change it by ``adjust``."""
        if (quantity is None) == (adjust is None):
            raise ValidationError("Give either a quantity or an adjustment, not both")

        item = get_item(self._inventory_repo, item_ref)
        was_below = item.is_below_par(item.variation(variation_ref))

        if quantity is not None:
            variation = item.set_quantity(variation_ref, quantity)
        else:
            variation = item.adjust_quantity(variation_ref, adjust)  # type: ignore[arg-type]
        self._inventory_repo.save(item)

        line = inventory_line(item, variation)
        if line.below_par and not was_below:
            _warn_low(line)
        return line


class SetParLevelHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self, item_ref: str, par_level: int, variation_ref: str | None = None
    ) -> list[InventoryLineDTO]:
        """Set the par level of the item, or of one of its variations."""
        item = get_item(self._inventory_repo, item_ref)
        before = {v.id for v in item.low_stock()}

        item.set_par_level(par_level, variation_ref)
        self._inventory_repo.save(item)

        lines = [inventory_line(item, v) for v in item.variations]
        for line in lines:
            if line.below_par and line.variation_id not in before:
                _warn_low(line)
        return lines


def _warn_low(line: InventoryLineDTO) -> None:
    logger.warning(
        "Low inventory: %s (%s) has %d on hand, par level %d",
        line.item_name,
        line.variation_name,
        line.quantity,
        line.par_level,
    )
