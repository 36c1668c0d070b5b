"""InventoryItem aggregate: blank stock on hand, per variation.

The workshop keeps blanks (chains, medallion blanks, shirts) as inventory
items, each with variations such as a size or colour. Every variation has
a quantity on hand and a par level; falling below par means it is time to
restock.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError, ValidationError


def _count(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number, got {value!r}")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")
    return value


@dataclass
class InventoryVariation:
    id: str
    name: str
    quantity: int = 0
    par_level: int = 0


@dataclass
class InventoryItem:
    """Aggregate root for one stocked item and its variations.

    Invariants:
    - quantities and par levels are never negative
    - variation names are unique within the item (case-insensitive)
    """

    id: str
    name: str
    category: str | None = None
    par_level: int = 0
    variations: list[InventoryVariation] = field(default_factory=list)

    @staticmethod
    def create(
        id: str, name: str, category: str | None = None, par_level: int = 0
    ) -> InventoryItem:
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        return InventoryItem(
            id=id,
            name=name.strip(),
            category=category.strip() if category and category.strip() else None,
            par_level=_count(par_level, "Par level"),
        )

    # --- Variations -----------------------------------------------------------

    def add_variation(
        self, name: str, quantity: int = 0, par_level: int = 0
    ) -> InventoryVariation:
        if not name or not name.strip():
            raise ValidationError("Variation name is required")
        name = name.strip()
        if any(v.name.lower() == name.lower() for v in self.variations):
            raise ValidationError(f"'{self.name}' already has a variation named '{name}'")

        variation = InventoryVariation(
            id=f"v{len(self.variations) + 1}",
            name=name,
            quantity=_count(quantity, "Quantity"),
            par_level=_count(par_level, "Par level"),
        )
        self.variations.append(variation)
        return variation

    def variation(self, ref: str) -> InventoryVariation:
        """Look a variation up by id or by name."""
        for variation in self.variations:
            if variation.id == ref or variation.name.lower() == ref.strip().lower():
                return variation
        raise EntityNotFoundError(f"Variation '{ref}' not found in '{self.name}'")

    # --- Stock levels ---------------------------------------------------------

    def par_for(self, variation: InventoryVariation) -> int:
        """A variation's own par level, or the item's when it has none."""
        return variation.par_level or self.par_level

    def is_below_par(self, variation: InventoryVariation) -> bool:
        return variation.quantity < self.par_for(variation)

    def set_quantity(self, ref: str, quantity: int) -> InventoryVariation:
        variation = self.variation(ref)
        variation.quantity = _count(quantity, "Quantity")
        return variation

    def adjust_quantity(self, ref: str, delta: int) -> InventoryVariation:
        """Add or remove stock; the count stops at zero."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError(f"Adjustment must be a whole number, got {delta!r}")
        variation = self.variation(ref)
        variation.quantity = max(0, variation.quantity + delta)
        return variation

    def set_par_level(self, par_level: int, ref: str | None = None) -> None:
        """Set the par level of one variation, or of the item when ``ref`` is None."""
        par_level = _count(par_level, "Par level")
        if ref is None:
            self.par_level = par_level
        else:
            self.variation(ref).par_level = par_level

    def low_stock(self) -> list[InventoryVariation]:
        return [v for v in self.variations if self.is_below_par(v)]
