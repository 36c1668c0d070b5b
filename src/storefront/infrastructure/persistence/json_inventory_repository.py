"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.inventory import InventoryItem, InventoryVariation
from storefront.domain.repository.inventory_repository import InventoryRepository


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- InventoryRepository interface ----------------------------------------

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        for raw in self._load_raw():
            if raw["id"] == item_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> InventoryItem | None:
        wanted = name.strip().lower()
        for raw in self._load_raw():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryItem]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, item: InventoryItem) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == item.id:
                records[i] = self._to_raw(item)
                break
        else:
            records.append(self._to_raw(item))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "category": item.category,
            "par_level": item.par_level,
            "variations": [
                {
                    "id": v.id,
                    "name": v.name,
                    "quantity": v.quantity,
                    "par_level": v.par_level,
                }
                for v in item.variations
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        return InventoryItem(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category"),
            par_level=raw.get("par_level", 0),
            variations=[
                InventoryVariation(
                    id=v["id"],
                    name=v["name"],
                    quantity=v.get("quantity", 0),
                    par_level=v.get("par_level", 0),
                )
                for v in raw.get("variations", [])
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
