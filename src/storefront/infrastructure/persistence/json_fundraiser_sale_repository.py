"""JSON-file-backed implementation of FundraiserSaleRepository (append-only)."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.fundraiser import FundraiserSale
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.fundraiser_sale_repository import FundraiserSaleRepository


class JsonFundraiserSaleRepository(FundraiserSaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def add(self, sale: FundraiserSale) -> None:
        sales = self._load_raw()
        sale.id = max((s["id"] for s in sales), default=0) + 1
        sales.append(
            {
                "id": sale.id,
                "fundraiser_id": sale.fundraiser_id,
                "variation_id": sale.variation_id,
                "order_id": sale.order_id,
                "checkout_session_id": sale.checkout_session_id,
                "quantity": sale.quantity,
                "amount": str(sale.amount.amount),
                "donation_amount": str(sale.donation_amount.amount),
                "created_at": sale.created_at.isoformat(),
            }
        )
        self._file_path.write_text(json.dumps(sales, indent=2) + "\n", encoding="utf-8")

    def list_by_fundraiser(self, fundraiser_id: str) -> list[FundraiserSale]:
        return [
            FundraiserSale(
                id=raw["id"],
                fundraiser_id=raw["fundraiser_id"],
                variation_id=raw.get("variation_id"),
                quantity=raw["quantity"],
                amount=Money(Decimal(raw["amount"])),
                donation_amount=Money(Decimal(raw["donation_amount"])),
                order_id=raw.get("order_id"),
                checkout_session_id=raw.get("checkout_session_id"),
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
            for raw in self._load_raw()
            if raw["fundraiser_id"] == fundraiser_id
        ]

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
