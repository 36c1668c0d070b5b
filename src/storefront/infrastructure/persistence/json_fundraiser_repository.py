"""JSON-file-backed implementation of FundraiserRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.fundraiser import (
    DonationType,
    Fundraiser,
    FundraiserDonationPolicy,
    FundraiserVariation,
)
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.fundraiser_repository import FundraiserRepository


class JsonFundraiserRepository(FundraiserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- FundraiserRepository interface ---------------------------------------

    def get_by_id(self, fundraiser_id: str) -> Fundraiser | None:
        return self._load().get(fundraiser_id)

    def get_by_custom_link(self, custom_link: str) -> Fundraiser | None:
        for fundraiser in self._load().values():
            if fundraiser.custom_link == custom_link:
                return fundraiser
        return None

    def list_all(self) -> list[Fundraiser]:
        return list(self._load().values())

    def save(self, fundraiser: Fundraiser) -> None:
        fundraisers = self._load()
        fundraisers[fundraiser.id] = fundraiser
        self._persist(fundraisers)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Fundraiser]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    @staticmethod
    def _to_domain(item: dict) -> Fundraiser:
        return Fundraiser(
            id=item["id"],
            title=item["title"],
            custom_link=item["custom_link"],
            base_price=Money(Decimal(item["base_price"])),
            policy=FundraiserDonationPolicy(
                DonationType(item["donation_type"]),
                donation_percentage=Decimal(item.get("donation_percentage") or "0"),
                donation_amount=Decimal(item.get("donation_amount") or "0"),
            ),
            variations=[
                FundraiserVariation(
                    id=v["id"],
                    title=v["title"],
                    price=Money(Decimal(v["price"])),
                    image_path=v.get("image_path"),
                )
                for v in item.get("variations", [])
            ],
            description=item.get("description"),
            pickup_available=item.get("pickup_available", True),
            status=item.get("status", "active"),
            created_at=datetime.fromisoformat(item["created_at"]),
        )

    @staticmethod
    def _to_raw(f: Fundraiser) -> dict:
        return {
            "id": f.id,
            "title": f.title,
            "custom_link": f.custom_link,
            "base_price": str(f.base_price.amount),
            "donation_type": f.policy.donation_type.value,
            "donation_percentage": str(f.policy.donation_percentage),
            "donation_amount": str(f.policy.donation_amount),
            "variations": [
                {
                    "id": v.id,
                    "title": v.title,
                    "price": str(v.price.amount),
                    "image_path": v.image_path,
                }
                for v in f.variations
            ],
            "description": f.description,
            "pickup_available": f.pickup_available,
            "status": f.status,
            "created_at": f.created_at.isoformat(),
        }

    def _persist(self, fundraisers: dict[str, Fundraiser]) -> None:
        raw = [self._to_raw(f) for f in fundraisers.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
