"""Tests for the JSON-file order, fundraiser, ledger and inventory repositories."""

from decimal import Decimal

from storefront.domain.model.fundraiser import (
    Fundraiser,
    FundraiserDonationPolicy,
    FundraiserSale,
    FundraiserVariation,
)
from storefront.domain.model.inventory import InventoryItem
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money, ShippingAddress
from storefront.infrastructure.persistence.json_fundraiser_repository import (
    JsonFundraiserRepository,
)
from storefront.infrastructure.persistence.json_fundraiser_sale_repository import (
    JsonFundraiserSaleRepository,
)
from storefront.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository


# ── Orders ───────────────────────────────────────────────────────────────────


class TestJsonOrderRepository:

    def test_save_assigns_ids_and_round_trips(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create(
            "Custom Medallion",
            Money.of("99.98"),
            2,
            customer_email="pat@example.com",
            shipping_cost=Money.of("8"),
            tax_amount=Money.of("5"),
            total_amount=Money.of("112.98"),
            shipping_address=ShippingAddress("1 Main St", "Springfield", "IL", "62701"),
            chain_color="Gold",
            team_name="Hawks",
            team_location="Austin",
            image_upload_key="item-1",
            checkout_session_id="cs_1",
        )

        repo.save(order)

        assert order.id == 1
        loaded = repo.get_by_id(1)
        assert loaded.total_amount == Money.of("112.98")
        assert loaded.shipping_address.zip_code == "62701"
        assert (loaded.chain_color, loaded.team_name, loaded.team_location) == ("Gold", "Hawks", "Austin")
        assert loaded.image_upload_key == "item-1"
        assert loaded.image_path is None
        assert loaded.created_at == order.created_at
        assert repo.exists_for_session("cs_1")
        assert not repo.exists_for_session("cs_2")

    def test_save_updates_in_place(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create("Team Tee", Money.of("20"), 1, is_fundraiser=True, fundraiser_id="f1")
        repo.save(order)

        order.update_status(OrderStatus.SHIPPED, "1Z999")
        repo.save(order)

        [loaded] = repo.list_all()
        assert loaded.status == OrderStatus.SHIPPED
        assert loaded.tracking_number == "1Z999"
        assert loaded.fundraiser_id == "f1"


# ── Fundraisers ──────────────────────────────────────────────────────────────


class TestJsonFundraiserRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonFundraiserRepository(tmp_path / "fundraisers.json")
        fundraiser = Fundraiser.create(
            id="f1",
            title="Hawks Booster Club",
            custom_link="hawks",
            base_price=Money.of("20"),
            policy=FundraiserDonationPolicy.fixed("2.50"),
            variations=[FundraiserVariation("v1", "Tee", Money.of("20"), "https://cdn.example/t.png")],
            pickup_available=False,
        )

        repo.save(fundraiser)

        loaded = repo.get_by_custom_link("hawks")
        assert loaded.id == "f1"
        assert loaded.policy == fundraiser.policy
        assert loaded.variations == fundraiser.variations
        assert not loaded.pickup_available
        assert repo.get_by_id("missing") is None


# ── Donation ledger ──────────────────────────────────────────────────────────


class TestJsonFundraiserSaleRepository:

    def test_append_and_filter(self, tmp_path):
        repo = JsonFundraiserSaleRepository(tmp_path / "sales.json")
        for fundraiser_id in ("f1", "f2", "f1"):
            repo.add(
                FundraiserSale(
                    id=None,
                    fundraiser_id=fundraiser_id,
                    variation_id="v1",
                    quantity=2,
                    amount=Money.of("40"),
                    donation_amount=Money.of("6"),
                )
            )

        sales = repo.list_by_fundraiser("f1")

        assert [s.id for s in sales] == [1, 3]
        assert sales[0].donation_amount.amount == Decimal("6")


# ── Inventory ────────────────────────────────────────────────────────────────


class TestJsonInventoryRepository:

    def test_round_trip_and_lookup_by_name(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        item = InventoryItem.create("i1", "Rope chain", "Chains", par_level=5)
        item.add_variation("Gold 24in", quantity=8, par_level=3)
        repo.save(item)

        item.set_quantity("v1", 2)
        repo.save(item)

        [loaded] = repo.list_all()
        assert loaded == item
        assert repo.get_by_name("ROPE CHAIN").id == "i1"
        assert repo.get_by_id("i2") is None
