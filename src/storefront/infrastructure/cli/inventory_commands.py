"""CLI commands for blank-stock inventory."""

from __future__ import annotations

import click

from storefront.application.add_inventory_item import AddInventoryItemHandler
from storefront.application.add_inventory_variation import AddInventoryVariationHandler
from storefront.application.set_inventory import SetInventoryHandler, SetParLevelHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import inventory_repository
from storefront.infrastructure.config import Settings


@click.command("add-item")
@click.option("--name", required=True, help="Item name, e.g. 'Rope chain'.")
@click.option("--category", default=None, help="Category, e.g. 'Chains'.")
@click.option("--par-level", default=0, type=click.IntRange(min=0), help="Default restock threshold.")
@click.pass_obj
def inventory_add_item(settings: Settings, name: str, category: str | None, par_level: int) -> None:
    """Add a stocked item."""
    handler = AddInventoryItemHandler(inventory_repo=inventory_repository(settings))

    try:
        item = handler.handle(name, category=category, par_level=par_level)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory item '{item.name}' added  (id={item.id})")


@click.command("add-variation")
@click.option("--item", "item_ref", required=True, help="Item id or name.")
@click.option("--name", required=True, help="Variation name, e.g. 'Gold 24in'.")
@click.option("--quantity", default=0, type=click.IntRange(min=0), help="Quantity on hand.")
@click.option("--par-level", default=0, type=click.IntRange(min=0), help="Restock threshold (0 = item's).")
@click.pass_obj
def inventory_add_variation(
    settings: Settings, item_ref: str, name: str, quantity: int, par_level: int
) -> None:
    """Add a variation to a stocked item."""
    handler = AddInventoryVariationHandler(inventory_repo=inventory_repository(settings))

    try:
        line = handler.handle(item_ref, name, quantity=quantity, par_level=par_level)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variation '{line.variation_name}' added to '{line.item_name}'  (id={line.variation_id})")


@click.command("set")
@click.option("--item", "item_ref", required=True, help="Item id or name.")
@click.option("--variation", "variation_ref", required=True, help="Variation id or name.")
@click.option("--quantity", default=None, type=int, help="New quantity on hand.")
@click.option("--adjust", default=None, type=int, help="Add (or with a minus sign, remove) stock.")
@click.pass_obj
def inventory_set(
    settings: Settings,
    item_ref: str,
    variation_ref: str,
    quantity: int | None,
    adjust: int | None,
) -> None:
    """Set or adjust the stock of a variation."""
    handler = SetInventoryHandler(inventory_repo=inventory_repository(settings))

    try:
        line = handler.handle(item_ref, variation_ref, quantity=quantity, adjust=adjust)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{line.item_name} ({line.variation_name}): {line.quantity} on hand")
    if line.below_par:
        click.echo(f"Below par level ({line.par_level}), restock soon.")


@click.command("set-par")
@click.option("--item", "item_ref", required=True, help="Item id or name.")
@click.option("--variation", "variation_ref", default=None, help="Only this variation.")
@click.option("--par-level", required=True, type=click.IntRange(min=0), help="Restock threshold.")
@click.pass_obj
def inventory_set_par(
    settings: Settings, item_ref: str, variation_ref: str | None, par_level: int
) -> None:
    """Change the par level of an item or one of its variations."""
    handler = SetParLevelHandler(inventory_repo=inventory_repository(settings))

    try:
        lines = handler.handle(item_ref, par_level, variation_ref=variation_ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    low = sum(1 for line in lines if line.below_par)
    click.echo(f"Par level set to {par_level}; {low} variation(s) below par.")


@click.command("show")
@click.option("--low", "low_stock_only", is_flag=True, help="Only variations below par.")
@click.pass_obj
def inventory_show(settings: Settings, low_stock_only: bool) -> None:
    """Show stock levels."""
    handler = ShowInventoryHandler(inventory_repo=inventory_repository(settings))
    lines = handler.handle(low_stock_only=low_stock_only)

    if not lines:
        click.echo("Nothing below par." if low_stock_only else "No inventory records found.")
        return

    click.echo(f"{'Item':<20} {'Variation':<16} {'On hand':>8} {'Par':>6}")
    click.echo("-" * 54)
    for line in lines:
        flag = "  LOW" if line.below_par else ""
        click.echo(
            f"{line.item_name:<20} {line.variation_name:<16} {line.quantity:>8} {line.par_level:>6}{flag}"
        )
