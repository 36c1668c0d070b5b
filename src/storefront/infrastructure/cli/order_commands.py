"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import order_repository
from storefront.infrastructure.config import Settings

STATUS_CHOICES = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


@click.command("list")
@click.option("--status", default=None, type=STATUS_CHOICES, help="Only orders in this status.")
@click.pass_obj
def order_list(settings: Settings, status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(settings))

    try:
        orders = handler.handle(status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Product':<24} {'Qty':>5} {'Total':>10} {'Status':<10} {'Customer'}")
    click.echo("-" * 80)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.product_name:<24} {o.quantity:>5} {o.total_amount:>10} {o.status:<10} {o.customer_email}"
        )


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_email or '-'}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.is_fundraiser:
        click.echo("Fundraiser order")
    if dto.shipping_address:
        click.echo(f"Ship to:  {dto.shipping_address}")
    if dto.tracking_number:
        click.echo(f"Tracking: {dto.tracking_number}")
    if dto.chain_color:
        click.echo(f"Chain:    {dto.chain_color}")
    if dto.team_name:
        team = f"{dto.team_name} ({dto.team_location})" if dto.team_location else dto.team_name
        click.echo(f"Team:     {team}")
    if dto.image_path:
        click.echo(f"Image:    {dto.image_path}")
    elif dto.image_upload_key:
        click.echo(f"Image:    uploaded as {dto.image_upload_key}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*41}")
    click.echo(f"  {dto.product_name:<24} {dto.quantity:>5} {dto.price:>10}")
    click.echo(f"  {'-'*41}")
    click.echo(f"  {'Shipping':<21} {dto.shipping_cost:>20}")
    click.echo(f"  {'Tax':<21} {dto.tax_amount:>20}")
    click.echo(f"  {'Order Total':<21} {dto.total_amount:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("set-status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--status", required=True, type=STATUS_CHOICES, help="New status.")
@click.option("--tracking", "tracking_number", default=None, help="Tracking number (shipped/delivered only).")
@click.pass_obj
def order_set_status(
    settings: Settings, order_id: int, status: str, tracking_number: str | None
) -> None:
    """Move an order through production and delivery."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id, status, tracking_number=tracking_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {dto.status}.")
