"""CLI commands for the cart and the direct buy-now checkout."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, FundraiserPurchaseSpec, MedallionSpec
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import ShippingAddress
from storefront.infrastructure.bootstrap import (
    add_fundraiser_item_handler,
    add_medallion_handler,
    buy_now_handler,
    cart_store,
    checkout_cart_handler,
    image_uploads,
)
from storefront.infrastructure.config import Settings

DELIVERY_CHOICES = click.Choice(["shipping", "pickup"], case_sensitive=False)


def _medallion_options(func):
    func = click.option("--chain-color", default=None, help="Chain color (default: Designers' Choice).")(func)
    func = click.option("--team-location", default=None, help="Team location printed on the medallion.")(func)
    func = click.option("--team-name", default=None, help="Team name printed on the medallion.")(func)
    func = click.option("--image", default=None, help="Image URL or data: URI.")(func)
    func = click.option("--quantity", default=1, show_default=True, type=int, help="Number of medallions.")(func)
    return func


@click.command("add")
@_medallion_options
@click.option("--fundraiser", "fundraiser_id", default=None, help="Add a fundraiser item instead of a medallion.")
@click.option("--variation", "variation_id", default=None, help="Fundraiser variation ID.")
@click.option("--delivery", default="shipping", type=DELIVERY_CHOICES, help="Fundraiser delivery method.")
@click.option("--age-division", default=None, help="Age division (pickup only).")
@click.pass_obj
def cart_add(
    settings: Settings,
    quantity: int,
    image: str | None,
    team_name: str | None,
    team_location: str | None,
    chain_color: str | None,
    fundraiser_id: str | None,
    variation_id: str | None,
    delivery: str,
    age_division: str | None,
) -> None:
    """Add a custom medallion or a fundraiser item to the cart."""
    try:
        if fundraiser_id:
            if not variation_id:
                raise click.BadParameter("--fundraiser requires --variation")
            dto = add_fundraiser_item_handler(settings).handle(
                FundraiserPurchaseSpec(
                    fundraiser_id=fundraiser_id,
                    variation_id=variation_id,
                    quantity=quantity,
                    delivery_method=delivery,
                    age_division=age_division,
                    team_name=team_name,
                )
            )
        else:
            dto = add_medallion_handler(settings).handle(
                MedallionSpec(
                    quantity=quantity,
                    image_reference=image,
                    team_name=team_name,
                    team_location=team_location,
                    chain_color=chain_color,
                )
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {dto.quantity} x '{dto.product_name}' at {dto.unit_price}  (item {dto.id})")


@click.command("remove")
@click.option("--id", "item_id", required=True, help="Cart item ID.")
@click.pass_obj
def cart_remove(settings: Settings, item_id: str) -> None:
    """Remove an item from the cart."""
    handler = RemoveFromCartHandler(cart_store=cart_store(settings))

    try:
        removed = handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if removed:
        click.echo(f"Item {item_id} removed.")
    else:
        click.echo(f"Item {item_id} was not in the cart.")


@click.command("set-quantity")
@click.option("--id", "item_id", required=True, help="Cart item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (values below 1 become 1).")
@click.pass_obj
def cart_set_quantity(settings: Settings, item_id: str, quantity: int) -> None:
    """Change the quantity of a cart item."""
    handler = UpdateCartItemHandler(cart_store=cart_store(settings))

    try:
        dto = handler.handle(item_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item_id} quantity set to {dto.quantity}")


@click.command("set-delivery")
@click.option("--id", "item_id", required=True, help="Cart item ID.")
@click.option("--delivery", required=True, type=DELIVERY_CHOICES, help="Delivery method.")
@click.pass_obj
def cart_set_delivery(settings: Settings, item_id: str, delivery: str) -> None:
    """Change the delivery method of a fundraiser item."""
    handler = UpdateCartItemHandler(cart_store=cart_store(settings))

    try:
        dto = handler.handle(item_id, delivery_method=delivery)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item_id} delivery set to {dto.delivery_method}")


def _display_cart(dto: CartDTO) -> None:
    click.echo(f"  {'ID':<34} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*87}")
    for item in dto.items:
        name = item.product_name
        if item.team_name:
            name = f"{name} ({item.team_name})"
        click.echo(
            f"  {item.id:<34} {name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*87}")
    click.echo(f"  {'Subtotal':<65} {dto.subtotal:>20}")
    click.echo(f"  {'Shipping (' + dto.delivery_method + ')':<65} {dto.shipping:>20}")
    click.echo(f"  {'Tax':<65} {dto.tax:>20}")
    click.echo(f"  {'Total':<65} {dto.total:>20}")


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the cart with its totals."""
    try:
        handler = ShowCartHandler(cart_store=cart_store(settings), policies=settings.pricing)
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto.is_empty:
        click.echo("Your cart is empty.")
        return

    _display_cart(dto)


@click.command("clear")
@click.pass_obj
def cart_clear(settings: Settings) -> None:
    """Remove every item from the cart."""
    try:
        cart_store(settings).clear()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("checkout")
@click.option("--email", default=None, help="Customer email to prefill.")
@click.option("--address", default=None, help="Street address.")
@click.option("--city", default=None)
@click.option("--state", default=None)
@click.option("--zip", "zip_code", default=None)
@click.pass_obj
def cart_checkout(
    settings: Settings,
    email: str | None,
    address: str | None,
    city: str | None,
    state: str | None,
    zip_code: str | None,
) -> None:
    """Check out the cart through the hosted payment page."""
    shipping_address = None
    if any([address, city, state, zip_code]):
        shipping_address = ShippingAddress.from_raw(
            {"address": address, "city": city, "state": state, "zip_code": zip_code}
        )
    uploads = image_uploads(settings)
    handler = checkout_cart_handler(settings, uploads=uploads)

    try:
        result = handler.handle(customer_email=email, shipping_address=shipping_address)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        uploads.shutdown(wait=True)

    click.echo(f"Checkout session {result.session_id} created.")
    click.echo(f"Complete your payment at: {result.url}")


@click.command("buy-now")
@_medallion_options
@click.option("--email", default=None, help="Customer email to prefill.")
@click.pass_obj
def buy_now(
    settings: Settings,
    quantity: int,
    image: str | None,
    team_name: str | None,
    team_location: str | None,
    chain_color: str | None,
    email: str | None,
) -> None:
    """Check out a single custom medallion without using the cart."""
    spec = MedallionSpec(
        quantity=quantity,
        image_reference=image,
        team_name=team_name,
        team_location=team_location,
        chain_color=chain_color,
    )
    uploads = image_uploads(settings)
    handler = buy_now_handler(settings, uploads=uploads)

    try:
        result = handler.handle(spec, customer_email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        uploads.shutdown(wait=True)

    click.echo(f"Checkout session {result.session_id} created.")
    click.echo(f"Complete your payment at: {result.url}")
