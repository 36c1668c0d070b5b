"""CLI commands for the Fundraiser aggregate."""

from __future__ import annotations

import click

from storefront.application.create_fundraiser import CreateFundraiserHandler
from storefront.application.dto import FundraiserDTO, FundraiserPurchaseSpec, VariationSpec
from storefront.application.fundraiser_totals import FundraiserTotalsHandler
from storefront.application.show_fundraiser import ShowFundraiserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    fundraiser_checkout_handler,
    fundraiser_repository,
    fundraiser_sale_repository,
)
from storefront.infrastructure.config import Settings


def _parse_variation(raw: str) -> VariationSpec:
    """Parse 'Title:Price' or 'Title:Price:ImageURL' into a VariationSpec."""
    parts = raw.split(":", 2)
    if len(parts) < 2:
        raise click.BadParameter(
            f"Invalid variation format '{raw}'. Expected 'Title:Price[:ImageURL]'."
        )
    title, price = parts[0].strip(), parts[1].strip()
    image = parts[2].strip() if len(parts) == 3 else None
    return VariationSpec(title=title, price=price, image_path=image or None)


@click.command("create")
@click.option("--title", required=True, help="Fundraiser title.")
@click.option("--link", "custom_link", required=True, help="Custom link slug.")
@click.option("--price", "base_price", required=True, help="Base price (e.g. 25.00).")
@click.option(
    "--donation-type",
    required=True,
    type=click.Choice(["percentage", "fixed"], case_sensitive=False),
    help="How the donation is computed.",
)
@click.option("--percentage", default=None, help="Donation percentage (0-100).")
@click.option("--amount", default=None, help="Fixed donation per item.")
@click.option("--variation", "variations", multiple=True, help="Variation as 'Title:Price[:ImageURL]'. Repeatable.")
@click.option("--description", default=None)
@click.option("--no-pickup", is_flag=True, default=False, help="Disable team pickup.")
@click.pass_obj
def fundraiser_create(
    settings: Settings,
    title: str,
    custom_link: str,
    base_price: str,
    donation_type: str,
    percentage: str | None,
    amount: str | None,
    variations: tuple[str, ...],
    description: str | None,
    no_pickup: bool,
) -> None:
    """Create a new fundraiser."""
    specs = [_parse_variation(raw) for raw in variations]
    handler = CreateFundraiserHandler(fundraiser_repo=fundraiser_repository(settings))

    try:
        dto = handler.handle(
            title=title,
            custom_link=custom_link,
            base_price=base_price,
            donation_type=donation_type,
            donation_percentage=percentage,
            donation_amount=amount,
            variations=specs or None,
            description=description,
            pickup_available=not no_pickup,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Fundraiser '{dto.title}' created  (id={dto.id}, link=/{dto.custom_link})")
    _display_variations(dto)


def _display_variations(dto: FundraiserDTO) -> None:
    click.echo(f"  {'ID':<6} {'Variation':<24} {'Price':>10} {'Donation':>10}")
    click.echo(f"  {'-'*53}")
    for v in dto.variations:
        click.echo(f"  {v.id:<6} {v.title:<24} {v.price:>10} {v.donation_preview:>10}")


@click.command("show")
@click.option("--id", "id_or_link", required=True, help="Fundraiser ID or custom link.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Quantity for the donation preview.")
@click.pass_obj
def fundraiser_show(settings: Settings, id_or_link: str, quantity: int) -> None:
    """Show a fundraiser page: variations and donation progress."""
    handler = ShowFundraiserHandler(
        fundraiser_repo=fundraiser_repository(settings),
        sale_repo=fundraiser_sale_repository(settings),
    )

    try:
        dto = handler.handle(id_or_link, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.title}  (status={dto.status}, link=/{dto.custom_link})")
    click.echo(dto.donation_text)
    click.echo(f"Team pickup: {'available' if dto.pickup_available else 'not available'}")
    click.echo()
    _display_variations(dto)


@click.command("totals")
@click.option("--id", "fundraiser_id", required=True, help="Fundraiser ID.")
@click.pass_obj
def fundraiser_totals(settings: Settings, fundraiser_id: str) -> None:
    """Show money raised, orders, and items sold."""
    handler = FundraiserTotalsHandler(
        fundraiser_repo=fundraiser_repository(settings),
        sale_repo=fundraiser_sale_repository(settings),
    )

    try:
        dto = handler.handle(fundraiser_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total raised:     {dto.total_raised}")
    click.echo(f"Total orders:     {dto.total_orders}")
    click.echo(f"Total items sold: {dto.total_items_sold}")


@click.command("checkout")
@click.option("--id", "fundraiser_id", required=True, help="Fundraiser ID.")
@click.option("--variation", "variation_id", required=True, help="Variation ID.")
@click.option("--quantity", default=1, show_default=True, type=int)
@click.option(
    "--delivery",
    default="shipping",
    type=click.Choice(["shipping", "pickup"], case_sensitive=False),
)
@click.option("--age-division", default=None, help="Age division (pickup only).")
@click.option("--team", "team_name", default=None, help="Team name (pickup only).")
@click.option("--email", default=None, help="Customer email to prefill.")
@click.pass_obj
def fundraiser_checkout(
    settings: Settings,
    fundraiser_id: str,
    variation_id: str,
    quantity: int,
    delivery: str,
    age_division: str | None,
    team_name: str | None,
    email: str | None,
) -> None:
    """Buy a fundraiser variation straight from its page."""
    spec = FundraiserPurchaseSpec(
        fundraiser_id=fundraiser_id,
        variation_id=variation_id,
        quantity=quantity,
        delivery_method=delivery,
        age_division=age_division,
        team_name=team_name,
    )

    try:
        result = fundraiser_checkout_handler(settings).handle(spec, customer_email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Checkout session {result.session_id} created.")
    click.echo(f"Complete your payment at: {result.url}")
