"""CLI command that feeds a saved webhook delivery through the order pipeline."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import complete_checkout_handler, payment_gateway
from storefront.infrastructure.config import Settings


@click.command("process")
@click.option("--payload", "payload_file", required=True, type=click.File("r"), help="Raw event body.")
@click.option("--signature", required=True, help="Value of the Stripe-Signature header.")
@click.pass_obj
def webhook_process(settings: Settings, payload_file, signature: str) -> None:
    """Verify a checkout.session.completed event and record its orders."""
    payload = payload_file.read()

    try:
        checkout = payment_gateway(settings).parse_webhook_event(payload, signature)
        if checkout is None:
            click.echo("Event ignored.")
            return
        orders = complete_checkout_handler(settings).handle(checkout)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo(f"Checkout session {checkout.id} was already recorded.")
        return

    for o in orders:
        click.echo(f"Order #{o.id} created: {o.quantity} x '{o.product_name}' ({o.total_amount})")
