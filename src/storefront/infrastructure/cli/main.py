import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.cart_commands import (
    buy_now,
    cart_add,
    cart_checkout,
    cart_clear,
    cart_remove,
    cart_set_delivery,
    cart_set_quantity,
    cart_show,
)
from storefront.infrastructure.cli.fundraiser_commands import (
    fundraiser_checkout,
    fundraiser_create,
    fundraiser_show,
    fundraiser_totals,
)
from storefront.infrastructure.cli.inventory_commands import (
    inventory_add_item,
    inventory_add_variation,
    inventory_set,
    inventory_set_par,
    inventory_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_set_status,
    order_show,
)
from storefront.infrastructure.cli.webhook_commands import webhook_process
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--env-file", default=None, type=click.Path(dir_okay=False), help="Read settings from this .env file.")
@click.option("--log-level", default=None, help="Logging level (overrides STOREFRONT_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, env_file: str | None, log_level: str | None) -> None:
    """Storefront: custom medallions and fundraiser sales"""
    try:
        settings = load_settings(env_file)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def fundraiser() -> None:
    """Manage fundraisers."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def inventory() -> None:
    """Manage blank-stock inventory."""


@cli.group()
def webhook() -> None:
    """Process payment provider webhooks."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_set_quantity)
cart.add_command(cart_set_delivery)
cart.add_command(cart_show)
cart.add_command(cart_clear)
cart.add_command(cart_checkout)
cli.add_command(buy_now)
fundraiser.add_command(fundraiser_create)
fundraiser.add_command(fundraiser_show)
fundraiser.add_command(fundraiser_totals)
fundraiser.add_command(fundraiser_checkout)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_set_status)
inventory.add_command(inventory_add_item)
inventory.add_command(inventory_add_variation)
inventory.add_command(inventory_set)
inventory.add_command(inventory_set_par)
inventory.add_command(inventory_show)
webhook.add_command(webhook_process)
