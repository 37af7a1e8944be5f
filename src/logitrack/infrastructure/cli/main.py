import logging

import click

from logitrack.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_delete,
    inventory_list,
)
from logitrack.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
)
from logitrack.infrastructure.config import load_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """LogiTrack — inventory and order tracking"""
    level = "DEBUG" if verbose else load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
inventory.add_command(inventory_add)
inventory.add_command(inventory_delete)
inventory.add_command(inventory_list)
