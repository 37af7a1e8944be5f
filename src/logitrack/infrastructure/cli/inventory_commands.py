"""CLI commands for inventory management."""

from __future__ import annotations

import click

from logitrack.application.dto import item_to_dto
from logitrack.domain.exceptions import DomainException
from logitrack.infrastructure.bootstrap import inventory_service
from logitrack.infrastructure.cli.errors import to_click_exception


@click.command("list")
def inventory_list() -> None:
    """List every inventory item."""
    items = [item_to_dto(item) for item in inventory_service().list_inventory()]

    if not items:
        click.echo("No inventory items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Quantity':>8}  {'Location':<15}")
    click.echo("-" * 52)
    for item in items:
        click.echo(f"{item.id:<6} {item.name:<20} {item.quantity:>8}  {item.location:<15}")


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", default=0, show_default=True, type=int, help="Quantity on hand.")
@click.option("--location", default=None, help="Storage location.")
def inventory_add(name: str, quantity: int, location: str | None) -> None:
    """Add a new inventory item."""
    try:
        item = inventory_service().add_item(name=name, quantity=quantity, location=location)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Inventory item #{item.id} '{item.name}' added (quantity={item.quantity})")


@click.command("delete")
@click.option("--id", "item_id", required=True, type=int, help="Inventory item ID.")
def inventory_delete(item_id: int) -> None:
    """Delete an inventory item."""
    try:
        inventory_service().delete_item(item_id)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Inventory item #{item_id} deleted.")
