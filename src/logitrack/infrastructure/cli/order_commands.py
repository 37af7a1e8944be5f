"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from logitrack.application.dto import OrderDTO, order_to_dto
from logitrack.domain.exceptions import DomainException
from logitrack.infrastructure.bootstrap import order_service
from logitrack.infrastructure.cli.errors import to_click_exception


def _parse_item_ids(raw: str) -> list[int]:
    """Parse '1,2,3' into a list of inventory item IDs."""
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item ID '{part}'. Expected a comma-separated list of integers."
            )
    return ids


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Date:     {dto.order_date}")
    click.echo()

    if not dto.items:
        click.echo("  (no items)")
        return

    click.echo(f"  {'ID':<6} {'Name':<20} {'Location':<15}")
    click.echo(f"  {'-'*43}")
    for item in dto.items:
        click.echo(f"  {item.id:<6} {item.name:<20} {item.location:<15}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", "items_str", default="", help="Inventory item IDs as '1,2,3'.")
def order_create(customer: str, items_str: str) -> None:
    """Create a new order from existing inventory items."""
    item_ids = _parse_item_ids(items_str)

    try:
        order = order_service().create_order(customer_name=customer, item_ids=item_ids)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Order #{order.id} created.")
    _display_order(order_to_dto(order))


@click.command("list")
def order_list() -> None:
    """List every order."""
    orders = [order_to_dto(order) for order in order_service().list_orders()]

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Date':<20} {'Items':>5}")
    click.echo("-" * 54)
    for dto in orders:
        click.echo(f"{dto.id:<6} {dto.customer_name:<20} {dto.order_date:<20} {len(dto.items):>5}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        order = order_service().show_order(order_id)
    except DomainException as exc:
        raise to_click_exception(exc)

    _display_order(order_to_dto(order))


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order."""
    try:
        order_service().delete_order(order_id)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Order #{order_id} deleted.")
