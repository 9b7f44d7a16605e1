"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from donutpos.application.create_order import CreateOrderHandler
from donutpos.application.dto import OrderDTO, OrderItemSpec
from donutpos.application.edit_order import EditOrderHandler
from donutpos.application.list_orders import ListOrdersHandler
from donutpos.application.show_order import ShowOrderHandler
from donutpos.domain.exceptions import DomainException
from donutpos.infrastructure.bootstrap import (
    menu_item_repository,
    order_repository,
    transaction_id_generator,
)
from donutpos.infrastructure.cli.context import pass_database
from donutpos.infrastructure.persistence.database import Database


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:2,3:1' (menu item id : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(menu_item_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Item id and quantity must be integers."
            )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  {dto.transaction_id}")
    click.echo(f"Date:  {dto.ordered_at}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.name:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ItemId:Qty,ItemId:Qty'.")
@pass_database
def order_create(database: Database, items: str) -> None:
    """Create and save a new order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(database),
        menu_repo=menu_item_repository(database),
        id_generator=transaction_id_generator(database),
    )

    try:
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order saved: {dto.transaction_id}")
    _display_order(dto)


@click.command("edit")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to edit.")
@click.option("--items", required=True, help="Replacement items as 'ItemId:Qty,...'.")
@pass_database
def order_edit(database: Database, order_id: int, items: str) -> None:
    """Replace the items of a saved order."""
    specs = _parse_items(items)

    handler = EditOrderHandler(
        order_repo=order_repository(database),
        menu_repo=menu_item_repository(database),
    )

    try:
        dto = handler.handle(order_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order saved: {dto.transaction_id}")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@pass_database
def order_show(database: Database, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(database))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@pass_database
def order_list(database: Database) -> None:
    """List saved orders, most recent first."""
    handler = ListOrdersHandler(order_repo=order_repository(database))

    try:
        headers = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not headers:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Transaction':<18} {'Date':<17} {'Total':>10}")
    click.echo("-" * 54)
    for h in headers:
        click.echo(f"{h.id:<6} {h.transaction_id:<18} {h.ordered_at:<17} {h.total:>10}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.confirmation_option(prompt="Delete this order?")
@pass_database
def order_delete(database: Database, order_id: int) -> None:
    """Delete an order and all of its items."""
    try:
        order_repository(database).delete(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
