"""CLI commands for the menu item catalog."""

from __future__ import annotations

import click

from donutpos.application.add_menu_item import AddMenuItemHandler
from donutpos.application.dto import MenuItemDTO
from donutpos.application.update_menu_item import UpdateMenuItemHandler
from donutpos.domain.exceptions import DomainException
from donutpos.infrastructure.bootstrap import menu_item_repository
from donutpos.infrastructure.cli.context import pass_database
from donutpos.infrastructure.persistence.database import Database


@click.command("list")
@pass_database
def menu_list(database: Database) -> None:
    """List all menu items."""
    try:
        items = menu_item_repository(database).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No menu items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Description")
    click.echo("-" * 60)
    for item in map(MenuItemDTO.from_item, items):
        click.echo(f"{item.id:<6} {item.name:<20} {item.price:>10}  {item.description}")


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Price (e.g. 1.50).")
@click.option("--description", default="", help="Short description.")
@pass_database
def menu_add(database: Database, name: str, price: str, description: str) -> None:
    """Add a new item to the menu."""
    handler = AddMenuItemHandler(menu_repo=menu_item_repository(database))

    try:
        item = handler.handle(name=name, price=price, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu item #{item.id} '{item.name}' added at {item.price}")


@click.command("update")
@click.option("--id", "item_id", required=True, type=int, help="Menu item ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 1.95).")
@click.option("--description", default=None, help="New description.")
@pass_database
def menu_update(
    database: Database,
    item_id: int,
    name: str | None,
    price: str | None,
    description: str | None,
) -> None:
    """Edit an existing menu item."""
    if name is None and price is None and description is None:
        raise click.UsageError("Nothing to update: pass --name, --price or --description.")

    handler = UpdateMenuItemHandler(menu_repo=menu_item_repository(database))

    try:
        item = handler.handle(item_id, name=name, price=price, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu item #{item.id} is now '{item.name}' at {item.price}")


@click.command("delete")
@click.option("--id", "item_id", required=True, type=int, help="Menu item ID.")
@click.confirmation_option(prompt="Delete this menu item?")
@pass_database
def menu_delete(database: Database, item_id: int) -> None:
    """Remove an item from the menu."""
    try:
        menu_item_repository(database).delete(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu item #{item_id} deleted.")
