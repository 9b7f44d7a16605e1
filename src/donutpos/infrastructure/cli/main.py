import logging

import click

from donutpos.infrastructure.cli.menu_commands import (
    menu_add,
    menu_delete,
    menu_list,
    menu_update,
)
from donutpos.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_edit,
    order_list,
    order_show,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every storage unit.")
def cli(verbose: bool) -> None:
    """donutpos: menu and order records for the shop counter"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    # The database is opened by the first subcommand that needs it


@cli.group()
def menu() -> None:
    """Manage menu items."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
menu.add_command(menu_add)
menu.add_command(menu_delete)
menu.add_command(menu_list)
menu.add_command(menu_update)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_edit)
order.add_command(order_list)
order.add_command(order_show)
