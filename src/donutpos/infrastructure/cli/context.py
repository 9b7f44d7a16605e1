"""Shared database handle for the click commands.

The handle is opened by the first command that needs it, so ``--help``
and usage errors never touch the storage. It is kept on the root
context and closed when that context is torn down.
"""

from __future__ import annotations

from functools import update_wrapper

import click

from donutpos.domain.exceptions import DomainException
from donutpos.infrastructure.bootstrap import open_database
from donutpos.infrastructure.persistence.database import Database


def _database(ctx: click.Context) -> Database:
    root = ctx.find_root()
    if isinstance(root.obj, Database):
        return root.obj
    try:
        root.obj = open_database()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    root.call_on_close(root.obj.close)
    return root.obj


def pass_database(f):
    """Like ``click.pass_obj``, but opens the database on first use."""

    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        return ctx.invoke(f, _database(ctx), *args, **kwargs)

    return update_wrapper(new_func, f)
