"""Storage handle shared by every repository.

A ``Database`` owns one SQLAlchemy engine and one long-lived
``Connection``. Repositories receive the handle in their constructor;
nothing in the package keeps a module-level connection, so each test
can build an isolated handle against an in-memory SQLite database.

All SQLAlchemy errors are translated here into the domain's
PersistenceError hierarchy.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from donutpos.domain.exceptions import ConstraintError, StorageError
from donutpos.infrastructure.persistence.schema import metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self._engine: Engine = create_engine(url, echo=echo)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._connection: Connection | None = None

    # --- Lifecycle ------------------------------------------------------------

    def open(self) -> Database:
        if self._connection is None:
            try:
                self._connection = self._engine.connect()
            except SQLAlchemyError as exc:
                raise StorageError("open", str(exc)) from exc
            logger.debug("Opened connection to %s", self._engine.url)
        return self

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        self._engine.dispose()
        logger.debug("Closed connection to %s", self._engine.url)

    def __enter__(self) -> Database:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    # --- Schema ---------------------------------------------------------------

    def create_schema(self) -> None:
        """Create any missing table; existing tables are left alone."""
        with self.transaction("create schema") as conn:
            metadata.create_all(conn)
        logger.info("Schema ready at %s", self._engine.url)

    def has_table(self, name: str) -> bool:
        with self.reading("inspect schema") as conn:
            return inspect(conn).has_table(name)

    # --- Units of work --------------------------------------------------------

    @contextmanager
    def transaction(self, operation: str, entity_id: int | None = None) -> Iterator[Connection]:
        """Run the block as one atomic unit.

        Commits when the block completes, rolls back and re-raises on the
        first failure. Either way the connection is back in its idle
        state when the block exits.
        """
        conn = self._require_connection()
        self._end_implicit_transaction(conn)
        try:
            with conn.begin():
                yield conn
        except IntegrityError as exc:
            logger.debug("%s rolled back: %s", operation, exc.orig)
            raise ConstraintError(operation, str(exc.orig), entity_id) from exc
        except SQLAlchemyError as exc:
            logger.debug("%s rolled back: %s", operation, exc)
            raise StorageError(operation, str(exc), entity_id) from exc
        logger.debug("%s committed", operation)

    @contextmanager
    def reading(self, operation: str, entity_id: int | None = None) -> Iterator[Connection]:
        """Run read-only statements without an explicit transaction."""
        conn = self._require_connection()
        try:
            yield conn
        except SQLAlchemyError as exc:
            raise StorageError(operation, str(exc), entity_id) from exc
        finally:
            self._end_implicit_transaction(conn)

    # --- Internal helpers -----------------------------------------------------

    def _require_connection(self) -> Connection:
        if self._connection is None:
            raise StorageError("connect", "database is not open")
        return self._connection

    @staticmethod
    def _end_implicit_transaction(conn: Connection) -> None:
        # SQLAlchemy autobegins on the first statement of a read
        if conn.in_transaction():
            conn.rollback()
