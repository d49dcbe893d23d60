"""Builder façade: the entry point for building statements.

``SQLBuilder`` holds only the dialect (and whether to log statements).  It is
safe to share across threads: every :meth:`SQLBuilder.wrap` call creates an
independent :class:`~sqlwrap.compile.state.QueryState`, so concurrent builds
never touch shared mutable state::

    builder = new_pg_builder()

    compiled = builder.wrap(
        table("user"),
        where_in("id IN (?)", [1, 2, 3]),
    ).to_query()
    # SELECT * FROM user WHERE id IN ($1, $2, $3)   [1, 2, 3]
"""
from __future__ import annotations

from sqlwrap.compile.context import BuildContext
from sqlwrap.compile.options import QueryOption
from sqlwrap.compile.state import QueryState
from sqlwrap.compile.wrapper import SQLWrapper
from sqlwrap.config import get_settings
from sqlwrap.dialect.base import Driver
from sqlwrap.dialect.registry import RebinderFactory


class SQLBuilder:
    """Creates :class:`SQLWrapper` instances for one dialect.

    Args:
        driver: Driver name or :class:`Driver` whose rebinder is used.
        log_statements: Emit structured log events for built statements.

    Raises:
        UnsupportedDialectError: If no rebinder is registered for ``driver``.
    """

    def __init__(self, driver: str | Driver, log_statements: bool = False) -> None:
        self._ctx = BuildContext(
            rebinder=RebinderFactory.create(driver),
            log_statements=log_statements,
        )

    @property
    def dialect(self) -> str:
        return self._ctx.dialect

    def wrap(self, *options: QueryOption) -> SQLWrapper:
        """Apply ``options`` in order to a fresh state and return its wrapper."""
        state = QueryState()
        for option in options:
            option(state)
        return SQLWrapper(self._ctx, state)


def new_builder(driver: str | Driver | None = None) -> SQLBuilder:
    """Return a builder for ``driver``, defaulting to ``SQLWRAP_DRIVER``.

    Statement logging follows ``SQLWRAP_LOG_STATEMENTS``.
    """
    settings = get_settings()
    return SQLBuilder(driver or settings.driver, log_statements=settings.log_statements)


def new_mysql_builder() -> SQLBuilder:
    """Return a builder for MySQL (``?`` placeholders)."""
    return new_builder(Driver.MYSQL)


def new_pg_builder() -> SQLBuilder:
    """Return a builder for PostgreSQL (``$N`` placeholders, ``RETURNING id``)."""
    return new_builder(Driver.POSTGRES)


def new_sqlite_builder() -> SQLBuilder:
    """Return a builder for SQLite (``?`` placeholders)."""
    return new_builder(Driver.SQLITE)
