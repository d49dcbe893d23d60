"""Statement assembly for one configured query.

``SQLWrapper`` is the per-statement assembler returned by
``SQLBuilder.wrap``.  Each terminal operation renders dialect-neutral SQL
through the clause builders, runs IN-expansion when a ``where_in`` option
(or a unioned sub-query using one) asked for it, then rebinds placeholders
for the builder's dialect.

Pipeline per terminal call
--------------------------
1. render       clause_builders -> ``("... ?", binds)``
2. expand       :func:`~sqlwrap.dialect.expand.expand_in` (query/update/delete only)
3. rebind       :meth:`~sqlwrap.dialect.base.Rebinder.rebind`
4. package      :class:`~sqlwrap.dialect.base.CompiledSQL`
"""
from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from sqlwrap.compile.clause_builders import (
    DeleteClauseBuilder,
    InsertClauseBuilder,
    SelectClauseBuilder,
    UnionClauseBuilder,
    UpdateClauseBuilder,
)
from sqlwrap.compile.context import BuildContext
from sqlwrap.compile.state import QueryState
from sqlwrap.dialect.base import CompiledSQL
from sqlwrap.dialect.expand import expand_in
from sqlwrap.errors import SQLWrapError
from sqlwrap.schema.payload import resolve_batch, resolve_single
from sqlwrap.schema.reflector import reflect_assignments, reflect_batch, reflect_single
from sqlwrap.utils.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _statement(kind: str) -> Callable[[F], F]:
    """Log rejected builds of ``kind`` when statement logging is enabled."""

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def run(self: SQLWrapper, *args: Any, **kwargs: Any) -> Any:
            try:
                return method(self, *args, **kwargs)
            except SQLWrapError as exc:
                if self._ctx.log_statements:
                    logger.warning(
                        "statement_rejected",
                        statement=kind,
                        dialect=self._ctx.dialect,
                        error=str(exc),
                    )
                raise

        return run  # type: ignore[return-value]

    return decorator


class SQLWrapper:
    """Builds statements from one configured :class:`QueryState`.

    Args:
        ctx: Build context of the owning builder.
        state: The option-configured state for this statement.
    """

    def __init__(self, ctx: BuildContext, state: QueryState) -> None:
        self._ctx = ctx
        self._state = state

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def dialect(self) -> str:
        return self._ctx.dialect

    def subquery(self) -> tuple[str, list[Any]]:
        """Return the base ``SELECT`` (without unions) and its binds.

        Used when this wrapper is unioned into another query.
        """
        return SelectClauseBuilder().build(self._state)

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    @_statement("query")
    def to_query(self) -> CompiledSQL:
        """Return the ``SELECT`` statement and binds.

        Raises:
            RebindError: If IN-expansion rejects the statement.
        """
        sql, binds = self.subquery()
        if self._state.unions:
            sql, binds = UnionClauseBuilder().build(sql, binds, self._state.unions)
        return self._finish("query", sql, binds, expand=self._state.where_in)

    @_statement("insert")
    def to_insert(self, data: Any) -> CompiledSQL:
        """Return the ``INSERT`` statement and binds for one record.

        Args:
            data: A dataclass, pydantic model, registered record or ``dict[str, Any]``.

        Raises:
            InvalidUpsertPayloadError: If ``data`` is not a single record.
        """
        reflected = reflect_single(resolve_single(data))
        sql = InsertClauseBuilder().build(self._state.table, reflected.columns)
        sql += self._ctx.rebinder.returning_clause()
        return self._finish("insert", sql, reflected.binds)

    @_statement("batch_insert")
    def to_batch_insert(self, data: Any) -> CompiledSQL:
        """Return a multi-row ``INSERT`` statement and binds.

        Columns are taken from the first element; every element contributes
        one value per column.

        Args:
            data: A non-empty list/tuple of records or of ``dict[str, Any]``.

        Raises:
            InvalidBatchPayloadError: If ``data`` is not a supported collection.
            EmptyBatchPayloadError: If ``data`` is empty.
        """
        reflected = reflect_batch(resolve_batch(data))
        sql = InsertClauseBuilder().build(self._state.table, reflected.columns, reflected.rows)
        return self._finish("batch_insert", sql, reflected.binds)

    @_statement("update")
    def to_update(self, data: Any) -> CompiledSQL:
        """Return the ``UPDATE`` statement and binds.

        Mapping values that are :class:`~sqlwrap.schema.clause.Clause`
        instances are rendered as expressions, eg: ``{"stock": clause("stock - ?", 1)}``.

        Raises:
            InvalidUpsertPayloadError: If ``data`` is not a single record.
            RebindError: If IN-expansion rejects the statement.
        """
        assignments = reflect_assignments(resolve_single(data))
        sql, binds = UpdateClauseBuilder().build(
            self._state.table, assignments, self._state.where
        )
        return self._finish("update", sql, binds, expand=self._state.where_in)

    @_statement("delete")
    def to_delete(self) -> CompiledSQL:
        """Return the ``DELETE`` statement and binds.

        Raises:
            RebindError: If IN-expansion rejects the statement.
        """
        sql, binds = DeleteClauseBuilder().build(self._state.table, self._state.where)
        return self._finish("delete", sql, binds, expand=self._state.where_in)

    def to_truncate(self) -> str:
        """Return the ``TRUNCATE`` statement (no binds, dialect-agnostic)."""
        return f"TRUNCATE {self._state.table}"

    # ------------------------------------------------------------------
    # Dialect pass
    # ------------------------------------------------------------------

    def _finish(
        self, kind: str, sql: str, binds: list[Any], expand: bool = False
    ) -> CompiledSQL:
        if expand:
            sql, binds = expand_in(sql, binds)
        sql = self._ctx.rebinder.rebind(sql)
        if self._ctx.log_statements:
            logger.debug(
                "statement_built",
                statement=kind,
                dialect=self._ctx.dialect,
                sql=sql,
                bind_count=len(binds),
            )
        return CompiledSQL(sql=sql, binds=list(binds), dialect=self._ctx.dialect)
