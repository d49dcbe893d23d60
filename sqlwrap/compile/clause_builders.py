"""Clause-level SQL builders.

Each class renders one statement shape into dialect-neutral SQL with ``?``
placeholders, returning the text and the binds in placeholder order.
Dialect handling (IN-expansion, rebinding) happens afterwards in
:class:`~sqlwrap.compile.wrapper.SQLWrapper`.

Classes
-------
SelectClauseBuilder  ``SELECT [DISTINCT] … FROM … JOIN … LIMIT ? OFFSET ?``
UnionClauseBuilder   ``(<query>) UNION (<sub>) UNION ALL (<sub>) …``
InsertClauseBuilder  ``INSERT INTO <table> (<cols>) VALUES (?, …)[, (?, …)]``
UpdateClauseBuilder  ``UPDATE <table> SET <col> = ?|<expr>, …``
DeleteClauseBuilder  ``DELETE FROM <table>``
"""
from __future__ import annotations

from typing import Any

from sqlwrap.compile.state import QueryState
from sqlwrap.dialect.base import PLACEHOLDER
from sqlwrap.schema.clause import Clause
from sqlwrap.schema.payload import Assignment, Expression


def _where(parts: list[str], binds: list[Any], where: Clause | None) -> None:
    if where is not None:
        parts.append(f"WHERE {where.query}")
        binds.extend(where.binds)


class SelectClauseBuilder:
    """Builds the base ``SELECT`` statement (no unions)."""

    def build(self, state: QueryState) -> tuple[str, list[Any]]:
        binds: list[Any] = []
        columns = ", ".join(state.columns) or "*"
        prefix = "SELECT DISTINCT" if state.distinct else "SELECT"
        parts = [f"{prefix} {columns} FROM {state.table}"]

        for join in state.joins:
            parts.append(self._build_join(join))

        _where(parts, binds, state.where)

        if state.groups:
            parts.append(f"GROUP BY {', '.join(state.groups)}")

        if state.having is not None:
            parts.append(f"HAVING {state.having.query}")
            binds.extend(state.having.binds)

        if state.orders:
            parts.append(f"ORDER BY {', '.join(state.orders)}")

        if state.limit != 0:
            parts.append(f"LIMIT {PLACEHOLDER}")
            binds.append(state.limit)

        if state.offset != 0:
            parts.append(f"OFFSET {PLACEHOLDER}")
            binds.append(state.offset)

        return " ".join(parts), binds

    @staticmethod
    def _build_join(join: Clause) -> str:
        sql = f"{join.keyword.value} JOIN {join.table}"
        if join.query:
            sql += f" ON {join.query}"
        return sql


class UnionClauseBuilder:
    """Wraps a query in parentheses and appends each unioned sub-query."""

    def build(
        self, query: str, binds: list[Any], unions: list[Clause]
    ) -> tuple[str, list[Any]]:
        parts = [f"({query})"]
        out = list(binds)
        for sub in unions:
            parts.append(f"{sub.keyword.value} ({sub.query})")
            out.extend(sub.binds)
        return " ".join(parts), out


class InsertClauseBuilder:
    """Builds single- and multi-row ``INSERT`` statements.

    With no columns only ``INSERT INTO <table>`` is rendered.
    """

    def build(self, table: str, columns: list[str], rows: int = 1) -> str:
        sql = f"INSERT INTO {table}"
        if not columns:
            return sql
        group = f"({', '.join(PLACEHOLDER for _ in columns)})"
        values = ", ".join(group for _ in range(max(rows, 1)))
        return f"{sql} ({', '.join(columns)}) VALUES {values}"


class UpdateClauseBuilder:
    """Builds ``UPDATE … SET …`` from column assignments.

    Expression assignments are rendered inline with their binds spliced in
    at the assignment's position.
    """

    def build(
        self,
        table: str,
        assignments: list[tuple[str, Assignment]],
        where: Clause | None = None,
    ) -> tuple[str, list[Any]]:
        binds: list[Any] = []
        sets: list[str] = []
        for column, assignment in assignments:
            if isinstance(assignment, Expression):
                sets.append(f"{column} = {assignment.query}")
                binds.extend(assignment.binds)
            else:
                sets.append(f"{column} = {PLACEHOLDER}")
                binds.append(assignment.value)

        parts = [f"UPDATE {table}"]
        if sets:
            parts.append(f"SET {', '.join(sets)}")
        _where(parts, binds, where)
        return " ".join(parts), binds


class DeleteClauseBuilder:
    """Builds ``DELETE FROM <table> [WHERE …]``."""

    def build(self, table: str, where: Clause | None) -> tuple[str, list[Any]]:
        binds: list[Any] = []
        parts = [f"DELETE FROM {table}"]
        _where(parts, binds, where)
        return " ".join(parts), binds
