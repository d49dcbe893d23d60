"""Query options.

A :data:`QueryOption` is a callable that configures a
:class:`~sqlwrap.compile.state.QueryState`.  Options are applied in the
order given to ``SQLBuilder.wrap``; a later option of the same kind
replaces an earlier one, except joins and unions, which accumulate::

    builder.wrap(
        table("user"),
        select("id", "name"),
        where("age > ?", 20),
        order_by("id DESC"),
        limit(10),
    )
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sqlwrap.compile.state import QueryState
from sqlwrap.compile.wrapper import SQLWrapper
from sqlwrap.schema.clause import Clause, JoinKeyword, SetKeyword

QueryOption = Callable[[QueryState], None]


def table(name: str) -> QueryOption:
    """Specify the target table."""

    def apply(state: QueryState) -> None:
        state.table = name

    return apply


def select(*columns: str) -> QueryOption:
    """Specify the selected columns."""

    def apply(state: QueryState) -> None:
        state.columns = list(columns)

    return apply


def distinct(*columns: str) -> QueryOption:
    """Specify the selected columns and render ``SELECT DISTINCT``."""

    def apply(state: QueryState) -> None:
        state.columns = list(columns)
        state.distinct = True

    return apply


def _join(keyword: JoinKeyword, name: str, on: str = "") -> QueryOption:
    def apply(state: QueryState) -> None:
        state.joins.append(Clause(query=on, table=name, keyword=keyword))

    return apply


def join(name: str, on: str) -> QueryOption:
    """Add an ``INNER JOIN <name> ON <on>`` clause."""
    return _join(JoinKeyword.INNER, name, on)


def left_join(name: str, on: str) -> QueryOption:
    """Add a ``LEFT JOIN <name> ON <on>`` clause."""
    return _join(JoinKeyword.LEFT, name, on)


def right_join(name: str, on: str) -> QueryOption:
    """Add a ``RIGHT JOIN <name> ON <on>`` clause."""
    return _join(JoinKeyword.RIGHT, name, on)


def full_join(name: str, on: str) -> QueryOption:
    """Add a ``FULL JOIN <name> ON <on>`` clause."""
    return _join(JoinKeyword.FULL, name, on)


def cross_join(name: str) -> QueryOption:
    """Add a ``CROSS JOIN <name>`` clause (no ON condition)."""
    return _join(JoinKeyword.CROSS, name)


def where(query: str, *binds: Any) -> QueryOption:
    """Specify the WHERE clause."""

    def apply(state: QueryState) -> None:
        state.where = Clause(query=query, binds=binds)

    return apply


def where_in(query: str, *binds: Any) -> QueryOption:
    """Specify a WHERE clause whose sequence binds expand into ``IN`` lists.

    Example::

        where_in("id IN (?) AND status = ?", [1, 2, 3], "active")
    """

    def apply(state: QueryState) -> None:
        state.where = Clause(query=query, binds=binds)
        state.where_in = True

    return apply


def group_by(*columns: str) -> QueryOption:
    """Specify the GROUP BY columns."""

    def apply(state: QueryState) -> None:
        state.groups = list(columns)

    return apply


def having(query: str, *binds: Any) -> QueryOption:
    """Specify the HAVING clause."""

    def apply(state: QueryState) -> None:
        state.having = Clause(query=query, binds=binds)

    return apply


def order_by(*columns: str) -> QueryOption:
    """Specify the ORDER BY expressions, eg: ``order_by("age ASC", "id DESC")``."""

    def apply(state: QueryState) -> None:
        state.orders = list(columns)

    return apply


def _non_negative(name: str, n: int) -> int:
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}")
    return n


def offset(n: int) -> QueryOption:
    """Specify the OFFSET value (0 omits the clause)."""
    n = _non_negative("offset", n)

    def apply(state: QueryState) -> None:
        state.offset = n

    return apply


def limit(n: int) -> QueryOption:
    """Specify the LIMIT value (0 omits the clause)."""
    n = _non_negative("limit", n)

    def apply(state: QueryState) -> None:
        state.limit = n

    return apply


def _union(keyword: SetKeyword, wrappers: tuple[SQLWrapper, ...]) -> QueryOption:
    for wrapper in wrappers:
        if not isinstance(wrapper, SQLWrapper):
            raise TypeError(
                f"{keyword.value.lower()} expects SQLWrapper instances, got {type(wrapper).__name__}"
            )

    def apply(state: QueryState) -> None:
        for wrapper in wrappers:
            if wrapper.state.where_in:
                state.where_in = True
            query, binds = wrapper.subquery()
            state.unions.append(Clause(query=query, binds=binds, keyword=keyword))

    return apply


def union(*wrappers: SQLWrapper) -> QueryOption:
    """Append ``UNION (<sub-query>)`` for each wrapper, in order."""
    return _union(SetKeyword.UNION, wrappers)


def union_all(*wrappers: SQLWrapper) -> QueryOption:
    """Append ``UNION ALL (<sub-query>)`` for each wrapper, in order."""
    return _union(SetKeyword.UNION_ALL, wrappers)
