"""Per-statement assembler state.

One :class:`QueryState` is created per ``SQLBuilder.wrap`` call, configured
by the supplied options in order, then read by a single terminal operation.
States are never shared between statements.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from sqlwrap.schema.clause import Clause


@dataclass
class QueryState:
    """Everything the options configure for one statement.

    Attributes:
        table: Target table.
        columns: Selected columns (``["*"]`` unless overridden).
        where: WHERE fragment.
        joins: JOIN clauses, in declaration order.
        groups: GROUP BY columns.
        having: HAVING fragment.
        orders: ORDER BY expressions.
        offset: OFFSET value (0 = absent).
        limit: LIMIT value (0 = absent).
        unions: UNION / UNION ALL sub-queries, in declaration order.
        distinct: Render ``SELECT DISTINCT``.
        where_in: Some bind may be a sequence needing IN-expansion.
    """

    table: str = ""
    columns: list[str] = field(default_factory=lambda: ["*"])
    where: Clause | None = None
    joins: list[Clause] = field(default_factory=list)
    groups: list[str] = field(default_factory=list)
    having: Clause | None = None
    orders: list[str] = field(default_factory=list)
    offset: int = 0
    limit: int = 0
    unions: list[Clause] = field(default_factory=list)
    distinct: bool = False
    where_in: bool = False
