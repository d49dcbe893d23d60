"""Immutable SQL fragments with positional binds.

A :class:`Clause` is raw SQL text plus the values for its ``?``
placeholders.  It is used for WHERE / HAVING / JOIN ON fragments, for
unioned sub-queries and, as a value in an update mapping, for computed
assignments such as ``stock = stock - ?``::

    from sqlwrap import clause

    clause("price * ? + ?", 2, 100)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class JoinKeyword(str, Enum):
    """Keyword rendered before ``JOIN``."""

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"
    CROSS = "CROSS"


class SetKeyword(str, Enum):
    """Keyword joining a unioned sub-query to the main query."""

    UNION = "UNION"
    UNION_ALL = "UNION ALL"


@dataclass(frozen=True)
class Clause:
    """An immutable SQL fragment.

    Attributes:
        query: Raw SQL text using ``?`` placeholders.
        binds: Positional values for the placeholders in ``query``.
        table: Joined table (JOIN clauses only).
        keyword: Join or set keyword (JOIN / UNION clauses only).
    """

    query: str
    binds: tuple[Any, ...] = field(default_factory=tuple)
    table: str | None = None
    keyword: JoinKeyword | SetKeyword | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.binds, tuple):
            object.__setattr__(self, "binds", tuple(self.binds))


def clause(query: str, *binds: Any) -> Clause:
    """Return a :class:`Clause`, eg: ``clause("price * ? + ?", 2, 100)``."""
    return Clause(query=query, binds=binds)
