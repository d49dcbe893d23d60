"""Dialect abstractions: Driver, CompiledSQL and the Rebinder ABC.

The Template Method pattern is used:
- ``Rebinder`` defines the rebinding algorithm (scan ``?`` placeholders left
  to right and replace each with the dialect's native form).
- ``MySQLRebinder``, ``PostgresRebinder`` and ``SQLiteRebinder`` override the
  dialect-specific steps (placeholder form, generated-key clause).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

#: The dialect-neutral placeholder used while assembling statements.
PLACEHOLDER = "?"


class Driver(str, Enum):
    """Supported SQL dialects, named after their database drivers."""

    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite3"


@dataclass(frozen=True)
class CompiledSQL:
    """The output of a successful build.

    Unpacks as ``(sql, binds)`` so it can be splatted into a DB-API call::

        cursor.execute(*wrapper.to_query())

    Attributes:
        sql: The statement with dialect-native placeholders.
        binds: Positional values, one per placeholder.
        dialect: The driver the statement was built for.
    """

    sql: str
    binds: list[Any] = field(default_factory=list)
    dialect: str = Driver.MYSQL.value

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.binds


class Rebinder(ABC):
    """Abstract base for dialect-specific placeholder rebinding."""

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (eg: ``'postgres'``)."""

    @abstractmethod
    def placeholder(self, position: int) -> str:
        """Return the native placeholder for the 1-based ``position``."""

    def returning_clause(self) -> str:
        """Return the clause appended to single-row inserts (default: none)."""
        return ""

    def rebind(self, sql: str) -> str:
        """Rewrite every ``?`` in ``sql`` into the native placeholder form.

        Binds are never reordered, so only the text changes.
        """
        if PLACEHOLDER not in sql:
            return sql
        parts = sql.split(PLACEHOLDER)
        out = [parts[0]]
        for position, part in enumerate(parts[1:], start=1):
            out.append(self.placeholder(position))
            out.append(part)
        return "".join(out)
