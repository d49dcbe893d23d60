"""SQLite dialect rebinder."""
from __future__ import annotations

from sqlwrap.dialect.base import PLACEHOLDER, Driver, Rebinder


class SQLiteRebinder(Rebinder):
    """Rebinds statements for SQLite.

    Parameter style: ``?`` – compatible with Python's built-in ``sqlite3``
    positional execution (``cursor.execute(sql, binds)``).
    """

    @property
    def dialect_name(self) -> str:
        return Driver.SQLITE.value

    def placeholder(self, position: int) -> str:
        return PLACEHOLDER

    def rebind(self, sql: str) -> str:
        return sql
