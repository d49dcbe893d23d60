"""MySQL dialect rebinder."""
from __future__ import annotations

from sqlwrap.dialect.base import PLACEHOLDER, Driver, Rebinder


class MySQLRebinder(Rebinder):
    """Rebinds statements for MySQL.

    Parameter style: ``?`` (qmark), so rebinding leaves the text unchanged.
    """

    @property
    def dialect_name(self) -> str:
        return Driver.MYSQL.value

    def placeholder(self, position: int) -> str:
        return PLACEHOLDER

    def rebind(self, sql: str) -> str:
        return sql
