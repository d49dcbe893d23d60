"""PostgreSQL dialect rebinder."""
from __future__ import annotations

from sqlwrap.dialect.base import Driver, Rebinder


class PostgresRebinder(Rebinder):
    """Rebinds statements for PostgreSQL.

    Parameter style: ``$1, $2, ...`` numbered in statement order, as
    accepted by ``asyncpg`` and server-side prepared statements.

    Single-row inserts end with ``RETURNING id`` so the generated key can be
    fetched with the same round trip.
    """

    @property
    def dialect_name(self) -> str:
        return Driver.POSTGRES.value

    def placeholder(self, position: int) -> str:
        return f"${position}"

    def returning_clause(self) -> str:
        return " RETURNING id"
