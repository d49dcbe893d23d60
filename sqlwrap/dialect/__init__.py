"""sqlwrap dialect layer: IN-expansion and placeholder rebinding."""
from sqlwrap.dialect.base import CompiledSQL, Driver, Rebinder
from sqlwrap.dialect.expand import expand_in
from sqlwrap.dialect.mysql import MySQLRebinder
from sqlwrap.dialect.postgres import PostgresRebinder
from sqlwrap.dialect.registry import RebinderFactory
from sqlwrap.dialect.sqlite import SQLiteRebinder

RebinderFactory.register_class(Driver.MYSQL, MySQLRebinder)
RebinderFactory.register_class(Driver.POSTGRES, PostgresRebinder)
RebinderFactory.register_class(Driver.SQLITE, SQLiteRebinder)

__all__ = [
    "CompiledSQL",
    "Driver",
    "Rebinder",
    "RebinderFactory",
    "MySQLRebinder",
    "PostgresRebinder",
    "SQLiteRebinder",
    "expand_in",
]
