"""sqlwrap compilation layer: options + payload → dialect-specific SQL."""
from sqlwrap.compile.builder import (
    SQLBuilder,
    new_builder,
    new_mysql_builder,
    new_pg_builder,
    new_sqlite_builder,
)
from sqlwrap.compile.state import QueryState
from sqlwrap.compile.wrapper import SQLWrapper

__all__ = [
    "SQLBuilder",
    "SQLWrapper",
    "QueryState",
    "new_builder",
    "new_mysql_builder",
    "new_pg_builder",
    "new_sqlite_builder",
]
