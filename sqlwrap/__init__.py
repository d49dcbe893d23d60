"""sqlwrap – dialect-aware SQL statement building.

Compose options, hand over a record, get SQL plus positional binds.

Public API
----------
``new_builder`` / ``new_mysql_builder`` / ``new_pg_builder`` / ``new_sqlite_builder``
    Create an :class:`SQLBuilder` for a dialect.

``SQLBuilder.wrap(*options)``
    Configure one statement; returns an :class:`SQLWrapper` with the
    terminal operations ``to_query``, ``to_insert``, ``to_batch_insert``,
    ``to_update``, ``to_delete`` and ``to_truncate``.

Options
-------
``table``, ``select``, ``distinct``, ``join``, ``left_join``, ``right_join``,
``full_join``, ``cross_join``, ``where``, ``where_in``, ``group_by``,
``having``, ``order_by``, ``offset``, ``limit``, ``union``, ``union_all``.

Example::

    import sqlwrap
    from sqlwrap import clause, table, where

    builder = sqlwrap.new_pg_builder()

    sql, binds = builder.wrap(table("product"), where("id = ?", 7)).to_update(
        {"stock": clause("stock - ?", 1), "updated_by": "ops"}
    )
    # UPDATE product SET stock = stock - $1, updated_by = $2 WHERE id = $3
    # [1, 'ops', 7]

Extensibility
-------------
New dialects can be registered via::

    from sqlwrap.dialect.registry import RebinderFactory

    @RebinderFactory.register("oracle")
    class OracleRebinder(Rebinder):
        ...

after which ``SQLBuilder("oracle")`` uses it.
"""
from __future__ import annotations

from sqlwrap.compile.builder import (
    SQLBuilder,
    new_builder,
    new_mysql_builder,
    new_pg_builder,
    new_sqlite_builder,
)
from sqlwrap.compile.options import (
    QueryOption,
    cross_join,
    distinct,
    full_join,
    group_by,
    having,
    join,
    left_join,
    limit,
    offset,
    order_by,
    right_join,
    select,
    table,
    union,
    union_all,
    where,
    where_in,
)
from sqlwrap.compile.wrapper import SQLWrapper
from sqlwrap.config import BuilderSettings, get_settings
from sqlwrap.dialect import (
    CompiledSQL,
    Driver,
    MySQLRebinder,
    PostgresRebinder,
    Rebinder,
    RebinderFactory,
    SQLiteRebinder,
)
from sqlwrap.errors import (
    DataKindError,
    EmptyBatchPayloadError,
    InvalidBatchPayloadError,
    InvalidUpsertPayloadError,
    RebindError,
    SQLWrapError,
    UnsupportedDialectError,
)
from sqlwrap.schema.clause import Clause, clause
from sqlwrap.schema.mapping import FieldMapping, MappingRegistry, RecordMapping, db_field
from sqlwrap.schema.reflector import Reflected, reflect

__all__ = [
    # Builders
    "SQLBuilder",
    "SQLWrapper",
    "new_builder",
    "new_mysql_builder",
    "new_pg_builder",
    "new_sqlite_builder",
    # Options
    "QueryOption",
    "table",
    "select",
    "distinct",
    "join",
    "left_join",
    "right_join",
    "full_join",
    "cross_join",
    "where",
    "where_in",
    "group_by",
    "having",
    "order_by",
    "offset",
    "limit",
    "union",
    "union_all",
    # Clauses
    "Clause",
    "clause",
    # Records
    "db_field",
    "FieldMapping",
    "RecordMapping",
    "MappingRegistry",
    "Reflected",
    "reflect",
    # Dialects
    "CompiledSQL",
    "Driver",
    "Rebinder",
    "RebinderFactory",
    "MySQLRebinder",
    "PostgresRebinder",
    "SQLiteRebinder",
    # Configuration
    "BuilderSettings",
    "get_settings",
    # Errors
    "SQLWrapError",
    "DataKindError",
    "InvalidUpsertPayloadError",
    "InvalidBatchPayloadError",
    "EmptyBatchPayloadError",
    "RebindError",
    "UnsupportedDialectError",
]
