"""sqlwrap schema layer: clause values, record mappings and payload reflection."""
from sqlwrap.schema.clause import Clause, JoinKeyword, SetKeyword, clause
from sqlwrap.schema.mapping import (
    FieldMapping,
    MappingRegistry,
    RecordMapping,
    db_field,
    is_empty_value,
)
from sqlwrap.schema.payload import (
    Assignment,
    Expression,
    Literal,
    MapBatch,
    RecordBatch,
    SingleMap,
    SingleRecord,
    resolve,
    resolve_batch,
    resolve_single,
)
from sqlwrap.schema.reflector import Reflected, reflect, reflect_assignments
from sqlwrap.schema.tags import DbTag

__all__ = [
    "Clause",
    "JoinKeyword",
    "SetKeyword",
    "clause",
    "DbTag",
    "FieldMapping",
    "RecordMapping",
    "MappingRegistry",
    "db_field",
    "is_empty_value",
    "SingleRecord",
    "SingleMap",
    "RecordBatch",
    "MapBatch",
    "Assignment",
    "Literal",
    "Expression",
    "resolve",
    "resolve_single",
    "resolve_batch",
    "Reflected",
    "reflect",
    "reflect_assignments",
]
