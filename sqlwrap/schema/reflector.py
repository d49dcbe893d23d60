"""Record reflection: payload -> ordered ``(columns, binds)``.

Column rules
------------
Records follow their :class:`~sqlwrap.schema.mapping.RecordMapping` (tag
name override, ``-`` exclusion, ``omitempty``).  Mappings contribute every
key in iteration order; no omission rule applies to them.

Batch rules
-----------
Columns come from the *first* element only.  Every element then supplies
exactly one value per first-element column, in the same order, even where
``omitempty`` would have dropped the field on that element.  The flat bind
list therefore always holds ``rows * len(columns)`` values.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from sqlwrap.schema.payload import (
    Assignment,
    BatchPayload,
    Literal,
    MapBatch,
    Payload,
    RecordBatch,
    SingleMap,
    SinglePayload,
    SingleRecord,
    resolve,
    to_assignment,
)


@dataclass(frozen=True)
class Reflected:
    """Columns and their flat bind values.

    Attributes:
        columns: Column names in output order.
        binds: ``rows * len(columns)`` values, row-major.
    """

    columns: list[str] = field(default_factory=list)
    binds: list[Any] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        yield self.columns
        yield self.binds

    @property
    def rows(self) -> int:
        """Row count implied by the bind list; zero when there are no columns."""
        if not self.columns:
            return 0
        return len(self.binds) // len(self.columns)


def reflect_single(payload: SinglePayload) -> Reflected:
    if isinstance(payload, SingleMap):
        return Reflected(columns=list(payload.data.keys()), binds=list(payload.data.values()))
    columns, binds = payload.mapping.extract(payload.record)
    return Reflected(columns=columns, binds=binds)


def reflect_batch(payload: BatchPayload) -> Reflected:
    if isinstance(payload, MapBatch):
        columns = list(payload.rows[0].keys())
        binds = [row.get(column) for row in payload.rows for column in columns]
        return Reflected(columns=columns, binds=binds)

    selected = payload.mapping.select(payload.records[0])
    return Reflected(
        columns=[f.column for f in selected],
        binds=[getattr(record, f.attr) for record in payload.records for f in selected],
    )


def reflect(data: Any) -> Reflected:
    """Reflect any supported payload.

    Raises:
        DataKindError: If ``data`` is of no supported kind.
        EmptyBatchPayloadError: If ``data`` is an empty collection.
    """
    payload: Payload = resolve(data)
    if isinstance(payload, (RecordBatch, MapBatch)):
        return reflect_batch(payload)
    return reflect_single(payload)


def reflect_assignments(payload: SinglePayload) -> list[tuple[str, Assignment]]:
    """Return ``(column, assignment)`` pairs for an UPDATE.

    Only mapping payloads may carry :class:`~sqlwrap.schema.clause.Clause`
    values, which become expressions; record fields are always literals.
    """
    if isinstance(payload, SingleRecord):
        columns, binds = payload.mapping.extract(payload.record)
        return [(column, Literal(value)) for column, value in zip(columns, binds)]
    return [(column, to_assignment(value)) for column, value in payload.data.items()]
