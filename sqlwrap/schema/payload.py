"""Tagged payload variants resolved once at the call boundary.

Raw caller data is classified into exactly one of four variants before any
SQL is assembled:

``SingleRecord``  one mapped record (dataclass, pydantic model, registered type)
``SingleMap``     one ``str``-keyed mapping
``RecordBatch``   a non-empty list/tuple of records of one type
``MapBatch``      a non-empty list/tuple of ``str``-keyed mappings

Update assignments are likewise explicit: a value is either a
:class:`Literal` bound with ``?`` or an :class:`Expression` rendered inline
with its own binds.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from sqlwrap.errors import (
    EmptyBatchPayloadError,
    InvalidBatchPayloadError,
    InvalidUpsertPayloadError,
)
from sqlwrap.schema.clause import Clause
from sqlwrap.schema.mapping import MappingRegistry, RecordMapping


@dataclass(frozen=True)
class SingleRecord:
    record: Any
    mapping: RecordMapping


@dataclass(frozen=True)
class SingleMap:
    data: Mapping[str, Any]


@dataclass(frozen=True)
class RecordBatch:
    records: tuple[Any, ...]
    mapping: RecordMapping


@dataclass(frozen=True)
class MapBatch:
    rows: tuple[Mapping[str, Any], ...]


SinglePayload = Union[SingleRecord, SingleMap]
BatchPayload = Union[RecordBatch, MapBatch]
Payload = Union[SingleRecord, SingleMap, RecordBatch, MapBatch]


@dataclass(frozen=True)
class Literal:
    """An assignment bound as a single ``?`` placeholder."""

    value: Any


@dataclass(frozen=True)
class Expression:
    """An assignment rendered as raw SQL, eg: ``stock - ?``."""

    query: str
    binds: tuple[Any, ...] = ()


Assignment = Union[Literal, Expression]


def _is_str_mapping(data: Any) -> bool:
    return isinstance(data, Mapping) and all(isinstance(k, str) for k in data)


def _is_collection(data: Any) -> bool:
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))


def resolve_single(data: Any) -> SinglePayload:
    """Classify insert/update data.

    Raises:
        InvalidUpsertPayloadError: If ``data`` is not a record or ``str``-keyed mapping.
    """
    if isinstance(data, Mapping):
        if not _is_str_mapping(data):
            raise InvalidUpsertPayloadError.for_value(data)
        return SingleMap(data=data)
    mapping = MappingRegistry.for_record(data)
    if mapping is None:
        raise InvalidUpsertPayloadError.for_value(data)
    return SingleRecord(record=data, mapping=mapping)


def resolve_batch(data: Any) -> BatchPayload:
    """Classify batch insert data.

    The first element decides the variant; every other element must be of
    the same kind (and, for records, the same type).

    Raises:
        InvalidBatchPayloadError: If ``data`` is not a list/tuple, or its
            elements are of an unsupported or mixed kind.
        EmptyBatchPayloadError: If ``data`` has no elements.
    """
    if not _is_collection(data):
        raise InvalidBatchPayloadError.for_value(data)
    if len(data) == 0:
        raise EmptyBatchPayloadError()

    first = data[0]
    if isinstance(first, Mapping):
        for row in data:
            if not _is_str_mapping(row):
                raise InvalidBatchPayloadError.for_value(row)
        return MapBatch(rows=tuple(data))

    mapping = MappingRegistry.for_record(first)
    if mapping is None:
        raise InvalidBatchPayloadError.for_value(first)
    for record in data:
        if not isinstance(record, mapping.record_type):
            raise InvalidBatchPayloadError.for_value(record)
    return RecordBatch(records=tuple(data), mapping=mapping)


def resolve(data: Any) -> Payload:
    """Classify any payload: collections as batches, everything else as single.

    Raises:
        DataKindError: If ``data`` is of no supported kind (raised as the
            batch or upsert subclass matching the shape that was tried).
        EmptyBatchPayloadError: If ``data`` is an empty collection.
    """
    if _is_collection(data):
        return resolve_batch(data)
    return resolve_single(data)


def to_assignment(value: Any) -> Assignment:
    """Wrap a mapping value: :class:`Clause` values become expressions."""
    if isinstance(value, Clause):
        return Expression(query=value.query, binds=value.binds)
    return Literal(value=value)
