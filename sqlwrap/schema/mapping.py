"""Registration-based column mapping for record types.

Instead of inspecting every payload at build time, each record type is
turned into a :class:`RecordMapping` once and cached in the
:class:`MappingRegistry`.  A mapping lists the type's fields in declaration
order with their column name and ``omitempty`` flag; fields tagged ``-`` are
dropped when the mapping is derived.

Supported record types
----------------------
dataclasses
    Tag via ``field(metadata={"db": ...})`` or :func:`db_field`.
pydantic models
    Tag via ``Field(json_schema_extra={"db": ...})``.
anything else
    Register an explicit mapping with :meth:`MappingRegistry.register`
    (see also :mod:`sqlwrap.schema.converters` for SQLAlchemy models).
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Sized
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

from pydantic import BaseModel

from sqlwrap.schema.tags import DbTag

#: Metadata / json_schema_extra key holding a field's tag.
TAG_KEY = "db"


def db_field(tag: str, **kwargs: Any) -> Any:
    """Return a dataclass field carrying a ``db`` tag.

    Example::

        @dataclass
        class User:
            id: int = db_field("-")
            name: str = db_field("name,omitempty", default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def is_empty_value(value: Any) -> bool:
    """Report whether ``value`` is the empty value for its kind.

    ``None``, ``False``, numeric zero and zero-length sized values are empty.
    Any other object (dates, nested records, ...) is never empty.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex, Decimal)):
        return not value
    if isinstance(value, Sized):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class FieldMapping:
    """How one record field maps to a column.

    Attributes:
        attr: Attribute name on the record.
        column: Column name.
        omitempty: Skip the field when its value is empty.
    """

    attr: str
    column: str
    omitempty: bool = False

    @classmethod
    def from_tag(cls, attr: str, tag: str | None) -> FieldMapping | None:
        """Build a mapping from a field tag; ``None`` when the tag excludes it."""
        if not tag:
            return cls(attr=attr, column=attr)
        parsed = DbTag.parse(tag)
        if parsed.excluded:
            return None
        return cls(attr=attr, column=parsed.name or attr, omitempty=parsed.omitempty)

    def skips(self, value: Any) -> bool:
        return self.omitempty and is_empty_value(value)


@dataclass(frozen=True)
class RecordMapping:
    """Ordered field mappings for one record type.

    Attributes:
        record_type: The mapped type.
        fields: Included fields in declaration order.
    """

    record_type: type
    fields: tuple[FieldMapping, ...]

    def __iter__(self) -> Iterator[FieldMapping]:
        return iter(self.fields)

    def select(self, record: Any) -> list[FieldMapping]:
        """Return the fields of ``record`` that survive ``omitempty``."""
        return [f for f in self.fields if not f.skips(getattr(record, f.attr))]

    def extract(self, record: Any) -> tuple[list[str], list[Any]]:
        """Return ``(columns, binds)`` for a single record."""
        selected = self.select(record)
        return [f.column for f in selected], [getattr(record, f.attr) for f in selected]


def _dataclass_mapping(cls: type) -> RecordMapping:
    fields: list[FieldMapping] = []
    for f in dataclasses.fields(cls):
        mapped = FieldMapping.from_tag(f.name, f.metadata.get(TAG_KEY))
        if mapped is not None:
            fields.append(mapped)
    return RecordMapping(record_type=cls, fields=tuple(fields))


def _pydantic_mapping(cls: type[BaseModel]) -> RecordMapping:
    fields: list[FieldMapping] = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra
        tag = extra.get(TAG_KEY) if isinstance(extra, dict) else None
        mapped = FieldMapping.from_tag(name, tag)
        if mapped is not None:
            fields.append(mapped)
    return RecordMapping(record_type=cls, fields=tuple(fields))


class MappingRegistry:
    """Registry mapping record types to their :class:`RecordMapping`.

    Dataclass and pydantic mappings are derived on first use and cached;
    other types must be registered explicitly.

    Example::

        MappingRegistry.register(
            Point,
            RecordMapping(Point, (FieldMapping("x", "pos_x"), FieldMapping("y", "pos_y"))),
        )
    """

    _mappings: ClassVar[dict[type, RecordMapping]] = {}

    @classmethod
    def register(cls, record_type: type, mapping: RecordMapping) -> None:
        """Register (or replace) the mapping for ``record_type``."""
        cls._mappings[record_type] = mapping

    @classmethod
    def unregister(cls, record_type: type) -> None:
        cls._mappings.pop(record_type, None)

    @classmethod
    def lookup(cls, record_type: type) -> RecordMapping | None:
        """Return the mapping for ``record_type``, deriving it if possible.

        Returns:
            The cached or freshly derived mapping, or ``None`` when the type
            is not a record type.
        """
        mapping = cls._mappings.get(record_type)
        if mapping is not None:
            return mapping
        if dataclasses.is_dataclass(record_type):
            mapping = _dataclass_mapping(record_type)
        elif issubclass(record_type, BaseModel):
            mapping = _pydantic_mapping(record_type)
        else:
            return None
        cls._mappings[record_type] = mapping
        return mapping

    @classmethod
    def for_record(cls, record: Any) -> RecordMapping | None:
        """Return the mapping for an instance, or ``None`` if it is not a record."""
        if isinstance(record, type):
            return None
        return cls.lookup(type(record))
