"""Utilities for registering record mappings from external sources.

SQLAlchemy converter
--------------------
:func:`register_sqlalchemy_model` derives a
:class:`~sqlwrap.schema.mapping.RecordMapping` from a declarative ORM class
and registers it, so instances can be passed straight to ``to_insert``,
``to_update`` and ``to_batch_insert``.

Install the optional dependency before using this module::

    pip install "sqlwrap[sqlalchemy]"

Example::

    class Item(Base):
        __tablename__ = "items"

        id = mapped_column(Integer, primary_key=True, info={"db": "-"})
        title = mapped_column("item_title", String)
        note = mapped_column(String, info={"db": ",omitempty"})

    register_sqlalchemy_model(Item)

Column names come from the mapped table column (``item_title`` above), not
the attribute name.  A column's ``info["db"]`` tag may exclude it (``-``),
rename it, or mark it ``omitempty``.
"""
from __future__ import annotations

from sqlwrap.errors import DataKindError
from sqlwrap.schema.mapping import TAG_KEY, FieldMapping, MappingRegistry, RecordMapping
from sqlwrap.schema.tags import DbTag


def mapping_from_sqlalchemy(model: type) -> RecordMapping:
    """Build a :class:`RecordMapping` from a mapped SQLAlchemy class.

    Args:
        model: A declarative (or imperatively mapped) ORM class.

    Returns:
        The mapping, with fields in the mapper's column-attribute order.

    Raises:
        DataKindError: If ``model`` is not a mapped class.
    """
    from sqlalchemy import inspect

    mapper = inspect(model, raiseerr=False)
    if mapper is None or not hasattr(mapper, "column_attrs"):
        raise DataKindError(
            f"'{getattr(model, '__name__', model)}' is not a mapped SQLAlchemy class",
            kind=type(model).__name__,
        )

    fields: list[FieldMapping] = []
    for attr in mapper.column_attrs:
        column = attr.columns[0]
        tag = DbTag.parse(column.info.get(TAG_KEY) or "")
        if tag.excluded:
            continue
        fields.append(
            FieldMapping(attr=attr.key, column=tag.name or column.name, omitempty=tag.omitempty)
        )
    return RecordMapping(record_type=model, fields=tuple(fields))


def register_sqlalchemy_model(model: type) -> RecordMapping:
    """Derive and register the mapping for ``model``; returns it."""
    mapping = mapping_from_sqlalchemy(model)
    MappingRegistry.register(model, mapping)
    return mapping
