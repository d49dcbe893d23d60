"""IN-list expansion of sequence binds.

``expand_in`` rewrites a dialect-neutral statement so that every bind which
is itself a sequence (any ``Sequence`` other than ``str``, ``bytes`` or
``bytearray``) gets one ``?`` per element::

    >>> expand_in("SELECT * FROM t WHERE id IN (?) AND age > ?", [[1, 2, 3], 20])
    ('SELECT * FROM t WHERE id IN (?, ?, ?) AND age > ?', [1, 2, 3, 20])

Placeholders are matched to binds strictly left to right.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlwrap.dialect.base import PLACEHOLDER
from sqlwrap.errors import RebindError


def _is_expandable(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def expand_in(sql: str, binds: list[Any]) -> tuple[str, list[Any]]:
    """Expand sequence binds into one placeholder per element.

    Statements without any sequence bind are returned unchanged.

    Args:
        sql: Statement using ``?`` placeholders.
        binds: One value per placeholder; sequences (lists, tuples, ranges, ...) are
            expanded.

    Returns:
        The expanded statement and flattened binds.

    Raises:
        RebindError: If a sequence bind is empty or the placeholder count
            does not match the bind count.
    """
    if not any(_is_expandable(v) for v in binds):
        return sql, list(binds)

    for value in binds:
        if _is_expandable(value) and len(value) == 0:
            raise RebindError("empty sequence passed to 'in' query", sql=sql)

    parts = sql.split(PLACEHOLDER)
    if len(parts) - 1 > len(binds):
        raise RebindError("number of placeholders exceeds binds", sql=sql)
    if len(parts) - 1 < len(binds):
        raise RebindError("number of placeholders less than binds", sql=sql)

    out = [parts[0]]
    flat: list[Any] = []
    for value, part in zip(binds, parts[1:]):
        if _is_expandable(value):
            out.append(", ".join(PLACEHOLDER for _ in value))
            flat.extend(value)
        else:
            out.append(PLACEHOLDER)
            flat.append(value)
        out.append(part)
    return "".join(out), flat
