"""Build context value object.

Packages the ``(rebinder, log_statements)`` pair a builder hands to every
wrapper it creates into a single immutable object.
"""
from __future__ import annotations

from dataclasses import dataclass

from sqlwrap.dialect.base import Rebinder


@dataclass(frozen=True)
class BuildContext:
    """Immutable context shared by all wrappers of one builder.

    Attributes:
        rebinder: Dialect-specific placeholder rebinder.
        log_statements: Emit structured log events for built statements.
    """

    rebinder: Rebinder
    log_statements: bool = False

    @property
    def dialect(self) -> str:
        return self.rebinder.dialect_name
