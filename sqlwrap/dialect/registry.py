"""Rebinder registry.

``RebinderFactory`` maps driver names to :class:`~sqlwrap.dialect.base.Rebinder`
implementations.  Register a rebinder once; builders look it up by driver.

Usage::

    from sqlwrap.dialect.registry import RebinderFactory

    @RebinderFactory.register("oracle")
    class OracleRebinder(Rebinder):
        ...
"""
from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from sqlwrap.dialect.base import Driver, Rebinder
from sqlwrap.errors import UnsupportedDialectError


class RebinderFactory:
    """Registry mapping driver names to :class:`Rebinder` classes.

    Example::

        @RebinderFactory.register("mysql")
        class MySQLRebinder(Rebinder):
            ...

        rebinder = RebinderFactory.create("mysql")
    """

    _rebinders: ClassVar[dict[str, type[Rebinder]]] = {}

    @staticmethod
    def _key(name: str | Driver) -> str:
        return name.value if isinstance(name, Driver) else name

    @classmethod
    def register(cls, name: str | Driver) -> Callable[[type[Rebinder]], type[Rebinder]]:
        """Decorator that registers a rebinder class under ``name``."""

        def decorator(rebinder_cls: type[Rebinder]) -> type[Rebinder]:
            cls._rebinders[cls._key(name)] = rebinder_cls
            return rebinder_cls

        return decorator

    @classmethod
    def register_class(cls, name: str | Driver, rebinder_cls: type[Rebinder]) -> None:
        """Register a rebinder class without using the decorator form."""
        cls._rebinders[cls._key(name)] = rebinder_cls

    @classmethod
    def create(cls, name: str | Driver) -> Rebinder:
        """Instantiate the rebinder registered for ``name``.

        Raises:
            UnsupportedDialectError: If no rebinder is registered for ``name``.
        """
        key = cls._key(name)
        rebinder_cls = cls._rebinders.get(key)
        if rebinder_cls is None:
            raise UnsupportedDialectError(
                f"Unsupported driver: '{key}'. Registered drivers: {cls.registered_drivers()}.",
                driver=key,
            )
        return rebinder_cls()

    @classmethod
    def registered_drivers(cls) -> list[str]:
        """Return the sorted list of registered driver names."""
        return sorted(cls._rebinders)
