"""Parsing of ``db`` column tags.

A tag is the string attached to a record field that controls its column
mapping:

- ``"name"``            - column name override
- ``"name,omitempty"``  - override, and skip the field when its value is empty
- ``",omitempty"``      - keep the field name, skip when empty
- ``"-"``               - exclude the field entirely
"""
from __future__ import annotations

from dataclasses import dataclass

#: Tag value that excludes a field from the column mapping.
EXCLUDE = "-"

#: Tag option that skips empty values.
OMITEMPTY = "omitempty"


@dataclass(frozen=True)
class DbTag:
    """A parsed ``db`` tag.

    Attributes:
        name: Column name part (may be empty).
        options: Comma-separated options following the name.
    """

    name: str
    options: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str) -> DbTag:
        """Split a tag into its name and comma-separated options."""
        name, sep, rest = tag.partition(",")
        if not sep:
            return cls(name=name)
        return cls(name=name, options=tuple(rest.split(",")))

    @property
    def excluded(self) -> bool:
        return self.name == EXCLUDE and not self.options

    def contains(self, option: str) -> bool:
        """Report whether ``option`` appears in the tag's option list."""
        return option in self.options

    @property
    def omitempty(self) -> bool:
        return self.contains(OMITEMPTY)
