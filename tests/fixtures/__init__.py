"""Test fixtures: sample record types and the SQLite DDL."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from sqlwrap import db_field

_FIXTURES_DIR = Path(__file__).parent


@dataclass
class User:
    """Tagged dataclass: ``id`` excluded, ``phone`` omitted when empty."""

    id: int = db_field("-", default=0)
    name: str = db_field("name", default="")
    age: int = db_field("age", default=0)
    phone: str = db_field("phone,omitempty", default="")


@dataclass
class Point:
    """Untagged dataclass: columns are the field names."""

    x: int
    y: int


@dataclass
class Stock:
    """Dataclass holding an arbitrary value in an untagged field."""

    sku: str
    level: Any


class Product(BaseModel):
    """Tagged pydantic model."""

    id: int = Field(default=0, json_schema_extra={"db": "-"})
    title: str
    price: float = Field(default=0.0, json_schema_extra={"db": "unit_price"})
    note: str | None = Field(default=None, json_schema_extra={"db": ",omitempty"})


def load_ddl(target: str = "sqlite") -> str:
    """Return the sample DDL SQL string for the given backend."""
    return (_FIXTURES_DIR / f"ddl_{target}.sql").read_text()
