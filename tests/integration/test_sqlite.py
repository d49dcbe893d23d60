"""Integration tests: build → execute against a real SQLite in-memory DB.

Statements built by the sqlite3 builder are executed verbatim with their
binds, so placeholder counts, IN-expansion and bind order are all checked
by SQLite itself.
"""
from __future__ import annotations

import sqlite3

import pytest

from sqlwrap import (
    clause,
    limit,
    new_sqlite_builder,
    offset,
    order_by,
    select,
    table,
    where,
    where_in,
)
from tests.fixtures import Product, User, load_ddl

pytestmark = pytest.mark.integration

PEOPLE = [
    User(name="ann", age=31, phone="555-0100"),
    User(name="bob", age=25),
    User(name="cyd", age=47),
    User(name="dee", age=25, phone="555-0199"),
]


@pytest.fixture()
def db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl("sqlite"))
    yield conn
    conn.close()


@pytest.fixture()
def builder():
    return new_sqlite_builder()


@pytest.fixture()
def people(db, builder) -> sqlite3.Connection:
    sql, binds = builder.wrap(table("user")).to_batch_insert(PEOPLE)
    db.execute(sql, binds)
    return db


def _names(conn: sqlite3.Connection, compiled) -> list[str]:
    sql, binds = compiled
    return [row["name"] for row in conn.execute(sql, binds)]


# ---------------------------------------------------------------------------
# INSERT
# ---------------------------------------------------------------------------


def test_insert_record(db, builder):
    sql, binds = builder.wrap(table("user")).to_insert(User(name="eve", age=22))
    cur = db.execute(sql, binds)
    row = db.execute("SELECT * FROM user WHERE id = ?", (cur.lastrowid,)).fetchone()
    assert (row["name"], row["age"], row["phone"]) == ("eve", 22, None)


def test_insert_pydantic_model(db, builder):
    sql, binds = builder.wrap(table("product")).to_insert(Product(title="lamp", price=9.5))
    db.execute(sql, binds)
    row = db.execute("SELECT title, unit_price, note FROM product").fetchone()
    assert tuple(row) == ("lamp", 9.5, None)


def test_batch_insert_rows(people):
    assert people.execute("SELECT COUNT(*) FROM user").fetchone()[0] == len(PEOPLE)
    # Columns come from the first record, so every row carries a phone.
    phones = [r[0] for r in people.execute("SELECT phone FROM user ORDER BY id")]
    assert phones == ["555-0100", "", "", "555-0199"]


def test_batch_insert_maps(db, builder):
    rows = [{"title": "a", "note": "x"}, {"title": "b"}]
    sql, binds = builder.wrap(table("product")).to_batch_insert(rows)
    db.execute(sql, binds)
    # A key missing from a later row binds NULL.
    stored = db.execute("SELECT title, note FROM product ORDER BY id").fetchall()
    assert [tuple(r) for r in stored] == [("a", "x"), ("b", None)]


# ---------------------------------------------------------------------------
# SELECT
# ---------------------------------------------------------------------------


def test_select_where_in(people, builder):
    compiled = builder.wrap(
        table("user"),
        select("name"),
        where_in("age IN (?) AND name <> ?", [25, 47], "dee"),
        order_by("name"),
    ).to_query()
    assert _names(people, compiled) == ["bob", "cyd"]


def test_select_limit_offset(people, builder):
    compiled = builder.wrap(
        table("user"), select("name"), order_by("age DESC", "name"), limit(2), offset(1)
    ).to_query()
    assert _names(people, compiled) == ["ann", "bob"]


def test_select_where_in_range(people, builder):
    compiled = builder.wrap(
        table("user"), select("name"), where_in("id IN (?)", range(2, 4)), order_by("id")
    ).to_query()
    assert _names(people, compiled) == ["bob", "cyd"]


# ---------------------------------------------------------------------------
# UPDATE / DELETE
# ---------------------------------------------------------------------------


def test_update_with_expression(people, builder):
    sql, binds = builder.wrap(table("user"), where_in("name IN (?)", ["bob", "dee"])).to_update(
        {"age": clause("age + ?", 10), "phone": "n/a"}
    )
    people.execute(sql, binds)
    rows = people.execute("SELECT name, age, phone FROM user ORDER BY id").fetchall()
    assert [tuple(r) for r in rows] == [
        ("ann", 31, "555-0100"),
        ("bob", 35, "n/a"),
        ("cyd", 47, ""),
        ("dee", 35, "n/a"),
    ]


def test_update_from_record(people, builder):
    sql, binds = builder.wrap(table("user"), where("name = ?", "cyd")).to_update(
        User(name="cyd", age=48)
    )
    people.execute(sql, binds)
    row = people.execute("SELECT age FROM user WHERE name = 'cyd'").fetchone()
    assert row["age"] == 48


def test_delete(people, builder):
    sql, binds = builder.wrap(table("user"), where("age < ?", 30)).to_delete()
    people.execute(sql, binds)
    assert _names(people, builder.wrap(table("user"), order_by("id")).to_query()) == [
        "ann",
        "cyd",
    ]
