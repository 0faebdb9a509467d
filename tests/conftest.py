"""Shared fixtures - in-memory database with a small cutoff dataset."""

import duckdb
import pytest

from app.repositories.db import init_tables

BRANCHES = [
    ("CS", "Computer Engineering", "CS"),
    ("IT", "Information Technology", "IT"),
    ("ME", "Mechanical Engineering", "ME"),
]

COLLEGES = [
    ("COEP", "COEP Technological University", "Pune"),
    ("VJTI", "Veermata Jijabai Technological Institute", "Mumbai"),
    ("PICT", "Pune Institute of Computer Technology", "Pune"),
]

OFFERINGS = [
    ("cb1", "COEP", "CS", 90000),
    ("cb2", "VJTI", "CS", 85000),
    ("cb3", "PICT", "IT", 120000),
    ("cb4", "COEP", "ME", None),
    ("cb5", "PICT", "CS", 130000),
]

CUTOFFS = [
    ("c1", "cb1", "OPEN", "Maharashtra", 1, 90.0),
    ("c2", "cb2", "OPEN", "Maharashtra", 1, 93.0),
    ("c3", "cb5", "OPEN", "Maharashtra", 1, 92.5),
    ("c4", "cb3", "OPEN", "Maharashtra", 1, 88.0),
    ("c5", "cb4", "OPEN", "Maharashtra", 1, 70.0),
    ("c6", "cb1", "OBC", "Maharashtra", 1, 85.0),
    ("c7", "cb1", "OPEN", "Other State", 1, 91.0),
]


def insert_rows(conn: duckdb.DuckDBPyConnection, table: str, rows: list[tuple]) -> None:
    """Insert tuples into a table in column order."""
    if not rows:
        return
    placeholders = ", ".join("?" for _ in rows[0])
    conn.executemany(f"INSERT INTO {table} VALUES ({placeholders})", rows)


@pytest.fixture
def empty_db():
    """In-memory database with tables but no rows."""
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def db(empty_db):
    """In-memory database with the sample dataset."""
    insert_rows(empty_db, "branches", BRANCHES)
    insert_rows(empty_db, "colleges", COLLEGES)
    insert_rows(empty_db, "college_branches", OFFERINGS)
    insert_rows(empty_db, "cutoffs", CUTOFFS)
    return empty_db


@pytest.fixture
def insert():
    """Row inserter for tests that extend the dataset."""
    return insert_rows
