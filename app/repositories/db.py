"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL, ALL_INDEXES
from settings import DB_PATH

_local = threading.local()


def db_exists() -> bool:
    """Check if database file exists."""
    return Path(DB_PATH).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if cutoff table already exists."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'cutoffs'"
    ).fetchone()
    return result[0] > 0


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables and indexes (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    for index in ALL_INDEXES:
        conn.execute(index)
    logger.info("DB tables initialized")


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local read-only connection.

    Never creates the database; a missing file raises duckdb.IOException.
    """
    if not hasattr(_local, "conn") or _local.conn is None:
        _local.conn = duckdb.connect(DB_PATH, read_only=True)
        logger.debug("DB connected: {} (read_only)", DB_PATH)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a writable connection (for dataset loads), creating the DB if needed."""
    if not db_exists():
        logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
    conn = duckdb.connect(DB_PATH)
    init_tables(conn)
    return conn
