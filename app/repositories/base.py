"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.errors import DataSourceUnavailable
from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    Pass ``conn`` to bind the repository to an existing connection;
    otherwise each call uses the calling thread's read-only connection.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._conn = conn
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        if self._conn is not None:
            return self._conn
        return get_db()

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query, classifying database failures."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except duckdb.Error as e:
            logger.error("Database error: {}", e)
            raise DataSourceUnavailable(str(e)) from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()
