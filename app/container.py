"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories.catalog import BranchRepository
from app.repositories.cutoff import CutoffRepository
from app.services.prediction import PredictionService


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn: duckdb.DuckDBPyConnection | None = None) -> None:
        """Initialize all dependencies. Call once at app startup.

        Without ``conn`` repositories use per-thread read-only connections.
        """
        if self._initialized:
            return

        # Repositories (singletons)
        self.branch_repo = BranchRepository(conn=conn)
        self._cutoff_repo = CutoffRepository(conn=conn)

        # Services (with injected repos)
        self.prediction = PredictionService(cutoff_repo=self._cutoff_repo)

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
