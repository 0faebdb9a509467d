"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.catalog import BranchRepository
from app.repositories.cutoff import CutoffRepository
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Catalog
    "BranchRepository",
    # Cutoffs
    "CutoffRepository",
]
