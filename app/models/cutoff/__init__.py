"""Cutoff domain models."""

from app.models.cutoff.cutoff import CUTOFF_DDL, CUTOFF_INDEXES
from app.models.cutoff.entities import CutoffRow, ResolvedCutoff

__all__ = [
    "CUTOFF_DDL",
    "CUTOFF_INDEXES",
    "CutoffRow",
    "ResolvedCutoff",
]
