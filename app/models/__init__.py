"""Models package - DDL and entities for all domains."""

from app.models.catalog import (
    BRANCH_DDL,
    COLLEGE_DDL,
    OFFERING_DDL,
    OFFERING_INDEXES,
    Branch,
    College,
)
from app.models.common import BaseEntity
from app.models.cutoff import CUTOFF_DDL, CUTOFF_INDEXES, CutoffRow, ResolvedCutoff
from app.models.prediction import (
    Category,
    Domicile,
    MatchCriteria,
    Prediction,
    PredictionResult,
)

ALL_DDL = [
    # Catalog
    BRANCH_DDL,
    COLLEGE_DDL,
    OFFERING_DDL,
    # Cutoffs
    CUTOFF_DDL,
]

ALL_INDEXES = [
    *OFFERING_INDEXES,
    *CUTOFF_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Catalog
    "BRANCH_DDL",
    "COLLEGE_DDL",
    "OFFERING_DDL",
    "Branch",
    "College",
    # Cutoffs
    "CUTOFF_DDL",
    "CutoffRow",
    "ResolvedCutoff",
    # Prediction
    "Category",
    "Domicile",
    "MatchCriteria",
    "Prediction",
    "PredictionResult",
    # All DDL
    "ALL_DDL",
    "ALL_INDEXES",
]
