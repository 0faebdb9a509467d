"""Catalog domain models - branches, colleges and their offerings."""

from app.models.catalog.branch import BRANCH_DDL
from app.models.catalog.college import COLLEGE_DDL
from app.models.catalog.entities import Branch, College
from app.models.catalog.offering import OFFERING_DDL, OFFERING_INDEXES

__all__ = [
    "BRANCH_DDL",
    "COLLEGE_DDL",
    "OFFERING_DDL",
    "OFFERING_INDEXES",
    "Branch",
    "College",
]
