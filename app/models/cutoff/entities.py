"""Cutoff entities - fetched rows and their resolved form."""

from dataclasses import dataclass

from app.models.catalog import Branch, College
from app.models.common import BaseEntity


@dataclass
class CutoffRow(BaseEntity):
    """Cutoff record with its offering, college and branch columns joined in.

    Joined columns are None when the referenced entity is missing.
    """

    cutoff_id: str
    college_branch_id: str
    category: str
    domicile: str
    round_number: int
    closing_percentile: float
    offering_id: str | None = None
    fees_per_year: int | None = None
    college_id: str | None = None
    college_name: str | None = None
    location: str | None = None
    branch_id: str | None = None
    branch_name: str | None = None
    branch_code: str | None = None


@dataclass
class ResolvedCutoff(BaseEntity):
    """Cutoff with its college and branch recovered."""

    college: College
    branch: Branch
    fees_per_year: int | None
    round_number: int
    closing_percentile: float
