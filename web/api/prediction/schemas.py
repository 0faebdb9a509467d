"""Prediction API response schemas."""

from pydantic import BaseModel


class CollegeItem(BaseModel):
    """Eligible college-branch slot."""

    college_name: str
    branch_name: str
    fees_per_year: int
    closing_percentile: float
    location: str | None
    round_number: int


class CriteriaEcho(BaseModel):
    """Normalized criteria the prediction ran with."""

    percentile: float
    category: str
    domicile: str
    branches_searched: int


class PredictionResponse(BaseModel):
    """Prediction response."""

    colleges: list[CollegeItem]
    total_found: int
    criteria: CriteriaEcho
