"""Prediction entities - ranked output rows."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity
from app.models.prediction.criteria import MatchCriteria


@dataclass
class PredictionResult(BaseEntity):
    """One eligible college-branch slot in one counselling round."""

    college_name: str
    branch_name: str
    fees_per_year: int
    closing_percentile: float
    location: str | None
    round_number: int

    @property
    def key(self) -> tuple[str, str, int]:
        """Deduplication key."""
        return (self.college_name, self.branch_name, self.round_number)


@dataclass
class Prediction:
    """Ranked results for one criteria."""

    criteria: MatchCriteria
    colleges: list[PredictionResult] = field(default_factory=list)

    @property
    def total_found(self) -> int:
        return len(self.colleges)
