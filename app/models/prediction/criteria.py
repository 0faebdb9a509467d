"""Match criteria - one validated prediction request."""

from decimal import ROUND_DOWN, Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(StrEnum):
    """Reservation category."""

    OPEN = "OPEN"
    SC = "SC"
    ST = "ST"
    OBC = "OBC"
    EWS = "EWS"


class Domicile(StrEnum):
    """State-domicile status."""

    IN_STATE = "Maharashtra"
    OUT_OF_STATE = "Other State"


class MatchCriteria(BaseModel):
    """Student percentile, category, domicile and the branches to search."""

    model_config = ConfigDict(frozen=True)

    percentile: float = Field(..., ge=0, le=100, strict=True, allow_inf_nan=False)
    category: Category
    domicile: Domicile
    branch_ids: tuple[str, ...] = Field(..., min_length=1)

    @field_validator("percentile")
    @classmethod
    def _two_decimals(cls, v: float) -> float:
        # Truncate, never round up past the submitted score
        return float(Decimal(str(v)).quantize(Decimal("0.01"), rounding=ROUND_DOWN))

    @field_validator("branch_ids")
    @classmethod
    def _clean_branch_ids(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(b.strip() for b in v)
        if any(not b for b in cleaned):
            raise ValueError("branch ids must not be blank")
        # Keep first occurrence order
        return tuple(dict.fromkeys(cleaned))
