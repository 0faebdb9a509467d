"""Prediction API views - thin layer over services."""

from typing import Any

from app.container import container

from .schemas import CollegeItem, CriteriaEcho, PredictionResponse


def predict_colleges(payload: Any) -> PredictionResponse:
    """Rank eligible college-branch slots for the payload criteria."""
    data = container.prediction.predict(payload)

    items = [
        CollegeItem(
            college_name=c.college_name,
            branch_name=c.branch_name,
            fees_per_year=c.fees_per_year,
            closing_percentile=c.closing_percentile,
            location=c.location,
            round_number=c.round_number,
        )
        for c in data.colleges
    ]

    return PredictionResponse(
        colleges=items,
        total_found=data.total_found,
        criteria=CriteriaEcho(
            percentile=data.criteria.percentile,
            category=data.criteria.category.value,
            domicile=data.criteria.domicile.value,
            branches_searched=len(data.criteria.branch_ids),
        ),
    )
