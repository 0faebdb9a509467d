"""Prediction domain models - request criteria and ranked results."""

from app.models.prediction.criteria import Category, Domicile, MatchCriteria
from app.models.prediction.entities import Prediction, PredictionResult

__all__ = [
    "Category",
    "Domicile",
    "MatchCriteria",
    "Prediction",
    "PredictionResult",
]
