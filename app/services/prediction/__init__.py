"""Prediction services."""

from app.services.prediction.pipeline import deduplicate, project, rank, resolve
from app.services.prediction.service import PredictionService
from app.services.prediction.validator import validate_criteria

__all__ = [
    "PredictionService",
    "validate_criteria",
    "resolve",
    "project",
    "deduplicate",
    "rank",
]
