"""Services package - service class exports."""

from app.services.prediction import PredictionService

__all__ = [
    "PredictionService",
]
