"""Prediction API."""

from web.api.prediction.views import predict_colleges

__all__ = [
    "predict_colleges",
]
