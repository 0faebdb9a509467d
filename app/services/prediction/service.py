"""Prediction service - match a student's criteria against historical cutoffs."""

from typing import Any

from loguru import logger

from app.models.prediction import Prediction
from app.repositories.cutoff import CutoffRepository
from app.services.prediction.pipeline import deduplicate, project, rank, resolve
from app.services.prediction.validator import validate_criteria


class PredictionService:
    """Eligibility matching and ranking."""

    def __init__(self, cutoff_repo: CutoffRepository):
        self._cutoffs = cutoff_repo
        logger.debug("PredictionService initialized")

    def predict(self, payload: Any) -> Prediction:
        """Validate, fetch, resolve, project, deduplicate and rank.

        Any failure aborts the whole prediction.
        """
        criteria = validate_criteria(payload)
        logger.info(
            "Prediction request: percentile={}, category={}, domicile={}, branches={}",
            criteria.percentile,
            criteria.category,
            criteria.domicile,
            list(criteria.branch_ids),
        )

        rows = self._cutoffs.fetch_eligible(criteria)
        logger.info("Found {} matching cutoffs", len(rows))

        results = [project(resolve(row)) for row in rows]
        colleges = rank(deduplicate(results))
        logger.info("Returning {} unique college predictions", len(colleges))

        return Prediction(criteria=criteria, colleges=colleges)
