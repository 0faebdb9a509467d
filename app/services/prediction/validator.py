"""Criteria validation - turn a raw request payload into MatchCriteria."""

from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.errors import InvalidCriteria
from app.models.prediction import MatchCriteria


def validate_criteria(payload: Any) -> MatchCriteria:
    """Validate request payload.

    Raises:
        InvalidCriteria: percentile, category, domicile or branch_ids is
            missing or malformed.
    """
    if not isinstance(payload, dict):
        logger.warning("Rejected criteria: payload is {}, not an object", type(payload).__name__)
        raise InvalidCriteria()

    try:
        return MatchCriteria.model_validate(payload)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        logger.warning("Rejected criteria: invalid {}", ", ".join(fields) or "payload")
        raise InvalidCriteria() from e
