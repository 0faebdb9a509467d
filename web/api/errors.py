"""API errors - map classified failures to HTTP status and message."""

from loguru import logger

from app.errors import DataSourceUnavailable, IntegrityViolation, InvalidCriteria

MISSING_PARAMETERS = "Missing required parameters"
DATABASE_FAILED = "Database query failed"
INTERNAL_ERROR = "Internal server error"


def classify_error(exc: Exception) -> tuple[int, str]:
    """Log the failure and return (status code, user-facing message)."""
    if isinstance(exc, InvalidCriteria):
        logger.warning("Invalid criteria: {}", exc.message)
        return 400, MISSING_PARAMETERS

    if isinstance(exc, IntegrityViolation):
        logger.bind(integrity=True).critical("Dataset integrity violation: {}", exc.message)
        return 500, DATABASE_FAILED

    if isinstance(exc, DataSourceUnavailable):
        logger.error("Database error: {}", exc.message)
        return 500, DATABASE_FAILED

    logger.opt(exception=exc).error("Prediction error: {}", exc)
    return 500, INTERNAL_ERROR
