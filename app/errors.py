"""Prediction errors - classified failures surfaced by the core."""


class PredictorError(Exception):
    """Base class for classified prediction failures."""

    def __init__(self, message: str = "Prediction failed"):
        self.message = message
        super().__init__(self.message)


class InvalidCriteria(PredictorError):
    """Request criteria are incomplete or malformed (user-correctable)."""

    def __init__(self, message: str = "Missing required parameters"):
        super().__init__(message)


class DataSourceUnavailable(PredictorError):
    """Cutoff dataset could not be read."""

    def __init__(self, message: str = "Data source unavailable"):
        super().__init__(message)


class IntegrityViolation(PredictorError):
    """Dataset holds a dangling reference between cutoffs, offerings, colleges or branches."""

    def __init__(self, message: str = "Dataset integrity violation"):
        super().__init__(message)
