"""ETL package - dataset load from CSV files to database."""

from etl.load import load_dataset
from etl.validation import validate_dataset

__all__ = [
    "load_dataset",
    "validate_dataset",
]
