"""Dataset load - CSV files to database."""

from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from app.models.prediction import Category, Domicile

# Load order: reference data first
TABLES: dict[str, dict[str, pl.DataType]] = {
    "branches": {
        "id": pl.Utf8,
        "branch_name": pl.Utf8,
        "branch_code": pl.Utf8,
    },
    "colleges": {
        "id": pl.Utf8,
        "college_name": pl.Utf8,
        "location": pl.Utf8,
    },
    "college_branches": {
        "id": pl.Utf8,
        "college_id": pl.Utf8,
        "branch_id": pl.Utf8,
        "fees_per_year": pl.Int64,
    },
    "cutoffs": {
        "id": pl.Utf8,
        "college_branch_id": pl.Utf8,
        "category": pl.Utf8,
        "domicile": pl.Utf8,
        "round_number": pl.Int64,
        "closing_percentile": pl.Float64,
    },
}


def read_table(path: Path, schema: dict[str, pl.DataType]) -> pl.DataFrame:
    """Read one CSV, keeping only the table's columns in table order.

    Raises:
        ValueError: the file is empty, lacks a column or holds a value that
            does not convert to the column type.
    """
    try:
        # Read as strings so ids such as "01" keep their leading zeros
        df = pl.read_csv(path, infer_schema_length=0)
        missing = [c for c in schema if c not in df.columns]
        if missing:
            raise ValueError(f"{path.name}: missing columns {missing}")
        return df.select([pl.col(c).str.strip_chars().cast(dtype) for c, dtype in schema.items()])
    except pl.exceptions.PolarsError as e:
        raise ValueError(f"{path.name}: {e}") from e


def check_cutoffs(df: pl.DataFrame) -> None:
    """Reject out-of-range percentiles and unknown category/domicile values."""
    out_of_range = df.filter(
        pl.col("closing_percentile").is_null()
        | (pl.col("closing_percentile") < 0)
        | (pl.col("closing_percentile") > 100)
    )
    if out_of_range.height:
        raise ValueError(f"cutoffs: {out_of_range.height} rows with closing_percentile outside [0, 100]")

    bad_category = df.filter(pl.col("category").is_null() | ~pl.col("category").is_in([c.value for c in Category]))
    if bad_category.height:
        raise ValueError(f"cutoffs: unknown categories {sorted(bad_category['category'].drop_nulls().unique())}")

    bad_domicile = df.filter(pl.col("domicile").is_null() | ~pl.col("domicile").is_in([d.value for d in Domicile]))
    if bad_domicile.height:
        raise ValueError(f"cutoffs: unknown domiciles {sorted(bad_domicile['domicile'].drop_nulls().unique())}")


def load_dataset(source_dir: Path, conn: duckdb.DuckDBPyConnection) -> dict[str, int]:
    """Replace all tables with the CSVs in source_dir (one transaction)."""
    frames = {table: read_table(Path(source_dir) / f"{table}.csv", schema) for table, schema in TABLES.items()}
    check_cutoffs(frames["cutoffs"])

    conn.execute("BEGIN TRANSACTION")
    try:
        for table, df in frames.items():
            columns = ", ".join(TABLES[table])
            conn.execute(f"DELETE FROM {table}")
            conn.register(f"{table}_df", df)
            conn.execute(f"INSERT INTO {table} ({columns}) SELECT {columns} FROM {table}_df")
            conn.unregister(f"{table}_df")
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    counts = {table: df.height for table, df in frames.items()}
    for table, count in counts.items():
        logger.info("{}: {}", table, count)
    return counts
