#!/usr/bin/env python3
"""
Load the cutoff dataset from CSV files and check its integrity.

Usage:
    python load_data.py data/          # Load branches/colleges/college_branches/cutoffs CSVs
    python load_data.py --validate     # Check data integrity only
"""

import sys
from pathlib import Path

import duckdb

from app.repositories import get_write_connection
from etl import load_dataset, validate_dataset
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def run_validation(conn: duckdb.DuckDBPyConnection) -> bool:
    """Validate the dataset in database."""
    result = validate_dataset(conn)
    stats = result["stats"]

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Branches: {stats['branches']:,}")
    print(f"  Colleges: {stats['colleges']:,}")
    print(f"  Offerings: {stats['college_branches']:,}")
    print(f"  Cutoffs: {stats['cutoffs']:,}")
    print(f"  Rounds: {stats['rounds']}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found. Fix the source files and load again.")
    print("=" * 60 + "\n")

    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        if not Path(DB_PATH).exists():
            print(f"\n⚠️  No database at {DB_PATH}. Run 'python load_data.py <dir>' first.\n")
            sys.exit(1)
        conn = duckdb.connect(DB_PATH, read_only=True)
        valid = run_validation(conn)
        conn.close()
        sys.exit(0 if valid else 1)

    if len(args) != 1 or not Path(args[0]).is_dir():
        print(__doc__)
        sys.exit(1)

    source_dir = Path(args[0])
    logger.info("Loading dataset from {} into {}", source_dir, DB_PATH)

    conn = get_write_connection()
    try:
        load_dataset(source_dir, conn)
    except (ValueError, OSError, duckdb.Error) as e:
        logger.error("Load failed: {}", e)
        conn.close()
        sys.exit(1)

    logger.info("Running validation...")
    valid = run_validation(conn)
    conn.close()
    sys.exit(0 if valid else 1)


if __name__ == "__main__":
    main()
