"""Branch (academic program) model."""

BRANCH_DDL = """
CREATE TABLE IF NOT EXISTS branches (
    id VARCHAR PRIMARY KEY,
    branch_name VARCHAR NOT NULL,
    branch_code VARCHAR NOT NULL
)
"""
