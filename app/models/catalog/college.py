"""College (institution) model."""

COLLEGE_DDL = """
CREATE TABLE IF NOT EXISTS colleges (
    id VARCHAR PRIMARY KEY,
    college_name VARCHAR NOT NULL,
    location VARCHAR
)
"""
