"""College-branch offering model - links a college to a branch it teaches."""

OFFERING_DDL = """
CREATE TABLE IF NOT EXISTS college_branches (
    id VARCHAR PRIMARY KEY,
    college_id VARCHAR NOT NULL,
    branch_id VARCHAR NOT NULL,
    fees_per_year INTEGER
)
"""

OFFERING_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_college_branches_branch ON college_branches(branch_id)",
]
