"""Cutoff model - one historical closing percentile per offering, category, domicile and round."""

CUTOFF_DDL = """
CREATE TABLE IF NOT EXISTS cutoffs (
    id VARCHAR PRIMARY KEY,
    college_branch_id VARCHAR NOT NULL,
    category VARCHAR NOT NULL,
    domicile VARCHAR NOT NULL,
    round_number INTEGER NOT NULL,
    closing_percentile DOUBLE NOT NULL CHECK (closing_percentile >= 0 AND closing_percentile <= 100)
)
"""

CUTOFF_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_cutoffs_lookup ON cutoffs(category, domicile)",
    "CREATE INDEX IF NOT EXISTS idx_cutoffs_offering ON cutoffs(college_branch_id)",
]
