"""Data validation functions."""

import duckdb


def validate_dataset(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate reference integrity of the cutoff dataset."""
    issues = []
    stats = {}

    for table in ("branches", "colleges", "college_branches", "cutoffs"):
        stats[table] = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    if stats["cutoffs"] == 0:
        issues.append("No cutoffs found")

    orphan_cutoffs = conn.execute(
        """
        SELECT COUNT(*) FROM cutoffs c
        LEFT JOIN college_branches cb ON cb.id = c.college_branch_id
        WHERE cb.id IS NULL
        """
    ).fetchone()[0]
    stats["cutoffs_missing_offering"] = orphan_cutoffs
    if orphan_cutoffs > 0:
        issues.append(f"{orphan_cutoffs} cutoffs reference a missing offering")

    orphan_check = conn.execute(
        """
        SELECT
            SUM(CASE WHEN co.id IS NULL THEN 1 ELSE 0 END) as missing_college,
            SUM(CASE WHEN b.id IS NULL THEN 1 ELSE 0 END) as missing_branch
        FROM college_branches cb
        LEFT JOIN colleges co ON co.id = cb.college_id
        LEFT JOIN branches b ON b.id = cb.branch_id
        """
    ).fetchone()
    missing_college = orphan_check[0] or 0
    missing_branch = orphan_check[1] or 0
    stats["offerings_missing_college"] = missing_college
    stats["offerings_missing_branch"] = missing_branch
    if missing_college > 0:
        issues.append(f"{missing_college} offerings reference a missing college")
    if missing_branch > 0:
        issues.append(f"{missing_branch} offerings reference a missing branch")

    rounds = conn.execute("SELECT COUNT(DISTINCT round_number) FROM cutoffs").fetchone()[0]
    stats["rounds"] = rounds

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
