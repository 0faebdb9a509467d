"""Cutoff repository - eligible cutoffs with their offering, college and branch."""

from loguru import logger

from app.models.cutoff import CutoffRow
from app.models.prediction import MatchCriteria
from app.repositories.base import BaseRepository

# LEFT JOINs keep cutoffs whose references dangle, so they can be reported
# instead of silently disappearing from the result. Column order follows
# CutoffRow fields.
_ELIGIBLE_QUERY = """
SELECT c.id, c.college_branch_id, c.category, c.domicile,
       c.round_number, c.closing_percentile,
       cb.id, cb.fees_per_year,
       co.id, co.college_name, co.location,
       b.id, b.branch_name, b.branch_code
FROM cutoffs c
LEFT JOIN college_branches cb ON cb.id = c.college_branch_id
LEFT JOIN colleges co ON co.id = cb.college_id
LEFT JOIN branches b ON b.id = cb.branch_id
WHERE c.category = ?
  AND c.domicile = ?
  AND c.closing_percentile <= ?
  AND (cb.id IS NULL OR cb.branch_id IN ({placeholders}))
ORDER BY c.closing_percentile DESC, c.id
"""


class CutoffRepository(BaseRepository):
    """Repository for historical admission cutoffs."""

    def fetch_eligible(self, criteria: MatchCriteria) -> list[CutoffRow]:
        """Get cutoffs at or below the percentile for category, domicile and branches.

        One query; the offering, college and branch are joined in.
        """
        query = _ELIGIBLE_QUERY.format(placeholders=", ".join("?" for _ in criteria.branch_ids))
        params = [
            criteria.category.value,
            criteria.domicile.value,
            criteria.percentile,
            *criteria.branch_ids,
        ]
        rows = self.fetchall(query, params)
        logger.debug(
            "fetch_eligible({}, {}, {}): {} rows",
            criteria.category,
            criteria.domicile,
            criteria.percentile,
            len(rows),
        )
        return [CutoffRow.from_row(r) for r in rows]
