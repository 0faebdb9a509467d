"""Branch repository - access to the branch catalogue."""

from loguru import logger

from app.models.catalog import Branch
from app.repositories.base import BaseRepository


class BranchRepository(BaseRepository):
    """Repository for branch reference data."""

    def list_branches(self) -> list[Branch]:
        """Get all branches ordered by name."""
        rows = self.fetchall("SELECT id, branch_name, branch_code FROM branches ORDER BY branch_name, id")
        logger.debug("list_branches: {} branches", len(rows))
        return [Branch.from_row(r) for r in rows]
