"""Catalog API views - thin layer over repositories."""

from app.container import container

from .schemas import BranchesResponse, BranchItem


def get_branches() -> BranchesResponse:
    """Get branches students can pick from."""
    branches = container.branch_repo.list_branches()

    items = [BranchItem(id=b.id, branch_name=b.branch_name, branch_code=b.branch_code) for b in branches]

    return BranchesResponse(items=items)
