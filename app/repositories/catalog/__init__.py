from app.repositories.catalog.branch import BranchRepository

__all__ = ["BranchRepository"]
