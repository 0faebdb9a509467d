"""Catalog API response schemas."""

from pydantic import BaseModel


class BranchItem(BaseModel):
    """Branch info."""

    id: str
    branch_name: str
    branch_code: str


class BranchesResponse(BaseModel):
    """Available branches response."""

    items: list[BranchItem]
