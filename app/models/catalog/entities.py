"""Catalog entities - read-only reference data."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class Branch(BaseEntity):
    """Academic program."""

    id: str
    branch_name: str
    branch_code: str


@dataclass
class College(BaseEntity):
    """Institution."""

    id: str
    college_name: str
    location: str | None
