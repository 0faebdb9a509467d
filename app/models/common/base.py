"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any, Self


@dataclass
class BaseEntity:
    """Base class for all entities."""

    @classmethod
    def from_row(cls, row: tuple) -> Self:
        """Build from a database row whose columns follow field order."""
        names = [f.name for f in fields(cls)]
        if len(row) != len(names):
            raise ValueError(f"{cls.__name__} expects {len(names)} columns, got {len(row)}")
        return cls(**dict(zip(names, row)))

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
