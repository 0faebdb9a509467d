"""Catalog API."""

from web.api.catalog.views import get_branches

__all__ = [
    "get_branches",
]
