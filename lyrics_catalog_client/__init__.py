"""Viewer for the lyrics catalog API."""
from .api import CatalogClient, CatalogClientError
from .state import CatalogState, refresh, retry, select, close_detail

__all__ = [
    "CatalogClient",
    "CatalogClientError",
    "CatalogState",
    "refresh",
    "retry",
    "select",
    "close_detail",
]
