"""Vendor component catalog implementations."""

from .json_catalog import VendorComponentRecord, catalog_from_data, load_catalog
from .memory import InMemoryVendorCatalog

__all__ = [
    "InMemoryVendorCatalog",
    "VendorComponentRecord",
    "catalog_from_data",
    "load_catalog",
]
