"""Contracts module - protocols shared across layers.

This module provides:
- The Validator protocol implemented by configuration validators
- The VendorCatalog protocol consumed by the BOM resolver
- The CalculationHooks protocol observed by the engine

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.
"""

from .catalog import VendorCatalog as VendorCatalog, VendorComponent as VendorComponent
from .hooks import CalculationHooks as CalculationHooks
from .validators import Validator as Validator

__all__ = [
    "CalculationHooks",
    "Validator",
    "VendorCatalog",
    "VendorComponent",
]
