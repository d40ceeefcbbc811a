"""Infrastructure layer - catalogs and output formatters."""

from .catalog import InMemoryVendorCatalog, load_catalog
from .exporters import BomCopyTextFormatter, JsonExporter, format_bom_copy_text
from .formatters import CalculationReportFormatter, TrackingReportFormatter

__all__ = [
    # Catalogs
    "InMemoryVendorCatalog",
    "load_catalog",
    # Exporters
    "BomCopyTextFormatter",
    "JsonExporter",
    "format_bom_copy_text",
    # Formatters
    "CalculationReportFormatter",
    "TrackingReportFormatter",
]
