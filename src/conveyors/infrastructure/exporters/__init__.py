"""Text and JSON renderers for engine results.

Usage:
    from conveyors.infrastructure.exporters import JsonExporter, format_bom_copy_text

    text = format_bom_copy_text(bom_output)
    payload = JsonExporter().export_result(result)
"""

from .bom_text import BomCopyTextFormatter, format_bom_copy_text
from .json_export import JsonExporter

__all__ = [
    "BomCopyTextFormatter",
    "JsonExporter",
    "format_bom_copy_text",
]
