"""Domain services for conveyor calculation and component resolution.

This package provides:
- The belt conveyor formula pipeline
- The belt tracking risk advisor
- The gearmotor bill-of-materials resolver
"""

from .bom import BomContext, BomResolution, BomResolver, parse_model_type
from .formulas import ConveyorOutputs, calculate
from .tracking import TrackingGuidance, assess

__all__ = [
    "BomContext",
    "BomResolution",
    "BomResolver",
    "ConveyorOutputs",
    "TrackingGuidance",
    "assess",
    "calculate",
    "parse_model_type",
]
