"""Application layer - use cases and orchestration."""

from .commands import ResolveBomCommand
from .dtos import BomOutput
from .engine import (
    CalculationEngine,
    CalculationMetadata,
    CalculationResult,
    run_calculation,
)

__all__ = [
    "BomOutput",
    "CalculationEngine",
    "CalculationMetadata",
    "CalculationResult",
    "ResolveBomCommand",
    "run_calculation",
]
