"""Domain layer - core engineering logic."""

from .entities import CalculationParameters, ConveyorInputs

__all__ = [
    "CalculationParameters",
    "ConveyorInputs",
]
