"""Calculation lifecycle hooks.

Hooks are passed into a single engine call; there is no process-wide hook
registry. They observe the calculation and never change its result.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CalculationHooks(Protocol):
    """Observation points around one validate + calculate cycle."""

    def on_calc_start(self) -> None:
        ...

    def on_calc_success(self, duration_ms: float) -> None:
        ...

    def on_calc_error(self, message: str) -> None:
        ...
