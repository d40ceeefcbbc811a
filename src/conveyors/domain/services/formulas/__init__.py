"""Belt conveyor formula pipeline.

This package provides:
- Pure formulas for belt weight, load, pull, speed, torque and throughput
- Shaft sizing from combined bending and torsion
- Frame height, return roller and cost flag rules
- Premium feature detection
- calculate(), which runs everything in dependency order
"""

from __future__ import annotations

from .frame import (
    FrameCostFlags,
    calculate_effective_frame_height,
    calculate_frame_cost_flags,
    calculate_gravity_roller_quantity,
    calculate_requires_snub_rollers,
    calculate_snub_roller_quantity,
)
from .formulas import (
    calculate_belt_speed,
    calculate_capacity,
    calculate_drive_shaft_rpm,
    calculate_effective_belt_coefficients,
    calculate_gear_ratio,
    calculate_incline_pull,
    calculate_parts_on_belt,
    calculate_total_belt_length,
    safe_divide,
)
from .models import ConveyorOutputs
from .pipeline import calculate, resolve_effective_cof, resolve_pulley_diameters
from .premium import PremiumFlags, calculate_premium_flags
from .shafts import ShaftSizing, next_standard_diameter, size_shaft

__all__ = [
    # Pipeline
    "calculate",
    "resolve_effective_cof",
    "resolve_pulley_diameters",
    "ConveyorOutputs",
    # Formulas
    "calculate_belt_speed",
    "calculate_capacity",
    "calculate_drive_shaft_rpm",
    "calculate_effective_belt_coefficients",
    "calculate_gear_ratio",
    "calculate_incline_pull",
    "calculate_parts_on_belt",
    "calculate_total_belt_length",
    "safe_divide",
    # Shafts
    "ShaftSizing",
    "next_standard_diameter",
    "size_shaft",
    # Frame
    "FrameCostFlags",
    "calculate_effective_frame_height",
    "calculate_frame_cost_flags",
    "calculate_gravity_roller_quantity",
    "calculate_requires_snub_rollers",
    "calculate_snub_roller_quantity",
    # Premium
    "PremiumFlags",
    "calculate_premium_flags",
]
