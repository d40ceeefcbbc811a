"""Engineering constants for the belt conveyor formula pipeline.

This module provides:
- Unit conversion factors used by the speed and throughput formulas
- Pulley defaults and belt weight coefficient breakpoints
- Shaft sizing material and load constants
- Frame height offsets and return roller geometry
"""

from __future__ import annotations


# --- Unit conversions ---

INCHES_PER_FOOT: float = 12.0
MINUTES_PER_HOUR: float = 60.0

# fpm -> inches per hour
INCHES_PER_HOUR_PER_FPM: float = INCHES_PER_FOOT * MINUTES_PER_HOUR


# --- Pulleys ---

# Used when neither a drive nor a legacy pulley diameter is given
DEFAULT_PULLEY_DIAMETER_IN: float = 4.0

# Drive pulley diameter that selects the *_2p5 belt weight coefficients
SMALL_PULLEY_COEFF_DIAMETER_IN: float = 2.5


# --- Chain drive (bottom mount) ---

DEFAULT_GM_SPROCKET_TEETH: int = 18
DEFAULT_DRIVE_SHAFT_SPROCKET_TEETH: int = 24


# --- Shaft sizing ---

STANDARD_SHAFT_DIAMETERS: tuple[float, ...] = (
    0.5, 0.625, 0.75, 0.875, 1.0, 1.125, 1.25, 1.375, 1.5,
    1.625, 1.75, 1.875, 2.0, 2.25, 2.5, 2.75, 3.0,
)

# Beyond the largest standard size, round up to this increment
SHAFT_ROUNDING_INCREMENT_IN: float = 0.25

E_STEEL_PSI: float = 30e6
SHAFT_YIELD_STRENGTH_PSI: float = 45_000  # 1045 steel
SHAFT_SAFETY_FACTOR: float = 3.0
SHAFT_SERVICE_FACTOR: float = 1.2
SHAFT_WRAP_ANGLE_DEG: float = 180.0
SHAFT_PULLEY_FRICTION: float = 0.3  # lagged pulley to belt
BEARING_SPAN_OFFSET_IN: float = 5.0  # added to belt width
KEYWAY_STRESS_CONCENTRATION: float = 1.6
MAX_SHAFT_DEFLECTION_RATIO: float = 0.001  # of bearing span

# Manual mode diameter when a value is missing
MANUAL_SHAFT_FALLBACK_DIAMETER_IN: float = 1.0


# --- Frame height ---

FRAME_STANDARD_OFFSET_IN: float = 2.5
FRAME_LOW_PROFILE_OFFSET_IN: float = 0.5
FRAME_MIN_HEIGHT_IN: float = 3.0
FRAME_DESIGN_REVIEW_THRESHOLD_IN: float = 4.0

# Return path clearance over the largest pulley before snubs are needed
SNUB_ROLLER_CLEARANCE_THRESHOLD_IN: float = 2.5
SNUB_ROLLER_QUANTITY: int = 2

GRAVITY_ROLLER_SPACING_IN: float = 60.0
MIN_GRAVITY_ROLLERS: int = 2
