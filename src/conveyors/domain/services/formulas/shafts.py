"""Pulley shaft sizing.

Sizes a pulley shaft for combined bending and torsion using the von Mises
equivalent moment, then rounds up to the next standard stock diameter.

Model: simply supported shaft with the pulley at mid span. Belt tensions
follow Euler-Eytelwein (T1 / T2 = e^(mu * theta)) and the radial load is
the vector sum of the tight and slack side tensions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .constants import (
    BEARING_SPAN_OFFSET_IN,
    E_STEEL_PSI,
    KEYWAY_STRESS_CONCENTRATION,
    MAX_SHAFT_DEFLECTION_RATIO,
    SHAFT_PULLEY_FRICTION,
    SHAFT_ROUNDING_INCREMENT_IN,
    SHAFT_SAFETY_FACTOR,
    SHAFT_SERVICE_FACTOR,
    SHAFT_WRAP_ANGLE_DEG,
    SHAFT_YIELD_STRENGTH_PSI,
    STANDARD_SHAFT_DIAMETERS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShaftSizing:
    """Result of sizing one pulley shaft.

    Attributes:
        required_diameter_in: Selected stock diameter.
        calculated_diameter_in: Minimum diameter before rounding up.
        t1_lbf: Tight side tension.
        t2_lbf: Slack side tension.
        radial_load_lbf: Resultant load on the bearings.
        bending_moment_inlbf: Mid-span bending moment.
        torque_inlbf: Transmitted torque (zero for an idler/tail shaft).
        von_mises_stress_psi: Equivalent stress at the selected diameter.
        deflection_in: Mid-span deflection at the selected diameter.
        deflection_ok: Whether deflection is within 0.001 x bearing span.
        bearing_span_in: Bearing span used.
        wrap_angle_deg: Belt wrap angle used.
    """

    required_diameter_in: float
    calculated_diameter_in: float
    t1_lbf: float
    t2_lbf: float
    radial_load_lbf: float
    bending_moment_inlbf: float
    torque_inlbf: float
    von_mises_stress_psi: float
    deflection_in: float
    deflection_ok: bool
    bearing_span_in: float
    wrap_angle_deg: float


def next_standard_diameter(min_diameter_in: float) -> float:
    """Smallest standard diameter at or above a minimum.

    Past the largest standard size, rounds up to the next quarter inch.
    A non-finite minimum is returned unchanged.
    """
    for diameter in STANDARD_SHAFT_DIAMETERS:
        if diameter >= min_diameter_in:
            return diameter
    if not math.isfinite(min_diameter_in):
        return min_diameter_in
    increments = math.ceil(min_diameter_in / SHAFT_ROUNDING_INCREMENT_IN)
    return increments * SHAFT_ROUNDING_INCREMENT_IN


def size_shaft(
    belt_width_in: float,
    pulley_diameter_in: float,
    effective_tension_lbf: float,
    is_drive_pulley: bool,
) -> ShaftSizing:
    """Size a pulley shaft from the belt pull it carries.

    Args:
        belt_width_in: Belt width; the bearing span is width + 5".
        pulley_diameter_in: Pulley diameter, for the torque arm.
        effective_tension_lbf: Effective belt tension (total belt pull).
        is_drive_pulley: Drive shafts carry torque and a keyway.

    Returns:
        ShaftSizing for the shaft. Zero or negative tension returns the
        smallest standard size with zero loads.
    """
    wrap_angle_deg = SHAFT_WRAP_ANGLE_DEG
    bearing_span = belt_width_in + BEARING_SPAN_OFFSET_IN
    theta = math.radians(wrap_angle_deg)
    tension_ratio = math.exp(SHAFT_PULLEY_FRICTION * theta)

    te = effective_tension_lbf * SHAFT_SERVICE_FACTOR
    if te <= 0:
        return _minimal_sizing(bearing_span, wrap_angle_deg)

    t2 = te / (tension_ratio - 1)
    t1 = t2 * tension_ratio
    radial_load = math.sqrt(max(t1 * t1 + t2 * t2 - 2 * t1 * t2 * math.cos(theta), 0.0))
    moment = radial_load * bearing_span / 4

    torque = te * pulley_diameter_in / 2 if is_drive_pulley else 0.0
    kt = KEYWAY_STRESS_CONCENTRATION if is_drive_pulley else 1.0

    equivalent_moment = math.sqrt(moment * moment + 0.75 * torque * torque)
    calculated = (
        32 * SHAFT_SAFETY_FACTOR * kt * equivalent_moment / (math.pi * SHAFT_YIELD_STRENGTH_PSI)
    ) ** (1 / 3)

    # Plain products overflow to inf; float ** raises OverflowError.
    d = next_standard_diameter(calculated)
    d_cubed = d * d * d
    sigma_b = 32 * moment * kt / (math.pi * d_cubed)
    tau = 16 * torque / (math.pi * d_cubed)
    von_mises = math.sqrt(sigma_b * sigma_b + 3 * tau * tau)

    inertia = math.pi * d_cubed * d / 64
    span_cubed = bearing_span * bearing_span * bearing_span
    deflection = radial_load * span_cubed / (48 * E_STEEL_PSI * inertia)
    deflection_ok = deflection <= MAX_SHAFT_DEFLECTION_RATIO * bearing_span

    logger.debug(
        f"Shaft sizing ({'drive' if is_drive_pulley else 'tail'}): "
        f"Te={te:.1f} lbf, M={moment:.0f} in-lbf, d_min={calculated:.3f}, d={d}"
    )

    return ShaftSizing(
        required_diameter_in=d,
        calculated_diameter_in=_round(calculated, 3),
        t1_lbf=_round(t1, 1),
        t2_lbf=_round(t2, 1),
        radial_load_lbf=_round(radial_load, 1),
        bending_moment_inlbf=_round(moment, 0),
        torque_inlbf=_round(torque, 0),
        von_mises_stress_psi=_round(von_mises, 0),
        deflection_in=_round(deflection, 4),
        deflection_ok=deflection_ok,
        bearing_span_in=bearing_span,
        wrap_angle_deg=wrap_angle_deg,
    )


def _round(value: float, digits: int) -> float:
    if not math.isfinite(value):
        return value
    return float(round(value, digits))


def _minimal_sizing(bearing_span_in: float, wrap_angle_deg: float) -> ShaftSizing:
    smallest = STANDARD_SHAFT_DIAMETERS[0]
    return ShaftSizing(
        required_diameter_in=smallest,
        calculated_diameter_in=smallest,
        t1_lbf=0.0,
        t2_lbf=0.0,
        radial_load_lbf=0.0,
        bending_moment_inlbf=0.0,
        torque_inlbf=0.0,
        von_mises_stress_psi=0.0,
        deflection_in=0.0,
        deflection_ok=True,
        bearing_span_in=bearing_span_in,
        wrap_angle_deg=wrap_angle_deg,
    )
