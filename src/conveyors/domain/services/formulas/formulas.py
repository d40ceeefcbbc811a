"""Pure belt conveyor formulas.

Every function here is total: it returns a number for any numeric input,
including physically meaningless ones. A division by zero yields inf or
nan instead of raising, so outputs stay computable while validation
reports what is wrong with the configuration.

Units are explicit in parameter names. Nothing is converted twice: each
function converts at most once, at the point where feet or hours appear
in its formula.
"""

from __future__ import annotations

import math

from conveyors.domain.entities import CalculationParameters
from conveyors.domain.value_objects import BeltTrackingMethod, Orientation

from .constants import (
    INCHES_PER_FOOT,
    INCHES_PER_HOUR_PER_FPM,
    SMALL_PULLEY_COEFF_DIAMETER_IN,
)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising ZeroDivisionError.

    Args:
        numerator: Dividend.
        denominator: Divisor.

    Returns:
        numerator / denominator, or +/-inf for a non-zero numerator over
        zero, or nan for 0/0 and nan operands.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


# --- Belt weight ---


def calculate_effective_belt_coefficients(
    drive_pulley_diameter_in: float,
    params: CalculationParameters,
    belt_piw_override: float | None = None,
    belt_pil_override: float | None = None,
    belt_piw_from_catalog: float | None = None,
    belt_pil_from_catalog: float | None = None,
    advanced_piw: float | None = None,
    advanced_pil: float | None = None,
) -> tuple[float, float, float, float]:
    """Resolve the belt weight coefficients used by the belt weight formula.

    Precedence, most to least specific: user override of the catalog belt,
    catalog belt value, advanced parameter override, then the
    pulley-diameter default (0.138 for a 2.5" drive pulley, else 0.109).

    Returns:
        Tuple of (piw, pil, belt_piw_effective, belt_pil_effective). The
        effective belt values fall back to the used coefficients when no
        belt is selected.
    """
    belt_piw = belt_piw_override if belt_piw_override is not None else belt_piw_from_catalog
    belt_pil = belt_pil_override if belt_pil_override is not None else belt_pil_from_catalog

    small = drive_pulley_diameter_in == SMALL_PULLEY_COEFF_DIAMETER_IN
    default_piw = params.piw_2p5 if small else params.piw_other
    default_pil = params.pil_2p5 if small else params.pil_other

    piw = _first_set(belt_piw, advanced_piw, default_piw)
    pil = _first_set(belt_pil, advanced_pil, default_pil)

    return (
        piw,
        pil,
        belt_piw if belt_piw is not None else piw,
        belt_pil if belt_pil is not None else pil,
    )


def calculate_total_belt_length(
    conveyor_length_cc_in: float,
    drive_pulley_diameter_in: float,
    tail_pulley_diameter_in: float,
) -> float:
    """Open belt length: two spans plus half a wrap around each pulley.

    total = 2 * cc + pi * (drive + tail) / 2
    """
    return 2 * conveyor_length_cc_in + math.pi * (
        drive_pulley_diameter_in + tail_pulley_diameter_in
    ) / 2


def calculate_belt_weight(
    piw: float, pil: float, belt_width_in: float, total_belt_length_in: float
) -> float:
    return piw * pil * belt_width_in * total_belt_length_in


# --- Parts and load ---


def travel_dimension(
    part_length_in: float | None,
    part_width_in: float | None,
    orientation: Orientation,
) -> float | None:
    """Part dimension that lies along the direction of travel."""
    if orientation == Orientation.LENGTHWISE:
        return part_length_in
    return part_width_in


def calculate_parts_on_belt(
    conveyor_length_cc_in: float,
    travel_dim_in: float | None,
    part_spacing_in: float,
) -> float:
    """Number of parts resting on the carrying side.

    A conveyor with no described part carries no parts.
    """
    if travel_dim_in is None:
        return 0.0
    return safe_divide(conveyor_length_cc_in, travel_dim_in + part_spacing_in)


def calculate_load_on_belt(parts_on_belt: float, part_weight_lbs: float | None) -> float:
    if part_weight_lbs is None:
        return 0.0
    return parts_on_belt * part_weight_lbs


def calculate_total_load(belt_weight_lbf: float, load_on_belt_lbf: float) -> float:
    return belt_weight_lbf + load_on_belt_lbf


def calculate_avg_load_per_foot(total_load_lbf: float, conveyor_length_cc_in: float) -> float:
    return safe_divide(total_load_lbf, conveyor_length_cc_in / INCHES_PER_FOOT)


# --- Belt pull ---


def calculate_belt_pull(
    avg_load_per_ft: float, friction_coeff: float, conveyor_length_cc_in: float
) -> float:
    """Legacy belt pull, kept alongside the friction + incline model."""
    return avg_load_per_ft * friction_coeff * (conveyor_length_cc_in / INCHES_PER_FOOT)


def calculate_friction_pull(friction_coeff: float, total_load_lb: float) -> float:
    """Friction pull on the full load, independent of incline."""
    return friction_coeff * total_load_lb


def calculate_incline_pull(total_load_lb: float, incline_deg: float) -> float:
    """Gravity component of the load along the incline."""
    if not math.isfinite(incline_deg):
        return math.nan
    return total_load_lb * math.sin(math.radians(incline_deg))


def calculate_total_belt_pull(
    friction_pull_lb: float, incline_pull_lb: float, starting_belt_pull_lb: float
) -> float:
    return friction_pull_lb + incline_pull_lb + starting_belt_pull_lb


# --- Speed, torque and ratio ---


def calculate_drive_shaft_rpm(belt_speed_fpm: float, pulley_diameter_in: float) -> float:
    """Drive shaft RPM for a belt speed: fpm / (pi * D_ft)."""
    return safe_divide(belt_speed_fpm, (pulley_diameter_in / INCHES_PER_FOOT) * math.pi)


def calculate_belt_speed(drive_rpm: float, pulley_diameter_in: float) -> float:
    """Belt speed for a drive shaft RPM: rpm * pi * D_ft."""
    return drive_rpm * math.pi * (pulley_diameter_in / INCHES_PER_FOOT)


def calculate_torque_drive_shaft(
    total_belt_pull_lbf: float, pulley_diameter_in: float, safety_factor: float
) -> float:
    return total_belt_pull_lbf * (pulley_diameter_in / 2) * safety_factor


def calculate_gear_ratio(motor_rpm: float, drive_shaft_rpm: float) -> float:
    return safe_divide(motor_rpm, drive_shaft_rpm)


def calculate_chain_ratio(gm_sprocket_teeth: float, drive_shaft_sprocket_teeth: float) -> float:
    """Sprocket ratio, driven over driver. A toothless driver means no chain."""
    if gm_sprocket_teeth > 0:
        return drive_shaft_sprocket_teeth / gm_sprocket_teeth
    return 1.0


# --- Throughput ---


def calculate_pitch(travel_dim_in: float | None, part_spacing_in: float) -> float:
    """Part pitch along the belt. Unknown without a described part."""
    if travel_dim_in is None:
        return math.nan
    return travel_dim_in + part_spacing_in


def calculate_capacity(belt_speed_fpm: float, pitch_in: float) -> float:
    """Parts per hour the belt can carry at a pitch."""
    return safe_divide(belt_speed_fpm * INCHES_PER_HOUR_PER_FPM, pitch_in)


def calculate_target_throughput(required_pph: float, margin_pct: float) -> float:
    return required_pph * (1 + margin_pct / 100)


def calculate_rpm_required(target_pph: float, pitch_in: float, pulley_diameter_in: float) -> float:
    """Drive RPM needed to reach a target rate."""
    pulley_diameter_ft = pulley_diameter_in / INCHES_PER_FOOT
    return safe_divide(
        target_pph * pitch_in, INCHES_PER_HOUR_PER_FPM * math.pi * pulley_diameter_ft
    )


def calculate_margin_achieved(capacity_pph: float, required_pph: float) -> float:
    if required_pph == 0:
        return 0.0
    return (capacity_pph / required_pph - 1) * 100


# --- Tracking and pulley face ---


def calculate_is_v_guided(method: BeltTrackingMethod) -> bool:
    return method == BeltTrackingMethod.V_GUIDED


def calculate_pulley_face_extra(is_v_guided: bool, params: CalculationParameters) -> float:
    if is_v_guided:
        return params.pulley_face_extra_v_guided_in
    return params.pulley_face_extra_crowned_in


def calculate_pulley_face_length(belt_width_in: float, face_extra_in: float) -> float:
    return belt_width_in + face_extra_in


def _first_set(*values: float | None) -> float:
    for value in values:
        if value is not None:
            return value
    raise ValueError("at least one value must be set")
