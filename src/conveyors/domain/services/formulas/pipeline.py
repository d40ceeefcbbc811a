"""Formula pipeline: validated inputs in, mechanical outputs out.

calculate() runs the formulas in dependency order. It is a pure function
of its two arguments with no fallible branches, so it is also called for
configurations that failed validation to show partial results.
"""

from __future__ import annotations

import logging

from conveyors.domain.entities import CalculationParameters, ConveyorInputs
from conveyors.domain.value_objects import (
    BedType,
    GearmotorMountingStyle,
    ShaftDiameterMode,
    SpeedMode,
)

from . import formulas as f
from .constants import (
    DEFAULT_DRIVE_SHAFT_SPROCKET_TEETH,
    DEFAULT_GM_SPROCKET_TEETH,
    DEFAULT_PULLEY_DIAMETER_IN,
    GRAVITY_ROLLER_SPACING_IN,
    MANUAL_SHAFT_FALLBACK_DIAMETER_IN,
)
from .frame import (
    calculate_effective_frame_height,
    calculate_frame_cost_flags,
    calculate_gravity_roller_quantity,
    calculate_requires_snub_rollers,
    calculate_snub_roller_quantity,
)
from .models import ConveyorOutputs
from .premium import calculate_premium_flags
from .shafts import ShaftSizing, size_shaft

logger = logging.getLogger(__name__)


def resolve_pulley_diameters(inputs: ConveyorInputs) -> tuple[float, float]:
    """Reconcile the legacy single pulley diameter with drive/tail diameters.

    The drive diameter wins over the legacy field, the tail defaults to the
    drive, and 4.0" is used when nothing is given.

    Returns:
        Tuple of (drive_pulley_diameter_in, tail_pulley_diameter_in).
    """
    if inputs.drive_pulley_diameter_in is not None:
        drive = inputs.drive_pulley_diameter_in
    elif inputs.pulley_diameter_in is not None:
        drive = inputs.pulley_diameter_in
    else:
        drive = DEFAULT_PULLEY_DIAMETER_IN

    tail = inputs.tail_pulley_diameter_in
    if tail is None:
        tail = drive
    return drive, tail


def resolve_effective_cof(inputs: ConveyorInputs, params: CalculationParameters) -> float:
    """Friction coefficient: user override, then bed preset, then parameter default."""
    if inputs.friction_coeff is not None:
        return inputs.friction_coeff
    if inputs.bed_type == BedType.SLIDER_BED:
        return params.friction_coeff_slider_bed
    if inputs.bed_type == BedType.ROLLER_BED:
        return params.friction_coeff_roller_bed
    return params.friction_coeff


def calculate(inputs: ConveyorInputs, params: CalculationParameters) -> ConveyorOutputs:
    """Compute every mechanical output for a configuration.

    Args:
        inputs: Canonical configuration inputs.
        params: Merged calculation parameters.

    Returns:
        ConveyorOutputs. Never raises for numeric edge cases.
    """
    safety_factor = _or(inputs.safety_factor, params.safety_factor)
    starting_pull = _or(inputs.starting_belt_pull_lb, params.starting_belt_pull_lb)
    motor_rpm = _or(inputs.motor_rpm, params.motor_rpm)
    friction_coeff = resolve_effective_cof(inputs, params)

    drive_d, tail_d = resolve_pulley_diameters(inputs)
    cc = inputs.conveyor_length_cc_in
    width = inputs.belt_width_in

    # Belt and load
    piw, pil, belt_piw_eff, belt_pil_eff = f.calculate_effective_belt_coefficients(
        drive_d,
        params,
        belt_piw_override=inputs.belt_piw_override,
        belt_pil_override=inputs.belt_pil_override,
        belt_piw_from_catalog=inputs.belt_piw,
        belt_pil_from_catalog=inputs.belt_pil,
        advanced_piw=inputs.belt_coeff_piw,
        advanced_pil=inputs.belt_coeff_pil,
    )
    belt_length = f.calculate_total_belt_length(cc, drive_d, tail_d)
    belt_weight = f.calculate_belt_weight(piw, pil, width, belt_length)

    travel = f.travel_dimension(inputs.part_length_in, inputs.part_width_in, inputs.orientation)
    parts_on_belt = f.calculate_parts_on_belt(cc, travel, inputs.part_spacing_in)
    load_on_belt = f.calculate_load_on_belt(parts_on_belt, inputs.part_weight_lbs)
    total_load = f.calculate_total_load(belt_weight, load_on_belt)

    # Pull
    avg_load_per_ft = f.calculate_avg_load_per_foot(total_load, cc)
    belt_pull_calc = f.calculate_belt_pull(avg_load_per_ft, friction_coeff, cc)
    friction_pull = f.calculate_friction_pull(friction_coeff, total_load)
    incline_pull = f.calculate_incline_pull(total_load, inputs.conveyor_incline_deg)
    total_pull = f.calculate_total_belt_pull(friction_pull, incline_pull, starting_pull)

    # Speed
    pitch = f.calculate_pitch(travel, inputs.part_spacing_in)
    if inputs.speed_mode == SpeedMode.BELT_SPEED:
        belt_speed = inputs.belt_speed_fpm
        drive_rpm = f.calculate_drive_shaft_rpm(belt_speed, drive_d)
    else:
        drive_rpm = _or(inputs.drive_rpm_input, inputs.drive_rpm, float("nan"))
        belt_speed = f.calculate_belt_speed(drive_rpm, drive_d)
    capacity = f.calculate_capacity(belt_speed, pitch)

    torque = f.calculate_torque_drive_shaft(total_pull, drive_d, safety_factor)
    gear_ratio = f.calculate_gear_ratio(motor_rpm, drive_rpm)

    if inputs.gearmotor_mounting_style == GearmotorMountingStyle.BOTTOM_MOUNT:
        chain_ratio = f.calculate_chain_ratio(
            _or(inputs.gm_sprocket_teeth, DEFAULT_GM_SPROCKET_TEETH),
            _or(inputs.drive_shaft_sprocket_teeth, DEFAULT_DRIVE_SHAFT_SPROCKET_TEETH),
        )
    else:
        chain_ratio = 1.0

    # Throughput
    target_pph = meets = rpm_required = margin_achieved = None
    required = inputs.required_throughput_pph
    if required is not None and required > 0:
        target_pph = f.calculate_target_throughput(required, inputs.throughput_margin_pct)
        meets = capacity >= target_pph
        rpm_required = f.calculate_rpm_required(target_pph, pitch, drive_d)
        margin_achieved = f.calculate_margin_achieved(capacity, required)

    # Tracking and pulley face
    is_v_guided = f.calculate_is_v_guided(inputs.belt_tracking_method)
    face_extra = f.calculate_pulley_face_extra(is_v_guided, params)

    # Shafts
    drive_sizing: ShaftSizing | None = None
    tail_sizing: ShaftSizing | None = None
    if inputs.shaft_diameter_mode == ShaftDiameterMode.MANUAL:
        drive_shaft_d = _or(inputs.drive_shaft_diameter_in, MANUAL_SHAFT_FALLBACK_DIAMETER_IN)
        tail_shaft_d = _or(inputs.tail_shaft_diameter_in, MANUAL_SHAFT_FALLBACK_DIAMETER_IN)
    else:
        drive_sizing = size_shaft(width, drive_d, total_pull, is_drive_pulley=True)
        tail_sizing = size_shaft(width, tail_d, total_pull, is_drive_pulley=False)
        drive_shaft_d = drive_sizing.required_diameter_in
        tail_shaft_d = tail_sizing.required_diameter_in

    # Frame and rollers
    frame_height = calculate_effective_frame_height(
        inputs.frame_height_mode, drive_d, inputs.custom_frame_height_in
    )
    needs_snubs = calculate_requires_snub_rollers(frame_height, drive_d, tail_d)

    # Belt minimum pulley
    min_pulley = (
        inputs.belt_min_pulley_dia_with_vguide_in
        if is_v_guided
        else inputs.belt_min_pulley_dia_no_vguide_in
    )

    outputs = ConveyorOutputs(
        parts_on_belt=parts_on_belt,
        load_on_belt_lbf=load_on_belt,
        belt_weight_lbf=belt_weight,
        total_load_lbf=total_load,
        total_belt_length_in=belt_length,
        friction_pull_lb=friction_pull,
        incline_pull_lb=incline_pull,
        starting_belt_pull_lb=starting_pull,
        total_belt_pull_lb=total_pull,
        belt_pull_calc_lb=belt_pull_calc,
        piw_used=piw,
        pil_used=pil,
        belt_piw_effective=belt_piw_eff,
        belt_pil_effective=belt_pil_eff,
        speed_mode_used=inputs.speed_mode,
        pitch_in=pitch,
        belt_speed_fpm=belt_speed,
        capacity_pph=capacity,
        target_pph=target_pph,
        meets_throughput=meets,
        rpm_required_for_target=rpm_required,
        throughput_margin_achieved_pct=margin_achieved,
        drive_shaft_rpm=drive_rpm,
        torque_drive_shaft_inlbf=torque,
        gear_ratio=gear_ratio,
        chain_ratio=chain_ratio,
        gearmotor_output_rpm=drive_rpm * chain_ratio,
        total_drive_ratio=gear_ratio * chain_ratio,
        safety_factor_used=safety_factor,
        starting_belt_pull_lb_used=starting_pull,
        friction_coeff_used=friction_coeff,
        motor_rpm_used=motor_rpm,
        is_v_guided=is_v_guided,
        pulley_requires_crown=not is_v_guided,
        pulley_face_extra_in=face_extra,
        pulley_face_length_in=f.calculate_pulley_face_length(width, face_extra),
        drive_pulley_diameter_in=drive_d,
        tail_pulley_diameter_in=tail_d,
        drive_shaft_diameter_in=drive_shaft_d,
        tail_shaft_diameter_in=tail_shaft_d,
        drive_shaft_sizing=drive_sizing,
        tail_shaft_sizing=tail_sizing,
        min_pulley_base_in=min_pulley,
        min_pulley_drive_required_in=min_pulley,
        min_pulley_tail_required_in=min_pulley,
        drive_pulley_meets_minimum=None if min_pulley is None else drive_d >= min_pulley,
        tail_pulley_meets_minimum=None if min_pulley is None else tail_d >= min_pulley,
        effective_frame_height_in=frame_height,
        requires_snub_rollers=needs_snubs,
        cost_flags=calculate_frame_cost_flags(inputs.frame_height_mode, frame_height, needs_snubs),
        gravity_roller_quantity=calculate_gravity_roller_quantity(cc, needs_snubs),
        gravity_roller_spacing_in=GRAVITY_ROLLER_SPACING_IN,
        snub_roller_quantity=calculate_snub_roller_quantity(needs_snubs),
        bed_type_used=inputs.bed_type,
        premium_flags=calculate_premium_flags(inputs),
    )

    logger.debug(
        f"Calculated outputs: pull={total_pull:.2f} lb, rpm={drive_rpm:.2f}, "
        f"torque={torque:.1f} in-lbf, ratio={gear_ratio:.2f}"
    )
    return outputs


def _or(*values):
    for value in values:
        if value is not None:
            return value
    return None
