"""Formula pipeline output model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from conveyors.domain.value_objects import BedType, SpeedMode

from .frame import FrameCostFlags
from .premium import PremiumFlags
from .shafts import ShaftSizing


@dataclass(frozen=True)
class ConveyorOutputs:
    """Mechanical outputs derived from one configuration.

    Values are always numeric. A physically meaningless configuration
    produces inf or nan in the affected fields rather than an exception.
    Throughput fields are None unless a required throughput was given;
    belt minimum pulley fields are None unless the selected belt
    publishes a minimum.

    Attributes:
        parts_on_belt: Parts resting on the carrying side.
        load_on_belt_lbf: Weight of those parts.
        belt_weight_lbf: Belt weight.
        total_load_lbf: Belt weight plus part load.
        total_belt_length_in: Open belt length around both pulleys.
        friction_pull_lb: Friction coefficient times total load.
        incline_pull_lb: Gravity component along the incline.
        starting_belt_pull_lb: Starting pull allowance.
        total_belt_pull_lb: Friction + incline + starting pull.
        belt_pull_calc_lb: Legacy belt pull figure.
        drive_shaft_rpm: Required drive shaft speed.
        torque_drive_shaft_inlbf: Drive shaft torque including safety factor.
        gear_ratio: Motor RPM over drive shaft RPM.
        chain_ratio: Sprocket ratio (1 for shaft mounted drives).
        gearmotor_output_rpm: Drive shaft RPM times chain ratio.
        total_drive_ratio: Gear ratio times chain ratio.
    """

    # Load and pull
    parts_on_belt: float
    load_on_belt_lbf: float
    belt_weight_lbf: float
    total_load_lbf: float
    total_belt_length_in: float
    friction_pull_lb: float
    incline_pull_lb: float
    starting_belt_pull_lb: float
    total_belt_pull_lb: float
    belt_pull_calc_lb: float
    piw_used: float
    pil_used: float
    belt_piw_effective: float
    belt_pil_effective: float

    # Speed and throughput
    speed_mode_used: SpeedMode
    pitch_in: float
    belt_speed_fpm: float
    capacity_pph: float
    target_pph: float | None
    meets_throughput: bool | None
    rpm_required_for_target: float | None
    throughput_margin_achieved_pct: float | None

    # Drive
    drive_shaft_rpm: float
    torque_drive_shaft_inlbf: float
    gear_ratio: float
    chain_ratio: float
    gearmotor_output_rpm: float
    total_drive_ratio: float
    safety_factor_used: float
    starting_belt_pull_lb_used: float
    friction_coeff_used: float
    motor_rpm_used: float

    # Tracking, pulleys and shafts
    is_v_guided: bool
    pulley_requires_crown: bool
    pulley_face_extra_in: float
    pulley_face_length_in: float
    drive_pulley_diameter_in: float
    tail_pulley_diameter_in: float
    drive_shaft_diameter_in: float
    tail_shaft_diameter_in: float
    drive_shaft_sizing: ShaftSizing | None
    tail_shaft_sizing: ShaftSizing | None
    min_pulley_base_in: float | None
    min_pulley_drive_required_in: float | None
    min_pulley_tail_required_in: float | None
    drive_pulley_meets_minimum: bool | None
    tail_pulley_meets_minimum: bool | None

    # Frame and rollers
    effective_frame_height_in: float
    requires_snub_rollers: bool
    cost_flags: FrameCostFlags
    gravity_roller_quantity: int
    gravity_roller_spacing_in: float
    snub_roller_quantity: int

    # Product family
    bed_type_used: BedType
    premium_flags: PremiumFlags

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict with enum values as strings."""
        return _plain(asdict(self))


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value
