"""Unit tests for the belt conveyor formulas and the calculate() pipeline."""

from __future__ import annotations

import math

import pytest

from conveyors.domain.entities import CalculationParameters, ConveyorInputs
from conveyors.domain.services.formulas import (
    calculate,
    calculate_belt_speed,
    calculate_capacity,
    calculate_drive_shaft_rpm,
    calculate_effective_belt_coefficients,
    calculate_gear_ratio,
    calculate_incline_pull,
    calculate_parts_on_belt,
    calculate_total_belt_length,
    resolve_effective_cof,
    resolve_pulley_diameters,
    safe_divide,
)
from conveyors.domain.value_objects import (
    BedType,
    BeltTrackingMethod,
    GearmotorMountingStyle,
    Orientation,
    PremiumLevel,
    ShaftDiameterMode,
    SpeedMode,
)


class TestSafeDivide:
    """Division never raises."""

    def test_regular_division(self) -> None:
        assert safe_divide(10.0, 4.0) == 2.5

    def test_positive_over_zero_is_inf(self) -> None:
        assert safe_divide(5.0, 0.0) == math.inf

    def test_negative_over_zero_is_negative_inf(self) -> None:
        assert safe_divide(-5.0, 0.0) == -math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(safe_divide(0.0, 0.0))


class TestBeltLength:
    """Open belt length uses half a wrap around each pulley."""

    def test_equal_pulleys_add_pi_d(self) -> None:
        assert calculate_total_belt_length(100.0, 4.0, 4.0) == pytest.approx(200.0 + math.pi * 4.0)

    def test_split_pulleys_average(self) -> None:
        length = calculate_total_belt_length(100.0, 6.0, 4.0)
        assert length == pytest.approx(200.0 + math.pi * 5.0)

    def test_not_full_circumference(self) -> None:
        length = calculate_total_belt_length(100.0, 4.0, 4.0)
        assert length != pytest.approx(200.0 + 2 * math.pi * 4.0)


class TestBeltCoefficients:
    """PIW/PIL precedence: override, catalog, advanced, pulley default."""

    def test_default_for_small_pulley(self, parameters: CalculationParameters) -> None:
        piw, pil, _, _ = calculate_effective_belt_coefficients(2.5, parameters)
        assert (piw, pil) == (0.138, 0.138)

    def test_default_for_other_pulley(self, parameters: CalculationParameters) -> None:
        piw, pil, _, _ = calculate_effective_belt_coefficients(4.0, parameters)
        assert (piw, pil) == (0.109, 0.109)

    def test_advanced_beats_default(self, parameters: CalculationParameters) -> None:
        piw, pil, _, _ = calculate_effective_belt_coefficients(
            4.0, parameters, advanced_piw=0.12, advanced_pil=0.13
        )
        assert (piw, pil) == (0.12, 0.13)

    def test_catalog_beats_advanced(self, parameters: CalculationParameters) -> None:
        piw, _, belt_piw, _ = calculate_effective_belt_coefficients(
            4.0, parameters, belt_piw_from_catalog=0.15, advanced_piw=0.12
        )
        assert piw == 0.15
        assert belt_piw == 0.15

    def test_override_beats_catalog(self, parameters: CalculationParameters) -> None:
        piw, _, _, _ = calculate_effective_belt_coefficients(
            4.0, parameters, belt_piw_override=0.2, belt_piw_from_catalog=0.15
        )
        assert piw == 0.2


class TestPartsAndPull:
    """Parts on belt, load and belt pull."""

    def test_lengthwise_uses_part_length(self) -> None:
        assert calculate_parts_on_belt(120.0, 10.0, 2.0) == pytest.approx(10.0)

    def test_no_part_means_no_parts(self) -> None:
        assert calculate_parts_on_belt(120.0, None, 2.0) == 0.0

    def test_crosswise_divides_by_width(self, baseline_inputs: ConveyorInputs) -> None:
        inputs = baseline_inputs.with_changes(
            part_length_in=10.0,
            part_width_in=4.0,
            part_spacing_in=2.0,
            orientation=Orientation.CROSSWISE,
        )
        outputs = calculate(inputs, CalculationParameters())
        assert outputs.parts_on_belt == pytest.approx(20.0)

    def test_incline_pull_is_gravity_component(self) -> None:
        assert calculate_incline_pull(200.0, 30.0) == pytest.approx(100.0)

    def test_flat_conveyor_has_no_incline_pull(self) -> None:
        assert calculate_incline_pull(200.0, 0.0) == 0.0

    def test_total_pull_adds_starting_allowance(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        outputs = calculate(baseline_inputs, parameters)
        assert outputs.total_belt_pull_lb == pytest.approx(
            outputs.friction_pull_lb + outputs.incline_pull_lb + 75.0
        )
        assert outputs.friction_pull_lb == pytest.approx(0.25 * outputs.total_load_lbf)

    def test_load_on_belt(self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters) -> None:
        inputs = baseline_inputs.with_changes(
            part_weight_lbs=5.0, part_length_in=10.0, part_spacing_in=2.0
        )
        outputs = calculate(inputs, parameters)
        assert outputs.load_on_belt_lbf == pytest.approx(50.0)
        assert outputs.total_load_lbf == pytest.approx(outputs.belt_weight_lbf + 50.0)

    def test_belt_weight_converted_once(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        outputs = calculate(baseline_inputs, parameters)
        expected = 0.109 * 0.109 * 48.0 * outputs.total_belt_length_in
        assert outputs.belt_weight_lbf == pytest.approx(expected)


class TestSpeedAndRatio:
    """Drive RPM, belt speed, torque and gear ratio."""

    def test_drive_rpm_from_belt_speed(self) -> None:
        rpm = calculate_drive_shaft_rpm(65.0, 4.0)
        assert rpm == pytest.approx(65.0 / (math.pi * 4.0 / 12.0))

    def test_belt_speed_inverts_drive_rpm(self) -> None:
        rpm = calculate_drive_shaft_rpm(65.0, 4.0)
        assert calculate_belt_speed(rpm, 4.0) == pytest.approx(65.0)

    def test_zero_pulley_gives_inf_rpm(self) -> None:
        assert calculate_drive_shaft_rpm(65.0, 0.0) == math.inf

    def test_zero_rpm_gives_inf_ratio(self) -> None:
        assert calculate_gear_ratio(1750.0, 0.0) == math.inf

    def test_pipeline_torque_and_ratio(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        outputs = calculate(baseline_inputs, parameters)
        assert outputs.torque_drive_shaft_inlbf == pytest.approx(
            outputs.total_belt_pull_lb * 2.0 * 2.0
        )
        assert outputs.gear_ratio == pytest.approx(1750.0 / outputs.drive_shaft_rpm)
        assert outputs.chain_ratio == 1.0
        assert outputs.total_drive_ratio == pytest.approx(outputs.gear_ratio)

    def test_drive_rpm_mode_prefers_input(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(
            speed_mode=SpeedMode.DRIVE_RPM, drive_rpm=50.0, drive_rpm_input=60.0
        )
        outputs = calculate(inputs, parameters)
        assert outputs.drive_shaft_rpm == 60.0
        assert outputs.belt_speed_fpm == pytest.approx(60.0 * math.pi * 4.0 / 12.0)
        assert outputs.speed_mode_used == SpeedMode.DRIVE_RPM

    def test_drive_rpm_mode_falls_back_to_legacy(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(speed_mode=SpeedMode.DRIVE_RPM, drive_rpm=50.0)
        assert calculate(inputs, parameters).drive_shaft_rpm == 50.0

    def test_bottom_mount_chain_ratio(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(
            gearmotor_mounting_style=GearmotorMountingStyle.BOTTOM_MOUNT
        )
        outputs = calculate(inputs, parameters)
        assert outputs.chain_ratio == pytest.approx(24 / 18)
        assert outputs.gearmotor_output_rpm == pytest.approx(outputs.drive_shaft_rpm * 24 / 18)

    def test_user_overrides_win(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(safety_factor=3.0, motor_rpm=3450.0)
        outputs = calculate(inputs, parameters)
        assert outputs.safety_factor_used == 3.0
        assert outputs.motor_rpm_used == 3450.0


class TestThroughput:
    """Throughput fields appear only with a positive requirement."""

    def test_capacity(self) -> None:
        assert calculate_capacity(65.0, 12.0) == pytest.approx(3900.0)

    def test_no_requirement_no_throughput_fields(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        outputs = calculate(baseline_inputs, parameters)
        assert outputs.target_pph is None
        assert outputs.meets_throughput is None
        assert outputs.rpm_required_for_target is None

    def test_requirement_with_margin(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(
            part_length_in=10.0,
            part_spacing_in=2.0,
            required_throughput_pph=3000.0,
            throughput_margin_pct=10.0,
        )
        outputs = calculate(inputs, parameters)
        assert outputs.pitch_in == 12.0
        assert outputs.capacity_pph == pytest.approx(3900.0)
        assert outputs.target_pph == pytest.approx(3300.0)
        assert outputs.meets_throughput is True
        assert outputs.throughput_margin_achieved_pct == pytest.approx(30.0)

    def test_missing_part_gives_unknown_pitch(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        outputs = calculate(baseline_inputs, parameters)
        assert math.isnan(outputs.pitch_in)


class TestPulleysAndTracking:
    """Pulley reconciliation, friction presets and pulley face."""

    def test_pulley_default(self, baseline_inputs: ConveyorInputs) -> None:
        assert resolve_pulley_diameters(baseline_inputs) == (4.0, 4.0)

    def test_legacy_pulley_used_for_both(self, baseline_inputs: ConveyorInputs) -> None:
        inputs = baseline_inputs.with_changes(pulley_diameter_in=6.0)
        assert resolve_pulley_diameters(inputs) == (6.0, 6.0)

    def test_drive_wins_and_tail_defaults_to_drive(self, baseline_inputs: ConveyorInputs) -> None:
        inputs = baseline_inputs.with_changes(pulley_diameter_in=6.0, drive_pulley_diameter_in=5.0)
        assert resolve_pulley_diameters(inputs) == (5.0, 5.0)
        inputs = inputs.with_changes(tail_pulley_diameter_in=4.0)
        assert resolve_pulley_diameters(inputs) == (5.0, 4.0)

    def test_cof_precedence(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        assert resolve_effective_cof(baseline_inputs, parameters) == 0.25
        roller = baseline_inputs.with_changes(bed_type=BedType.ROLLER_BED)
        assert resolve_effective_cof(roller, parameters) == 0.03
        other = baseline_inputs.with_changes(bed_type=BedType.OTHER)
        assert resolve_effective_cof(other, parameters) == parameters.friction_coeff
        overridden = roller.with_changes(friction_coeff=0.4)
        assert resolve_effective_cof(overridden, parameters) == 0.4

    def test_crowned_face_extra(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        outputs = calculate(baseline_inputs, parameters)
        assert outputs.pulley_requires_crown is True
        assert outputs.pulley_face_length_in == 50.0

    def test_v_guided_face_extra(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(
            belt_tracking_method=BeltTrackingMethod.V_GUIDED, v_guide_key="K10"
        )
        outputs = calculate(inputs, parameters)
        assert outputs.is_v_guided is True
        assert outputs.pulley_face_length_in == 48.5

    def test_belt_minimum_pulley_outputs(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(
            belt_catalog_key="BELT-1", belt_min_pulley_dia_no_vguide_in=6.0
        )
        outputs = calculate(inputs, parameters)
        assert outputs.min_pulley_base_in == 6.0
        assert outputs.drive_pulley_meets_minimum is False


class TestPipelineEdgeCases:
    """calculate() stays total for invalid configurations."""

    def test_manual_shafts_use_given_values(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        inputs = baseline_inputs.with_changes(
            shaft_diameter_mode=ShaftDiameterMode.MANUAL,
            drive_shaft_diameter_in=1.5,
            tail_shaft_diameter_in=1.25,
        )
        outputs = calculate(inputs, parameters)
        assert outputs.drive_shaft_diameter_in == 1.5
        assert outputs.tail_shaft_diameter_in == 1.25
        assert outputs.drive_shaft_sizing is None

    def test_zero_width_still_computes(self, parameters: CalculationParameters) -> None:
        outputs = calculate(ConveyorInputs(conveyor_length_cc_in=120.0, belt_width_in=0.0), parameters)
        assert outputs.belt_weight_lbf == 0.0
        assert math.isfinite(outputs.total_belt_pull_lb)

    def test_zero_length_avg_load_is_not_an_exception(self, parameters: CalculationParameters) -> None:
        outputs = calculate(ConveyorInputs(conveyor_length_cc_in=0.0, belt_width_in=24.0), parameters)
        assert outputs.gravity_roller_quantity == 0

    def test_premium_flags(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        assert calculate(baseline_inputs, parameters).premium_flags.level == PremiumLevel.STANDARD
        inputs = baseline_inputs.with_changes(
            bed_type=BedType.ROLLER_BED,
            belt_tracking_method=BeltTrackingMethod.V_GUIDED,
            v_guide_key="K10",
        )
        flags = calculate(inputs, parameters).premium_flags
        assert flags.level == PremiumLevel.PREMIUM_PLUS
        assert flags.reasons == ["Roller bed construction", "V-guided belt tracking"]

    def test_deterministic(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        assert repr(calculate(baseline_inputs, parameters)) == repr(
            calculate(baseline_inputs, parameters)
        )

    def test_to_dict_uses_enum_values(
        self, baseline_inputs: ConveyorInputs, parameters: CalculationParameters
    ) -> None:
        data = calculate(baseline_inputs, parameters).to_dict()
        assert data["bed_type_used"] == "slider_bed"
        assert data["premium_flags"]["level"] == "standard"
