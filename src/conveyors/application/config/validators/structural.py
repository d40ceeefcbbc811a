"""Structural input validator.

Field-local range and presence checks on the raw inputs. Every check runs;
the result holds the union of all failures, never just the first one.
Optional fields that are not provided are skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conveyors.domain.services.formulas.constants import FRAME_MIN_HEIGHT_IN
from conveyors.domain.value_objects import FrameHeightMode, ShaftDiameterMode, SpeedMode

from .base import ValidationResult

if TYPE_CHECKING:
    from conveyors.application.config.products import ProductProfile
    from conveyors.domain.entities import CalculationParameters, ConveyorInputs

# Advanced parameter ranges
SAFETY_FACTOR_MIN = 1.0
SAFETY_FACTOR_MAX = 5.0
BELT_COEFF_MIN = 0.05
BELT_COEFF_MAX = 0.30
STARTING_PULL_MAX_LB = 2000.0
FRICTION_COEFF_MIN = 0.05
FRICTION_COEFF_MAX = 0.6
MOTOR_RPM_MIN = 800.0
MOTOR_RPM_MAX = 3600.0
SHAFT_DIAMETER_MIN_IN = 0.5
SHAFT_DIAMETER_MAX_IN = 4.0


def _lt(value: float | None, limit: float) -> bool:
    """True when a provided value is below a limit; nan counts as below."""
    return value is not None and not value >= limit


def _le(value: float | None, limit: float) -> bool:
    return value is not None and not value > limit


def _gt(value: float | None, limit: float) -> bool:
    return value is not None and value > limit


class StructuralValidator:
    """Range and presence checks on individual input fields.

    These are blocking errors. They do not look at combinations of fields
    beyond simple presence requirements (a V-guide profile for V-guided
    tracking, shaft diameters for manual shaft sizing).
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "structural"

    def validate(
        self,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        """Check every input field against its valid range.

        Args:
            inputs: Canonical configuration inputs.
            parameters: Unused; parameters have their own validator.
            product: Unused; structural checks are product independent.

        Returns:
            ValidationResult with one error per failed check.
        """
        result = ValidationResult()
        self._check_geometry(inputs, result)
        self._check_speed_and_throughput(inputs, result)
        self._check_part(inputs, result)
        self._check_overrides(inputs, result)
        self._check_selections(inputs, result)
        return result

    def _check_geometry(self, inputs: ConveyorInputs, result: ValidationResult) -> None:
        if _le(inputs.conveyor_length_cc_in, 0):
            result.add_error("conveyor_length_cc_in", "Conveyor Length (C-C) must be greater than 0")
        if _le(inputs.belt_width_in, 0):
            result.add_error("belt_width_in", "Belt Width must be greater than 0")
        if _lt(inputs.conveyor_incline_deg, 0):
            result.add_error("conveyor_incline_deg", "Incline Angle must be >= 0")
        for field in ("pulley_diameter_in", "drive_pulley_diameter_in", "tail_pulley_diameter_in"):
            if _le(getattr(inputs, field), 0):
                result.add_error(field, "Pulley Diameter must be greater than 0")
        if _lt(inputs.drop_height_in, 0):
            result.add_error("drop_height_in", "Drop height cannot be negative.")
        if (
            inputs.frame_height_mode == FrameHeightMode.CUSTOM
            and _lt(inputs.custom_frame_height_in, FRAME_MIN_HEIGHT_IN)
        ):
            result.add_error(
                "custom_frame_height_in",
                f'Custom frame height must be >= {FRAME_MIN_HEIGHT_IN}"',
            )

    def _check_speed_and_throughput(self, inputs: ConveyorInputs, result: ValidationResult) -> None:
        if inputs.speed_mode == SpeedMode.BELT_SPEED and _le(inputs.belt_speed_fpm, 0):
            result.add_error("belt_speed_fpm", "Belt Speed must be greater than 0")
        for field in ("drive_rpm", "drive_rpm_input"):
            if _le(getattr(inputs, field), 0):
                result.add_error(field, "Drive RPM must be greater than 0")
        if inputs.speed_mode == SpeedMode.DRIVE_RPM and (
            inputs.drive_rpm_input is None and inputs.drive_rpm is None
        ):
            result.add_error("drive_rpm_input", "Drive RPM is required when speed mode is drive_rpm")
        if _lt(inputs.required_throughput_pph, 0):
            result.add_error("required_throughput_pph", "Required throughput must be >= 0")
        if _lt(inputs.throughput_margin_pct, 0):
            result.add_error("throughput_margin_pct", "Throughput margin must be >= 0")

    def _check_part(self, inputs: ConveyorInputs, result: ValidationResult) -> None:
        if _le(inputs.part_weight_lbs, 0):
            result.add_error("part_weight_lbs", "Part Weight must be greater than 0")
        if _le(inputs.part_length_in, 0):
            result.add_error("part_length_in", "Part Length must be greater than 0")
        if _le(inputs.part_width_in, 0):
            result.add_error("part_width_in", "Part Width must be greater than 0")
        if _lt(inputs.part_spacing_in, 0):
            result.add_error("part_spacing_in", "Part Spacing must be >= 0")

    def _check_overrides(self, inputs: ConveyorInputs, result: ValidationResult) -> None:
        if _lt(inputs.safety_factor, SAFETY_FACTOR_MIN):
            result.add_error("safety_factor", "Safety factor must be >= 1.0")
        if _gt(inputs.safety_factor, SAFETY_FACTOR_MAX):
            result.add_error("safety_factor", "Safety factor must be <= 5.0")

        self._check_belt_coefficient(inputs.belt_coeff_piw, "belt_coeff_piw", "PIW", result)
        self._check_belt_coefficient(inputs.belt_coeff_pil, "belt_coeff_pil", "PIL", result)

        if _lt(inputs.starting_belt_pull_lb, 0):
            result.add_error("starting_belt_pull_lb", "Starting belt pull must be >= 0")
        if _gt(inputs.starting_belt_pull_lb, STARTING_PULL_MAX_LB):
            result.add_error("starting_belt_pull_lb", "Starting belt pull must be <= 2000")

        if _lt(inputs.friction_coeff, FRICTION_COEFF_MIN):
            result.add_error("friction_coeff", "Friction coefficient must be >= 0.05")
        if _gt(inputs.friction_coeff, FRICTION_COEFF_MAX):
            result.add_error("friction_coeff", "Friction coefficient must be <= 0.6")

        if _lt(inputs.motor_rpm, MOTOR_RPM_MIN):
            result.add_error("motor_rpm", "Motor RPM must be >= 800")
        if _gt(inputs.motor_rpm, MOTOR_RPM_MAX):
            result.add_error("motor_rpm", "Motor RPM must be <= 3600")

    def _check_selections(self, inputs: ConveyorInputs, result: ValidationResult) -> None:
        if inputs.is_v_guided and not inputs.v_guide_key:
            result.add_error(
                "v_guide_key", "V-guide profile is required when belt tracking method is V-guided"
            )

        if inputs.shaft_diameter_mode == ShaftDiameterMode.MANUAL:
            if inputs.drive_shaft_diameter_in is None or _le(inputs.drive_shaft_diameter_in, 0):
                result.add_error(
                    "drive_shaft_diameter_in",
                    "Drive shaft diameter is required when shaft diameter mode is Manual",
                )
            if inputs.tail_shaft_diameter_in is None or _le(inputs.tail_shaft_diameter_in, 0):
                result.add_error(
                    "tail_shaft_diameter_in",
                    "Tail shaft diameter is required when shaft diameter mode is Manual",
                )

        self._check_belt_override(inputs.belt_piw_override, "belt_piw_override", "PIW", result)
        self._check_belt_override(inputs.belt_pil_override, "belt_pil_override", "PIL", result)

        for field, label in (
            ("drive_shaft_diameter_in", "Drive"),
            ("tail_shaft_diameter_in", "Tail"),
        ):
            value = getattr(inputs, field)
            if _lt(value, SHAFT_DIAMETER_MIN_IN):
                result.add_error(field, f'{label} shaft diameter must be >= 0.5"')
            if _gt(value, SHAFT_DIAMETER_MAX_IN):
                result.add_error(field, f'{label} shaft diameter must be <= 4.0"')

    @staticmethod
    def _check_belt_coefficient(
        value: float | None, field: str, label: str, result: ValidationResult
    ) -> None:
        if _le(value, 0):
            result.add_error(field, f"{label} must be > 0")
        if _lt(value, BELT_COEFF_MIN) or _gt(value, BELT_COEFF_MAX):
            result.add_error(field, f"{label} should be between 0.05 and 0.30 lb/in")

    @staticmethod
    def _check_belt_override(
        value: float | None, field: str, label: str, result: ValidationResult
    ) -> None:
        if _le(value, 0):
            result.add_error(field, f"Belt {label} override must be > 0")
        if _lt(value, BELT_COEFF_MIN) or _gt(value, BELT_COEFF_MAX):
            result.add_error(field, f"Belt {label} override should be between 0.05 and 0.30 lb/in")
