"""Calculation parameter validator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ValidationResult

if TYPE_CHECKING:
    from conveyors.application.config.products import ProductProfile
    from conveyors.domain.entities import CalculationParameters, ConveyorInputs


class ParameterValidator:
    """Sanity checks on the merged calculation parameters.

    Parameter ranges are wider than the matching input override ranges:
    these guard against a broken defaults source or a bad override, not
    against unusual applications.
    """

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "parameters"

    def validate(
        self,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        return self.check(parameters)

    def check(self, parameters: CalculationParameters) -> ValidationResult:
        """Validate parameters on their own."""
        result = ValidationResult()
        if not (0.1 <= parameters.friction_coeff <= 1.0):
            result.add_error("friction_coeff", "Friction coefficient must be between 0.1 and 1.0")
        if not parameters.safety_factor >= 1.0:
            result.add_error("safety_factor", "Safety factor must be >= 1.0")
        if not parameters.starting_belt_pull_lb >= 0:
            result.add_error("starting_belt_pull_lb", "Starting belt pull must be >= 0")
        if not parameters.motor_rpm > 0:
            result.add_error("motor_rpm", "Motor RPM must be greater than 0")
        if not parameters.gravity_in_per_s2 > 0:
            result.add_error("gravity_in_per_s2", "Gravity constant must be greater than 0")
        return result
