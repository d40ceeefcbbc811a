"""Belt tracking advisory validator.

Feeds the tracking risk advisor into validation. Findings are advisory
warnings on belt_tracking_method and only appear when the estimated risk
is Medium or High and V-guided tracking has not already been selected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conveyors.domain.services.tracking import assess
from conveyors.domain.value_objects import TrackingRiskLevel

from .base import ValidationResult

if TYPE_CHECKING:
    from conveyors.application.config.products import ProductProfile
    from conveyors.domain.entities import CalculationParameters, ConveyorInputs

TRACKING_FIELD = "belt_tracking_method"


class TrackingValidator:
    """Warns when the tracking selection is riskier than recommended."""

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "tracking"

    def validate(
        self,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        result = ValidationResult()
        if inputs.is_v_guided:
            return result

        guidance = assess(inputs)
        if guidance.risk_level == TrackingRiskLevel.LOW:
            return result

        result.add_warning(
            TRACKING_FIELD,
            f"Tracking risk is {guidance.risk_level.value}. {guidance.summary}",
        )
        for warning in guidance.warnings:
            result.add_warning(TRACKING_FIELD, warning)
        return result
