"""Protocol implemented by every validator tier.

A tier sees the canonical inputs, the merged calculation parameters and
the active product profile, and reports what it finds as a
ValidationResult. Tiers are plain classes; nothing needs to subclass this.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from conveyors.application.config.products import ProductProfile
    from conveyors.application.config.validators.base import ValidationResult
    from conveyors.domain.entities import CalculationParameters, ConveyorInputs


@runtime_checkable
class Validator(Protocol):
    """One named tier of configuration checks.

    Example:
        class WideBeltCheck:
            name = "wide_belt"

            def validate(self, inputs, parameters, product):
                result = ValidationResult()
                if inputs.belt_width_in > 120:
                    result.add_warning("belt_width_in", "Very wide belt")
                return result
    """

    @property
    def name(self) -> str:
        """Registry key, e.g. "structural" or "tracking"."""
        ...

    def validate(
        self,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        """Check one configuration; bad input is a finding, not an exception."""
        ...
