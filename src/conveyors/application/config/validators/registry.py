"""Ordered validator pipeline.

A ValidatorRegistry is built per engine call. Validators run in the order
they were registered so structural problems are reported before parameter
problems, application rule findings and tracking advisories.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import ValidationResult
from .parameters import ParameterValidator
from .rules import DomainRulesValidator
from .structural import StructuralValidator
from .tracking import TrackingValidator

if TYPE_CHECKING:
    from conveyors.application.config.products import ProductProfile
    from conveyors.contracts.validators import Validator
    from conveyors.domain.entities import CalculationParameters, ConveyorInputs

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Named validators plus an on/off switch for each.

    Example:
        registry = default_registry()
        registry.disable("tracking")
        result = registry.validate_all(inputs, parameters, product)
    """

    def __init__(self) -> None:
        self._validators: dict[str, Validator] = {}
        self._enabled: dict[str, bool] = {}

    def _require(self, name: str) -> Validator:
        try:
            return self._validators[name]
        except KeyError:
            known = ", ".join(sorted(self._validators)) or "none"
            raise KeyError(
                f"Unknown validator '{name}'. Available validators: {known}"
            ) from None

    def register(self, validator: Validator) -> None:
        """Add a validator, or swap out the one already holding its name.

        A swapped validator keeps its original position and enabled state.
        """
        name = validator.name
        if name in self._validators:
            logger.warning(f"Replacing validator '{name}' with {type(validator).__name__}")
        else:
            self._enabled[name] = True
        self._validators[name] = validator
        logger.debug(f"Validator '{name}' at position {list(self._validators).index(name)}")

    def get(self, name: str) -> Validator:
        """Look up a validator; KeyError lists the known names."""
        return self._require(name)

    def available(self) -> list[str]:
        return list(self._validators)

    def is_registered(self, name: str) -> bool:
        return name in self._validators

    def enable(self, name: str) -> None:
        self._require(name)
        self._enabled[name] = True

    def disable(self, name: str) -> None:
        """Skip a validator in validate_all() until it is enabled again."""
        self._require(name)
        self._enabled[name] = False
        logger.debug(f"Validator '{name}' switched off")

    def is_enabled(self, name: str) -> bool:
        return self._enabled.get(name, False)

    def validate_all(
        self,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        """Merge the findings of every enabled validator, in order.

        An exception inside one validator is turned into an error on the
        "validation" field and the remaining validators still run.
        """
        result = ValidationResult()
        active = [(n, v) for n, v in self._validators.items() if self._enabled[n]]

        for name, validator in active:
            try:
                found = validator.validate(inputs, parameters, product)
            except Exception as e:
                logger.exception(f"Validator '{name}' crashed")
                result.add_error("validation", f"Validator '{name}' failed: {e}")
                continue
            logger.debug(
                f"Validator '{name}': {len(found.errors)} error(s), "
                f"{len(found.warnings)} warning(s)"
            )
            result.merge(found)

        return result

    def validate_single(
        self,
        name: str,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        """Run one validator by name, whether or not it is enabled."""
        return self._require(name).validate(inputs, parameters, product)


def default_registry() -> ValidatorRegistry:
    """Registry with the standard validators in reporting order."""
    registry = ValidatorRegistry()
    for validator in (
        StructuralValidator(),
        ParameterValidator(),
        DomainRulesValidator(),
        TrackingValidator(),
    ):
        registry.register(validator)
    return registry
