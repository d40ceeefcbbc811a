"""Calculation engine: normalize, validate, calculate, attach metadata.

The engine composes the validators and the formula pipeline into one call.
Outputs are computed even when validation finds blocking errors so callers
can show partial results next to the errors. Telemetry hooks are passed
per call and never influence the result.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from conveyors.application.config.adapter import config_to_inputs
from conveyors.application.config.loader import load_inputs_from_dict
from conveyors.application.config.merger import merge_parameters
from conveyors.application.config.products import get_product_profile
from conveyors.application.config.schemas import ParameterOverridesConfig
from conveyors.application.config.validators import (
    ValidationMessage,
    ValidatorRegistry,
    default_registry,
)
from conveyors.contracts.hooks import CalculationHooks
from conveyors.domain.entities import CalculationParameters, ConveyorInputs
from conveyors.domain.services.formulas import ConveyorOutputs, calculate

logger = logging.getLogger(__name__)

ParameterSource = CalculationParameters | ParameterOverridesConfig | Mapping[str, Any] | None


@dataclass(frozen=True)
class CalculationMetadata:
    """Identity of the model that produced a result.

    Attributes:
        model_key: Product/model key.
        model_version_id: Model version identifier.
        calculated_at: ISO 8601 UTC timestamp.
    """

    model_key: str
    model_version_id: str
    calculated_at: str


@dataclass(frozen=True)
class CalculationResult:
    """Result of one validate + calculate cycle.

    Attributes:
        success: True when there are no blocking errors.
        outputs: Computed outputs, present even when success is False.
        errors: Blocking findings.
        warnings: Advisory findings (warning and info severity).
        parameters: Parameters the outputs were computed with.
        metadata: Model identity and timestamp.
    """

    success: bool
    outputs: ConveyorOutputs | None
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)
    parameters: CalculationParameters | None = None
    metadata: CalculationMetadata | None = None

    @property
    def exit_code(self) -> int:
        """0 clean, 1 blocking errors, 2 warnings only."""
        if self.errors:
            return 1
        if any(w.severity.value == "warning" for w in self.warnings):
            return 2
        return 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "outputs": self.outputs.to_dict() if self.outputs is not None else None,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "metadata": {
                "model_key": self.metadata.model_key,
                "model_version_id": self.metadata.model_version_id,
                "calculated_at": self.metadata.calculated_at,
            }
            if self.metadata is not None
            else None,
        }


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CalculationEngine:
    """Runs validation and the formula pipeline for one configuration.

    Args:
        registry_factory: Builds the validator registry used for each call.
        clock: Returns the timestamp recorded in result metadata.
    """

    def __init__(
        self,
        registry_factory: Callable[[], ValidatorRegistry] = default_registry,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.registry_factory = registry_factory
        self.clock = clock

    def run(
        self,
        inputs: ConveyorInputs | Mapping[str, Any],
        parameters: ParameterSource = None,
        product_key: str | None = None,
        hooks: CalculationHooks | None = None,
        model_version_id: str | None = None,
    ) -> CalculationResult:
        """Validate and calculate a configuration.

        Args:
            inputs: Domain inputs, or a raw mapping that may use legacy
                field names.
            parameters: Complete parameters, or overrides to merge onto the
                product's defaults.
            product_key: Product family. None selects the belt conveyor.
            hooks: Optional lifecycle observer for this call only.
            model_version_id: Overrides the product's model version.

        Returns:
            CalculationResult with outputs, findings and metadata.

        Raises:
            ConfigError: If a raw mapping or parameter overrides are
                malformed. The error hook is notified first.
        """
        product = get_product_profile(product_key)
        _notify(hooks, "on_calc_start")
        started = time.perf_counter()

        try:
            canonical = self._coerce_inputs(inputs)
            params = self._coerce_parameters(product.key, parameters)
            validation = self.registry_factory().validate_all(canonical, params, product)
            outputs = calculate(canonical, params)
        except Exception as e:
            logger.error(f"Calculation failed for {product.key}: {e}")
            _notify(hooks, "on_calc_error", str(e))
            raise

        result = CalculationResult(
            success=validation.is_valid,
            outputs=outputs,
            errors=list(validation.errors),
            warnings=list(validation.warnings),
            parameters=params,
            metadata=CalculationMetadata(
                model_key=product.key,
                model_version_id=model_version_id or product.model_version_id,
                calculated_at=self.clock().isoformat(),
            ),
        )

        duration_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"Calculated {product.key} in {duration_ms:.1f} ms: "
            f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
        )
        _notify(hooks, "on_calc_success", duration_ms)
        return result

    @staticmethod
    def _coerce_inputs(inputs: ConveyorInputs | Mapping[str, Any]) -> ConveyorInputs:
        if isinstance(inputs, ConveyorInputs):
            return inputs
        return config_to_inputs(load_inputs_from_dict(inputs))

    @staticmethod
    def _coerce_parameters(product_key: str, parameters: ParameterSource) -> CalculationParameters:
        if isinstance(parameters, CalculationParameters):
            return parameters
        return merge_parameters(product_key, parameters)


def _notify(hooks: CalculationHooks | None, event: str, *args: Any) -> None:
    if hooks is None:
        return
    try:
        getattr(hooks, event)(*args)
    except Exception as e:
        logger.warning(f"Calculation hook {event} raised: {e}")


def run_calculation(
    inputs: ConveyorInputs | Mapping[str, Any],
    parameters: ParameterSource = None,
    product_key: str | None = None,
    hooks: CalculationHooks | None = None,
) -> CalculationResult:
    """Run one calculation with the default engine."""
    return CalculationEngine().run(inputs, parameters, product_key=product_key, hooks=hooks)
