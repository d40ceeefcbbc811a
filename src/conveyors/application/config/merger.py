"""Parameter defaults and configuration merging.

Parameters are rebuilt for every request: the product family's defaults
first, then each override that is set. Nothing is mutated in place.

CLI arguments override configuration file inputs with the precedence
CLI args > config values > defaults. Only non-None CLI arguments apply.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from conveyors.application.config.loader import ConfigError
from conveyors.application.config.schemas import (
    ConveyorConfiguration,
    ConveyorInputsConfig,
    ParameterOverridesConfig,
)
from conveyors.domain.entities import CalculationParameters

logger = logging.getLogger(__name__)

# Default parameters per product family. The sliderbed family shares the
# belt conveyor's physics.
DEFAULT_PARAMETERS: dict[str, CalculationParameters] = {
    "belt_conveyor_v1": CalculationParameters(),
    "sliderbed_conveyor_v1": CalculationParameters(),
}


def default_parameters(product_key: str | None) -> CalculationParameters:
    return DEFAULT_PARAMETERS.get(product_key or "", DEFAULT_PARAMETERS["belt_conveyor_v1"])


def merge_parameters(
    product_key: str | None,
    overrides: Mapping[str, Any] | ParameterOverridesConfig | None = None,
) -> CalculationParameters:
    """Merge parameter overrides onto a product family's defaults.

    Args:
        product_key: Product family whose defaults apply.
        overrides: Mapping or schema of overrides. None values are ignored.

    Returns:
        A new CalculationParameters.

    Raises:
        ConfigError: If an override names an unknown parameter.
    """
    if overrides is None:
        return default_parameters(product_key)
    if isinstance(overrides, ParameterOverridesConfig):
        overrides = overrides.model_dump(exclude_none=True)

    unknown = sorted(set(overrides) - CalculationParameters.field_names())
    if unknown:
        raise ConfigError(
            message=f"Unknown parameter override(s): {', '.join(unknown)}",
            error_type="validation",
            details=[{"path": f"parameters.{key}", "message": "Unknown parameter"} for key in unknown],
        )

    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        logger.debug(f"Parameter overrides: {changes}")
    return replace(default_parameters(product_key), **changes)


def merge_config_with_cli(
    config: ConveyorConfiguration,
    *,
    product_key: str | None = None,
    **input_overrides: Any,
) -> ConveyorConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base ConveyorConfiguration to merge with.
        product_key: Override for the product key (if not None).
        **input_overrides: Overrides for input fields (ignored when None).

    Returns:
        A new ConveyorConfiguration with merged values.

    Example:
        >>> merged = merge_config_with_cli(config, belt_speed_fpm=90.0)
        >>> merged.inputs.belt_speed_fpm
        90.0
    """
    inputs_data = config.inputs.model_dump()
    for key, value in input_overrides.items():
        if value is not None:
            inputs_data[key] = value

    return ConveyorConfiguration(
        schema_version=config.schema_version,
        product_key=product_key if product_key is not None else config.product_key,
        inputs=ConveyorInputsConfig.model_validate(inputs_data),
        parameters=config.parameters,
        bom=config.bom,
    )
