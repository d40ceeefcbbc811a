"""Adapter to convert configuration schemas into domain objects.

The pydantic schemas describe the file format; the domain works with frozen
dataclasses. These functions are the only place the two meet.
"""

from conveyors.application.config.merger import merge_parameters
from conveyors.application.config.schemas import (
    BomRequestConfig,
    ConveyorConfiguration,
    ConveyorInputsConfig,
)
from conveyors.domain.entities import CalculationParameters, ConveyorInputs
from conveyors.domain.services.bom import BomContext


def config_to_inputs(config: ConveyorInputsConfig) -> ConveyorInputs:
    """Convert validated input schema to the domain record."""
    return ConveyorInputs(**dict(config))


def config_to_parameters(config: ConveyorConfiguration) -> CalculationParameters:
    """Merge the configuration's parameter overrides onto product defaults."""
    return merge_parameters(config.product_key, config.parameters)


def config_to_bom_context(config: BomRequestConfig) -> BomContext:
    """Convert a BOM request into resolver selections."""
    return BomContext(
        mounting_style=config.mounting_style,
        worm_ratio=config.worm_ratio,
        mounting_variant=config.mounting_variant,
        output_shaft_option=config.output_shaft_option,
        shaft_style=config.shaft_style,
        shaft_diameter_in=config.shaft_diameter_in,
        bushing_bore_in=config.bushing_bore_in,
    )
