"""Configuration schema models for conveyor configuration files.

The schemas are organized into the following modules:
- base.py: Version constants and the default product key
- inputs_schema.py: Conveyor application inputs
- parameters_schema.py: Calculation parameter overrides
- bom_schema.py: Gearmotor BOM request
- root.py: Root configuration model
"""

from conveyors.application.config.schemas.base import (
    DEFAULT_PRODUCT_KEY as DEFAULT_PRODUCT_KEY,
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
)
from conveyors.application.config.schemas.bom_schema import (
    BomRequestConfig as BomRequestConfig,
)
from conveyors.application.config.schemas.inputs_schema import (
    ConveyorInputsConfig as ConveyorInputsConfig,
)
from conveyors.application.config.schemas.parameters_schema import (
    ParameterOverridesConfig as ParameterOverridesConfig,
)
from conveyors.application.config.schemas.root import (
    ConveyorConfiguration as ConveyorConfiguration,
)

__all__ = [
    "DEFAULT_PRODUCT_KEY",
    "SUPPORTED_VERSIONS",
    "BomRequestConfig",
    "ConveyorConfiguration",
    "ConveyorInputsConfig",
    "ParameterOverridesConfig",
]
