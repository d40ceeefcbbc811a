"""Root configuration schema.

This module contains the root ConveyorConfiguration model which represents
the top-level structure of a conveyor configuration file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conveyors.application.config.schemas.base import (
    DEFAULT_PRODUCT_KEY,
    SUPPORTED_VERSIONS,
)
from conveyors.application.config.schemas.bom_schema import BomRequestConfig
from conveyors.application.config.schemas.inputs_schema import ConveyorInputsConfig
from conveyors.application.config.schemas.parameters_schema import (
    ParameterOverridesConfig,
)


class ConveyorConfiguration(BaseModel):
    """Root configuration model for a conveyor configuration file.

    Attributes:
        schema_version: Version of the configuration schema.
        product_key: Product family whose defaults and wording apply.
        inputs: Conveyor application inputs.
        parameters: Overrides of the product's default parameters.
        bom: Optional gearmotor selection to resolve.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.1"
    product_key: str = DEFAULT_PRODUCT_KEY
    inputs: ConveyorInputsConfig
    parameters: ParameterOverridesConfig = Field(default_factory=ParameterOverridesConfig)
    bom: BomRequestConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version '{v}'. Supported versions: {supported}")
        return v
